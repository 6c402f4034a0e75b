"""
In-memory data store for the catalogue.

``Catalog`` owns an ordered list of entries and exposes the search,
filter and mutation operations used by the API. Insertion order is the
canonical order: every query returns entries in the order they were
added, and every query returns a new list so callers cannot alter the
catalogue by mutating a result.

None of the operations raise. Unknown ids and non-record inputs are
reported through the return value (``None``) and logged.

The seed collection is read from ``data/sample_books.json`` by
``load_seed_records()``.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Iterable, Iterator, List, Optional, Union

from .entries import CatalogEntry
from .schemas import EntryConfig

logger = logging.getLogger(__name__)

DATA_FILE = Path(__file__).resolve().parents[1] / "data" / "sample_books.json"

# Category value meaning "no category filter"
ALL_CATEGORIES = "all"

Record = Union[CatalogEntry, EntryConfig, Mapping]


def load_seed_records(path: Optional[Path] = None) -> List[dict]:
    """Load raw record configurations from a JSON file.

    Parameters
    ----------
    path : Optional[Path]
        File to read. Defaults to the bundled ``sample_books.json``.

    Returns
    -------
    List[dict]
        The records found in the file. A missing or malformed file is
        logged and yields an empty list; entries that are not JSON
        objects are skipped.
    """
    source = Path(path) if path is not None else DATA_FILE
    try:
        with source.open("r", encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, ValueError) as exc:
        logger.error("Could not load seed records from %s: %s", source, exc)
        return []
    if not isinstance(raw, list):
        logger.error("Seed file %s does not contain a list of records", source)
        return []
    records = [entry for entry in raw if isinstance(entry, dict)]
    if len(records) != len(raw):
        logger.warning("Skipped %d non-object seed records in %s", len(raw) - len(records), source)
    return records


def _norm(s: Any) -> str:
    """Normalize a value for case-insensitive comparison.

    ``None`` becomes the empty string; anything else is converted with
    ``str()``, stripped and lowercased.
    """
    if s is None:
        return ""
    return str(s).strip().lower()


def _in_category(books: Iterable[CatalogEntry], category: Any) -> List[CatalogEntry]:
    """Keep the books whose category equals ``category`` exactly.

    A falsy ``category`` or ``"all"`` keeps every book. Always returns a
    new list.
    """
    if not category or category == ALL_CATEGORIES:
        return list(books)
    return [b for b in books if b.category == category]


class Catalog:
    """An ordered, in-memory collection of catalogue entries."""

    def __init__(self, records: Iterable[Record] = ()) -> None:
        self._books: List[CatalogEntry] = []
        for record in records:
            self.add_book(record)

    def __len__(self) -> int:
        return len(self._books)

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(list(self._books))

    def __contains__(self, book_id: object) -> bool:
        return self._find(book_id) is not None

    def _find(self, book_id: object) -> Optional[CatalogEntry]:
        return next((b for b in self._books if b.id == book_id), None)

    # Mutations

    def add_book(self, record: Record) -> Optional[CatalogEntry]:
        """Append an entry to the catalogue.

        ``record`` is either an entry, which is appended as-is, or a raw
        configuration (an ``EntryConfig`` or a mapping). A configuration
        with a truthy ``isReference`` builds a ``ReferenceEntry``,
        otherwise a ``CatalogEntry``.

        Returns
        -------
        Optional[CatalogEntry]
            The appended entry, or ``None`` when ``record`` was rejected:
            it is neither an entry nor a mapping, or it is an entry
            already in the catalogue. Mappings are always added; see
            ``EntryConfig`` for how missing or odd fields are filled in.
        """
        if isinstance(record, CatalogEntry):
            if self._find(record.id) is not None:
                logger.warning("Entry %s is already in the catalogue", record.id)
                return None
            entry = record
        elif isinstance(record, EntryConfig):
            entry = record.build()
        elif isinstance(record, Mapping):
            entry = EntryConfig.model_validate(dict(record)).build()
        else:
            logger.warning("Rejected record of type %s", type(record).__name__)
            return None
        self._books.append(entry)
        logger.debug("Added %s %s", entry.kind, entry.id)
        return entry

    def remove_book_by_id(self, book_id: object) -> Optional[CatalogEntry]:
        """Remove the entry with ``book_id``; returns it, or ``None`` if absent."""
        for idx, book in enumerate(self._books):
            if book.id == book_id:
                logger.debug("Removed %s", book_id)
                return self._books.pop(idx)
        logger.debug("Remove ignored, unknown id %r", book_id)
        return None

    def toggle_availability(self, book_id: object) -> Optional[CatalogEntry]:
        """Flip availability of the entry with ``book_id``; returns it, or ``None``."""
        book = self._find(book_id)
        if book is None:
            logger.debug("Toggle ignored, unknown id %r", book_id)
            return None
        book.toggle_availability()
        return book

    # Queries

    def get_book(self, book_id: object) -> Optional[CatalogEntry]:
        return self._find(book_id)

    def get_all_books(self) -> List[CatalogEntry]:
        return list(self._books)

    def search_books(self, query: Any = "") -> List[CatalogEntry]:
        """Return entries whose title or author contains ``query``.

        Matching is a case-insensitive substring test after stripping
        ``query``. An empty (or whitespace only, or ``None``) query
        returns every entry.
        """
        q = _norm(query)
        if not q:
            return list(self._books)
        return [b for b in self._books if q in _norm(b.title) or q in _norm(b.author)]

    def filter_by_category(self, category: Any = ALL_CATEGORIES) -> List[CatalogEntry]:
        """Return entries whose category equals ``category`` exactly.

        A falsy ``category`` or ``"all"`` returns every entry.
        """
        return _in_category(self._books, category)

    def query(self, q: Any = "", category: Any = ALL_CATEGORIES) -> List[CatalogEntry]:
        """Apply the text search and then the category filter."""
        return _in_category(self.search_books(q), category)

    def get_categories(self) -> List[str]:
        """Return the distinct categories present, sorted ascending."""
        return sorted({b.category for b in self._books}, key=str)
