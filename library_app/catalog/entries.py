"""
Catalogue entries.

Two variants of a catalogue record live here: the general
``CatalogEntry`` and the ``ReferenceEntry`` used for books that stay in
the library (encyclopedias, dictionaries, ...). Both expose the same
read-only accessors and the same ``display_info()`` capability, so
callers render an entry without knowing which variant they hold.

Fields are private; the only way to change them is through the guarded
``set_*`` methods, which ignore values of the wrong type, and through
``toggle_availability()``.
"""

from __future__ import annotations

import itertools
import logging
import threading
from typing import Any

logger = logging.getLogger(__name__)

# Process-wide id source
_id_counter = itertools.count(1)
_id_lock = threading.Lock()


def generate_id() -> str:
    """Return a new entry identifier, unique within the running process."""
    with _id_lock:
        n = next(_id_counter)
    return f"b_{n:06d}"


class CatalogEntry:
    """A general book record."""

    kind = "book"

    __slots__ = ("_id", "_title", "_author", "_category", "_is_available")

    def __init__(
        self,
        title: str,
        author: str,
        category: str,
        is_available: bool = True,
    ) -> None:
        self._id = generate_id()
        self._title = title
        self._author = author
        self._category = category
        self._is_available = bool(is_available)

    # Accessors

    @property
    def id(self) -> str:
        return self._id

    @property
    def title(self) -> str:
        return self._title

    @property
    def author(self) -> str:
        return self._author

    @property
    def category(self) -> str:
        return self._category

    @property
    def is_available(self) -> bool:
        return self._is_available

    # Guarded setters

    def _guarded_set(self, attr: str, value: Any) -> bool:
        if not isinstance(value, str):
            logger.debug(
                "Ignoring non-string %s for entry %s: %r", attr.lstrip("_"), self._id, value
            )
            return False
        setattr(self, attr, value)
        return True

    def set_title(self, value: Any) -> bool:
        """Replace the title. Returns ``False`` when ``value`` is not a string."""
        return self._guarded_set("_title", value)

    def set_author(self, value: Any) -> bool:
        return self._guarded_set("_author", value)

    def set_category(self, value: Any) -> bool:
        return self._guarded_set("_category", value)

    def toggle_availability(self) -> bool:
        """Flip the availability flag and return the new state."""
        self._is_available = not self._is_available
        return self._is_available

    def display_info(self) -> str:
        """Return a one-line human readable summary of the entry."""
        return f"{self.title} — {self.author} ({self.category})"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id!r}, title={self._title!r})"


class ReferenceEntry(CatalogEntry):
    """A reference book, shelved at a fixed location code."""

    kind = "reference"

    __slots__ = ("_location_code",)

    def __init__(
        self,
        title: str,
        author: str,
        category: str,
        is_available: bool = True,
        location_code: str = "",
    ) -> None:
        super().__init__(title, author, category, is_available)
        self._location_code = location_code if location_code is not None else ""

    @property
    def location_code(self) -> str:
        return self._location_code

    def set_location_code(self, value: Any) -> bool:
        return self._guarded_set("_location_code", value)

    def display_info(self) -> str:
        return f"{super().display_info()} [Location: {self.location_code}]"
