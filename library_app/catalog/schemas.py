"""
Pydantic schema definitions for the catalog module.

``EntryConfig`` is the raw record configuration accepted by
``Catalog.add_book()`` and by the seed file; it takes the camelCase
keys used by the front-end (``isAvailable``, ``isReference``,
``locationCode``) as well as their snake_case names. ``Book`` is what
the API returns for a single entry, and ``BookList`` bundles a list of
books with the categories currently present so that clients can
rebuild their category dropdown from the same response.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .entries import CatalogEntry, ReferenceEntry

DEFAULT_CATEGORY = "General"
DEFAULT_LOCATION_CODE = "Ref-01"


class EntryConfig(BaseModel):
    """Raw configuration for a single catalogue entry.

    Any mapping is accepted: missing text fields default to ``""``,
    other values are converted with ``str()`` and the two flags are
    reduced to their truthiness.
    """

    model_config = ConfigDict(populate_by_name=True)

    title: str = ""
    author: str = ""
    category: str = ""
    is_available: bool = Field(default=True, alias="isAvailable")
    is_reference: bool = Field(default=False, alias="isReference")
    location_code: str = Field(default="", alias="locationCode")

    @field_validator("title", "author", "category", "location_code", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)

    @field_validator("is_available", "is_reference", mode="before")
    @classmethod
    def _coerce_flag(cls, value: Any) -> bool:
        return bool(value)

    def build(self) -> CatalogEntry:
        """Instantiate the entry variant this configuration describes."""
        if self.is_reference:
            return ReferenceEntry(
                title=self.title,
                author=self.author,
                category=self.category,
                is_available=self.is_available,
                location_code=self.location_code,
            )
        return CatalogEntry(
            title=self.title,
            author=self.author,
            category=self.category,
            is_available=self.is_available,
        )


class AddBookForm(BaseModel):
    """Body of ``POST /books``.

    Mirrors the add-book form of the front-end: text fields are
    stripped, an empty category falls back to ``General`` and a reference
    book without a location code is shelved at ``Ref-01``. New books are
    always available.
    """

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    title: str = Field(min_length=1)
    author: str = Field(min_length=1)
    category: str = ""
    is_reference: bool = Field(default=False, alias="isReference")
    location_code: str = Field(default="", alias="locationCode")

    def to_config(self) -> EntryConfig:
        return EntryConfig(
            title=self.title,
            author=self.author,
            category=self.category or DEFAULT_CATEGORY,
            is_available=True,
            is_reference=self.is_reference,
            location_code=(self.location_code or DEFAULT_LOCATION_CODE) if self.is_reference else "",
        )


class Book(BaseModel):
    """A single catalogue entry as returned by the API.

    ``location_code`` is only set for reference books; ``display_info``
    carries the variant-specific summary line.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str
    kind: str
    title: str
    author: str
    category: str
    is_available: bool = Field(alias="isAvailable")
    location_code: Optional[str] = Field(default=None, alias="locationCode")
    display_info: str = Field(alias="displayInfo")

    @classmethod
    def from_entry(cls, entry: CatalogEntry) -> "Book":
        return cls(
            id=entry.id,
            kind=entry.kind,
            title=entry.title,
            author=entry.author,
            category=entry.category,
            is_available=entry.is_available,
            location_code=getattr(entry, "location_code", None),
            display_info=entry.display_info(),
        )


class BookList(BaseModel):
    """A wrapper for results returned from the ``/books`` endpoint."""

    total: int
    categories: List[str]
    items: List[Book]
