"""
Catalog package for the library catalogue.

The domain model lives in ``entries`` (general and reference books),
the collection and its search/filter/mutation operations in ``store``,
and the pydantic schemas and REST routes in ``schemas`` and ``router``.
The catalogue is held in memory only; it is rebuilt from the seed file
every time the application starts.
"""

from .entries import CatalogEntry, ReferenceEntry  # noqa: F401
from .router import router as catalog_router  # noqa: F401
from .schemas import EntryConfig  # noqa: F401
from .store import Catalog, load_seed_records  # noqa: F401
