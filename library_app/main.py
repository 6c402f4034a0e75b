# library_app/main.py
import logging
import threading
from typing import Optional

from fastapi import FastAPI

from .catalog import Catalog, catalog_router, load_seed_records
from .config import Settings, configure_logging, settings

logger = logging.getLogger(__name__)


def build_catalog(cfg: Optional[Settings] = None) -> Catalog:
    cfg = cfg or settings
    if not cfg.LOAD_SEED:
        return Catalog()
    catalog = Catalog(load_seed_records(cfg.SEED_FILE))
    logger.info("Catalog seeded with %d books", len(catalog))
    return catalog


configure_logging(settings.LOG_LEVEL)

app = FastAPI(
    title="Library Catalog",
    description=(
        "In-memory catalogue of books and reference books: search, "
        "category filtering, availability toggling and removal."
    ),
    version="1.0.0",
)
app.state.catalog = build_catalog()
app.state.catalog_lock = threading.Lock()
app.include_router(catalog_router)


@app.get("/")
def health_check():
    return {"status": "ok", "books": len(app.state.catalog)}
