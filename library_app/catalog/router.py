"""
Route definitions for the catalogue API.

Endpoints under /api/catalog:
- GET    /books                   : list books, with optional text search and category
- GET    /books/{book_id}         : get one book
- POST   /books                   : add a book from the add-book form
- POST   /books/{book_id}/toggle  : flip a book's availability
- DELETE /books/{book_id}         : remove a book
- GET    /categories              : distinct categories, sorted
"""

from __future__ import annotations

import logging
import threading
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from .entries import CatalogEntry
from .schemas import AddBookForm, Book, BookList
from .store import ALL_CATEGORIES, Catalog

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/catalog", tags=["catalog"])


def get_catalog(request: Request) -> Catalog:
    return request.app.state.catalog


def get_catalog_lock(request: Request) -> threading.Lock:
    """Lock held by the app next to its catalogue.

    Sync endpoints run on FastAPI's threadpool; every read-then-write on
    the catalogue happens under this lock.
    """
    return request.app.state.catalog_lock


def _get_or_404(catalog: Catalog, book_id: str) -> CatalogEntry:
    book = catalog.get_book(book_id)
    if book is None:
        raise HTTPException(status_code=404, detail="Book not found")
    return book


@router.get("/books", response_model=BookList)
def list_books(
    q: Optional[str] = Query(default=None, description="Search in title and author"),
    category: str = Query(default=ALL_CATEGORIES, description="Exact category, or 'all'"),
    catalog: Catalog = Depends(get_catalog),
    lock: threading.Lock = Depends(get_catalog_lock),
) -> BookList:
    """
    Returns the books matching ``q`` (case-insensitive, title or author)
    within ``category``, in insertion order. ``categories`` always lists
    every category in the catalogue, not only those of the matches.
    """
    with lock:
        books = catalog.query(q, category)
        categories = catalog.get_categories()
    return BookList(
        total=len(books),
        categories=categories,
        items=[Book.from_entry(b) for b in books],
    )


@router.get("/books/{book_id}", response_model=Book)
def get_book(
    book_id: str,
    catalog: Catalog = Depends(get_catalog),
    lock: threading.Lock = Depends(get_catalog_lock),
) -> Book:
    with lock:
        return Book.from_entry(_get_or_404(catalog, book_id))


@router.post("/books", response_model=Book, status_code=201)
def add_book(
    form: AddBookForm,
    catalog: Catalog = Depends(get_catalog),
    lock: threading.Lock = Depends(get_catalog_lock),
) -> Book:
    with lock:
        book = catalog.add_book(form.to_config())
        if book is None:
            # The form has already been validated; a rejection here is a bug.
            raise HTTPException(status_code=422, detail="Book could not be added")
        logger.info("Added %s %s: %s", book.kind, book.id, book.display_info())
        return Book.from_entry(book)


@router.post("/books/{book_id}/toggle", response_model=Book)
def toggle_availability(
    book_id: str,
    catalog: Catalog = Depends(get_catalog),
    lock: threading.Lock = Depends(get_catalog_lock),
) -> Book:
    with lock:
        book = catalog.toggle_availability(book_id)
        if book is None:
            raise HTTPException(status_code=404, detail="Book not found")
        return Book.from_entry(book)


@router.delete("/books/{book_id}")
def remove_book(
    book_id: str,
    catalog: Catalog = Depends(get_catalog),
    lock: threading.Lock = Depends(get_catalog_lock),
):
    with lock:
        book = catalog.remove_book_by_id(book_id)
    if book is None:
        raise HTTPException(status_code=404, detail="Book not found")
    logger.info("Removed %s: %s", book.id, book.display_info())
    return {"status": "ok", "id": book.id}


@router.get("/categories", response_model=List[str])
def list_categories(
    catalog: Catalog = Depends(get_catalog),
    lock: threading.Lock = Depends(get_catalog_lock),
) -> List[str]:
    with lock:
        return catalog.get_categories()
