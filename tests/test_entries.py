"""Tests for catalogue entries."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from library_app.catalog.entries import CatalogEntry, ReferenceEntry, generate_id


@pytest.fixture
def book():
    return CatalogEntry(title="Clean Code", author="Robert C. Martin", category="Software")


@pytest.fixture
def ref_book():
    return ReferenceEntry(
        title="Encyclopedia of Plants",
        author="A. Botanist",
        category="Reference",
        location_code="Ref-PL-03",
    )


def test_defaults(book):
    assert book.is_available is True
    assert book.kind == "book"
    assert book.id.startswith("b_")


def test_availability_is_coerced_to_bool():
    assert CatalogEntry("T", "A", "C", is_available=0).is_available is False
    assert CatalogEntry("T", "A", "C", is_available="yes").is_available is True


def test_ids_are_unique():
    ids = {generate_id() for _ in range(1000)}
    ids |= {CatalogEntry("T", "A", "C").id for _ in range(100)}
    assert len(ids) == 1100


def test_fields_are_read_only(book):
    with pytest.raises(AttributeError):
        book.title = "Other"
    with pytest.raises(AttributeError):
        book.id = "b_x"
    with pytest.raises(AttributeError):
        book.is_available = False


def test_setters_apply_strings(book):
    assert book.set_title("Clean Architecture") is True
    assert book.set_author("Uncle Bob") is True
    assert book.set_category("Architecture") is True
    assert (book.title, book.author, book.category) == ("Clean Architecture", "Uncle Bob", "Architecture")


@pytest.mark.parametrize("value", [None, 42, 3.5, ["x"], b"bytes"])
def test_setters_ignore_non_strings(book, value):
    assert book.set_title(value) is False
    assert book.set_author(value) is False
    assert book.set_category(value) is False
    assert (book.title, book.author, book.category) == ("Clean Code", "Robert C. Martin", "Software")


def test_empty_string_is_accepted(book):
    assert book.set_author("") is True
    assert book.author == ""


def test_toggle_twice_restores(book):
    assert book.toggle_availability() is False
    assert book.is_available is False
    assert book.toggle_availability() is True
    assert book.is_available is True


def test_display_info(book):
    assert book.display_info() == "Clean Code — Robert C. Martin (Software)"
    assert "[Location: " not in book.display_info()


def test_reference_display_info(ref_book):
    assert ref_book.kind == "reference"
    assert ref_book.display_info() == (
        "Encyclopedia of Plants — A. Botanist (Reference) [Location: Ref-PL-03]"
    )


def test_display_info_dispatches_on_variant(book, ref_book):
    infos = [b.display_info() for b in (book, ref_book)]
    assert "[Location: " not in infos[0]
    assert infos[1].endswith("[Location: Ref-PL-03]")


def test_display_info_follows_setters(ref_book):
    ref_book.set_location_code("Ref-02")
    ref_book.set_title("Plants")
    assert ref_book.display_info() == "Plants — A. Botanist (Reference) [Location: Ref-02]"


def test_reference_location_defaults_to_empty():
    ref = ReferenceEntry("Atlas", "Someone", "Reference")
    assert ref.location_code == ""
    assert ref.display_info().endswith("[Location: ]")
    assert ReferenceEntry("Atlas", "Someone", "Reference", location_code=None).location_code == ""


def test_location_setter_is_guarded(ref_book):
    assert ref_book.set_location_code(7) is False
    assert ref_book.location_code == "Ref-PL-03"
    assert ref_book.set_location_code("") is True
    assert ref_book.location_code == ""


def test_reference_entry_is_a_catalog_entry(ref_book):
    assert isinstance(ref_book, CatalogEntry)
    assert not hasattr(CatalogEntry("T", "A", "C"), "location_code")


def test_ids_are_unique_across_threads():
    with ThreadPoolExecutor(max_workers=8) as pool:
        ids = list(pool.map(lambda _: generate_id(), range(2000)))
    assert len(set(ids)) == 2000
