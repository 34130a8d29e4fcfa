"""Tests for the artwork catalog service."""

import pytest

from art_gallery.domain.errors import ConflictError, NotFoundError, ValidationError
from art_gallery.services.artworks import ArtworkService
from tests.conftest import FixedClock, InMemoryArtworkRepository


def _service(repository: InMemoryArtworkRepository) -> ArtworkService:
    return ArtworkService(repository, clock=FixedClock())


def test_create_generates_catalog_uid() -> None:
    repository = InMemoryArtworkRepository()
    repository.add("bt-PT-24-007")
    service = _service(repository)

    artwork = service.create(
        {
            "src": "https://cdn.example.com/a.jpg",
            "title": "Dusk",
            "price": "KES 9,000",
            "type": "Portrait",
        }
    )

    assert artwork.uid == "bt-PT-25-008"
    assert artwork.status == "Available"
    assert artwork.state == "In Progress"
    assert artwork.artist == "bt"
    assert artwork.type_code == "PT"
    assert artwork.sold_date is None


def test_create_uses_unknown_code_for_unlisted_type() -> None:
    service = _service(InMemoryArtworkRepository())

    artwork = service.create(
        {"src": "s", "title": "t", "price": "1", "type": "Collage", "artist": "jk"}
    )

    assert artwork.uid == "jk-XX-25-001"


def test_create_rejects_duplicate_uid() -> None:
    repository = InMemoryArtworkRepository()
    repository.add("bt-AB-25-001")
    service = _service(repository)

    with pytest.raises(ConflictError):
        service.create({"src": "s", "title": "t", "price": "1", "uid": "bt-AB-25-001"})


@pytest.mark.parametrize("missing", ["src", "title", "price"])
def test_create_requires_fields(missing: str) -> None:
    fields = {"src": "s", "title": "t", "price": "1"}
    fields[missing] = None
    service = _service(InMemoryArtworkRepository())

    with pytest.raises(ValidationError) as excinfo:
        service.create(fields)

    assert excinfo.value.field == missing


def test_create_rejects_unknown_status() -> None:
    service = _service(InMemoryArtworkRepository())

    with pytest.raises(ValidationError) as excinfo:
        service.create({"src": "s", "title": "t", "price": "1", "status": "Reserved"})

    assert excinfo.value.field == "status"


def test_create_sold_artwork_stamps_sold_date() -> None:
    clock = FixedClock()
    service = ArtworkService(InMemoryArtworkRepository(), clock=clock)

    artwork = service.create({"src": "s", "title": "t", "price": "1", "status": "Sold"})

    assert artwork.sold_date == clock()


def test_list_filters_by_status_and_state() -> None:
    repository = InMemoryArtworkRepository()
    available = repository.add("bt-PT-25-001", state="Completed")
    repository.add("bt-PT-25-002", status="Sold", state="Completed")
    in_progress = repository.add("bt-PT-25-003", state="In Progress")
    service = _service(repository)

    assert [a.uid for a in service.list_artworks("Available", "Completed")] == [
        available.uid
    ]
    assert [a.uid for a in service.list_artworks("all", "In Progress")] == [
        in_progress.uid
    ]
    assert len(service.list_artworks("All", None)) == 3


def test_update_status_to_sold_stamps_date_once() -> None:
    repository = InMemoryArtworkRepository()
    artwork = repository.add("bt-PT-25-001")
    clock = FixedClock()
    service = ArtworkService(repository, clock=clock)

    sold = service.update_status(artwork.id, status="Sold")
    clock.advance(3600)
    again = service.update_status(artwork.id, status="Sold", state="Completed")

    assert sold.sold_date is not None
    assert again.sold_date == sold.sold_date


def test_update_status_requires_a_change() -> None:
    repository = InMemoryArtworkRepository()
    artwork = repository.add("bt-PT-25-001")

    with pytest.raises(ValidationError):
        _service(repository).update_status(artwork.id)


def test_update_details_keeps_uid() -> None:
    repository = InMemoryArtworkRepository()
    artwork = repository.add("bt-PT-25-001")

    updated = _service(repository).update_details(
        artwork.id, {"title": "New title", "price": 8000, "uid": "ignored"}
    )

    assert updated.uid == artwork.uid
    assert updated.title == "New title"
    assert updated.price == "8000"


def test_update_and_delete_missing_artwork() -> None:
    repository = InMemoryArtworkRepository()
    service = _service(repository)
    artwork = repository.add("bt-PT-25-001")
    repository.delete_artwork(artwork.id)

    with pytest.raises(NotFoundError):
        service.update_status(artwork.id, status="Exhibition")
    with pytest.raises(NotFoundError):
        service.delete(artwork.id)


def test_mark_sold_outcomes() -> None:
    repository = InMemoryArtworkRepository()
    artwork = repository.add("bt-PT-25-001")
    service = _service(repository)

    assert service.mark_sold(artwork.uid, "ORD-1-aaaaaaaaa") == "marked"
    assert service.mark_sold(artwork.uid, "ORD-2-bbbbbbbbb") == "already_sold"
    assert service.mark_sold("bt-PT-25-404", "ORD-3-ccccccccc") == "missing"


def test_create_accepts_zero_price() -> None:
    service = _service(InMemoryArtworkRepository())

    artwork = service.create({"src": "s", "title": "Gift", "price": 0})

    assert artwork.price == "0"


def test_create_rejects_blank_price() -> None:
    service = _service(InMemoryArtworkRepository())

    with pytest.raises(ValidationError) as excinfo:
        service.create({"src": "s", "title": "t", "price": "   "})

    assert excinfo.value.field == "price"


def test_leaving_sold_clears_sale_record() -> None:
    repository = InMemoryArtworkRepository()
    artwork = repository.add("bt-PT-25-001")
    service = _service(repository)
    service.mark_sold(artwork.uid, "ORD-1-aaaaaaaaa")

    relisted = service.update_status(artwork.id, status="Available")
    exhibited = service.update_details(artwork.id, {"status": "Exhibition"})

    assert relisted.status == "Available"
    assert relisted.sold_date is None
    assert relisted.order_id is None
    assert exhibited.status == "Exhibition"
    assert service.mark_sold(artwork.uid, "ORD-2-bbbbbbbbb") == "already_sold"


def test_state_change_keeps_sale_record() -> None:
    repository = InMemoryArtworkRepository()
    artwork = repository.add("bt-PT-25-001")
    service = _service(repository)
    service.mark_sold(artwork.uid, "ORD-1-aaaaaaaaa")

    updated = service.update_status(artwork.id, state="In Progress")

    assert updated.status == "Sold"
    assert updated.order_id == "ORD-1-aaaaaaaaa"
    assert updated.sold_date is not None
