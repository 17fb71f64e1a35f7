"""Tests for the catalog service."""

from uuid import uuid4

import pytest

from storefront.domain.errors import NotFound, StorageUnavailable, ValidationError
from storefront.services.catalog import CatalogService, normalize_rating
from tests.fakes import FakeClock, InMemoryProductRepository


@pytest.fixture
def service(
    product_repository: InMemoryProductRepository, clock: FakeClock
) -> CatalogService:
    return CatalogService(product_repository, clock=clock)


def test_create_then_list_includes_product(service, admin_claims) -> None:
    created = service.create_product(admin_claims, name="Mug", price="Rs. 1,200")

    listed = service.list_products()

    assert [product.id for product in listed] == [created.id]
    assert listed[0].name == "Mug"
    assert listed[0].price == "Rs. 1,200"
    assert listed[0].rating == 5
    assert listed[0].image == ""


def test_create_trims_fields(service, admin_claims) -> None:
    created = service.create_product(
        admin_claims, name="  Pen  ", price=" Rs. 300 ", image=" /uploads/x.png "
    )

    assert created.name == "Pen"
    assert created.price == "Rs. 300"
    assert created.image == "/uploads/x.png"


@pytest.mark.parametrize(
    ("name", "price"), [("", "Rs. 1"), ("   ", "Rs. 1"), ("Mug", ""), (None, None)]
)
def test_create_rejects_empty_required_fields(
    service, admin_claims, product_repository, name, price
) -> None:
    with pytest.raises(ValidationError):
        service.create_product(admin_claims, name=name, price=price)

    assert product_repository.rows == {}


@pytest.mark.parametrize(
    ("rating", "expected"), [(7, 5), (0, 1), (-3, 1), (3, 3), ("4", 4), (4.6, 4)]
)
def test_create_clamps_rating(service, admin_claims, rating, expected) -> None:
    created = service.create_product(
        admin_claims, name="Mug", price="Rs. 1", rating=rating
    )

    assert created.rating == expected


def test_create_rejects_non_numeric_rating(service, admin_claims) -> None:
    with pytest.raises(ValidationError):
        service.create_product(admin_claims, name="Mug", price="Rs. 1", rating="great")


def test_list_orders_newest_first(service, admin_claims) -> None:
    first = service.create_product(admin_claims, name="First", price="Rs. 1")
    second = service.create_product(admin_claims, name="Second", price="Rs. 2")

    listed = service.list_products()

    assert [product.id for product in listed] == [second.id, first.id]


def test_update_applies_provided_fields_only(service, admin_claims) -> None:
    created = service.create_product(
        admin_claims, name="Mug", price="Rs. 1", image="/uploads/mug.png"
    )

    updated = service.update_product(
        admin_claims, str(created.id), {"price": "Rs. 2", "rating": 9, "name": None}
    )

    assert updated.name == "Mug"
    assert updated.price == "Rs. 2"
    assert updated.rating == 5
    assert updated.image == "/uploads/mug.png"
    assert updated.created_at == created.created_at
    assert updated.updated_at > created.updated_at


def test_update_rejects_blank_name(service, admin_claims) -> None:
    created = service.create_product(admin_claims, name="Mug", price="Rs. 1")

    with pytest.raises(ValidationError):
        service.update_product(admin_claims, created.id, {"name": "  "})

    assert service.list_products()[0].name == "Mug"


def test_update_unknown_id_raises_not_found(
    service, admin_claims, product_repository
) -> None:
    service.create_product(admin_claims, name="Mug", price="Rs. 1")
    before = {key: dict(row) for key, row in product_repository.rows.items()}

    with pytest.raises(NotFound):
        service.update_product(admin_claims, uuid4(), {"name": "Cup"})

    assert product_repository.rows == before


def test_update_unknown_id_reported_before_validation(
    service, admin_claims
) -> None:
    with pytest.raises(NotFound):
        service.update_product(admin_claims, uuid4(), {"name": "  ", "rating": "x"})


def test_malformed_id_is_not_found(service, admin_claims) -> None:
    with pytest.raises(NotFound):
        service.update_product(admin_claims, "not-a-uuid", {"name": "Cup"})
    with pytest.raises(NotFound):
        service.delete_product(admin_claims, "not-a-uuid")


def test_delete_removes_product(service, admin_claims) -> None:
    created = service.create_product(admin_claims, name="Mug", price="Rs. 1")

    service.delete_product(admin_claims, str(created.id))

    assert service.list_products() == []
    with pytest.raises(NotFound):
        service.delete_product(admin_claims, created.id)


def test_seed_defaults_runs_once(service) -> None:
    assert service.seed_defaults() == 3
    assert service.seed_defaults() == 0

    names = {product.name for product in service.list_products()}
    assert names == {
        "Custom Name Insulated Bottle",
        "Executive Corporate Gift Set",
        "Premium Desk Essentials Kit",
    }


def test_seed_defaults_skips_non_empty_store(service, admin_claims) -> None:
    service.create_product(admin_claims, name="Mug", price="Rs. 1")

    assert service.seed_defaults() == 0
    assert len(service.list_products()) == 1


def test_storage_errors_propagate(service, product_repository) -> None:
    product_repository.fail_with = StorageUnavailable()

    with pytest.raises(StorageUnavailable):
        service.list_products()


def test_normalize_rating_rejects_bool() -> None:
    with pytest.raises(ValidationError):
        normalize_rating(True)
