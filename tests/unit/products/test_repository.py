"""Unit tests for ProductDjangoRepository.

Covers:
- create / get_available.
- Availability-aware counting and windowed listing.
- list_by_ids ignoring availability.
- update returning Ok/Err instead of raising.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from unittest.mock import MagicMock

import pytest

from modules.core.results import Err, Ok
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.repositories.interfaces import IProductRepository

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_product(**overrides) -> Product:
    defaults = {
        "name": "Widget",
        "price": Decimal("19.99"),
    }
    defaults.update(overrides)
    return Product.objects.create(**defaults)


@pytest.fixture()
def repo():
    return ProductDjangoRepository()


# ===========================================================================
# Instantiation
# ===========================================================================


class TestRepositoryInstantiation:
    def test_is_instance_of_interface(self, repo):
        assert isinstance(repo, IProductRepository)

    def test_accepts_injected_manager(self):
        repo = ProductDjangoRepository(manager=Product.objects)
        assert repo.count_available() == 0


# ===========================================================================
# create / get
# ===========================================================================


class TestCreate:
    def test_assigns_id_and_defaults_available(self, repo):
        product = repo.create({"name": "New", "price": Decimal("9.99")})
        assert product.id is not None
        assert product.available is True
        assert Product.objects.filter(id=product.id).exists()


class TestGetAvailable:
    def test_returns_available_product(self, repo):
        product = _make_product()
        assert repo.get_available(product.id) == product

    def test_hides_unavailable_product(self, repo):
        product = _make_product(available=False)
        assert repo.get_available(product.id) is None

    def test_returns_none_for_invalid_id(self, repo):
        assert repo.get_available("x") is None


# ===========================================================================
# count / list
# ===========================================================================


class TestListing:
    def test_count_ignores_unavailable(self, repo):
        _make_product(name="A")
        _make_product(name="B")
        _make_product(name="C", available=False)
        assert repo.count_available() == 2

    def test_window_offset_and_limit(self, repo):
        products = [_make_product(name=f"P{i}") for i in range(5)]
        window = repo.list_available(offset=1, limit=2)
        assert window == products[1:3]

    def test_window_skips_unavailable(self, repo):
        a = _make_product(name="A")
        _make_product(name="B", available=False)
        c = _make_product(name="C")
        assert repo.list_available(offset=0, limit=10) == [a, c]

    def test_window_past_end_is_empty(self, repo):
        _make_product()
        assert repo.list_available(offset=10, limit=10) == []


class TestListByIds:
    def test_includes_unavailable_rows(self, repo):
        a = _make_product(name="A")
        b = _make_product(name="B", available=False)
        assert repo.list_by_ids([a.id, b.id]) == [a, b]

    def test_missing_ids_are_skipped(self, repo):
        a = _make_product()
        assert repo.list_by_ids([a.id, 999_999]) == [a]


# ===========================================================================
# update
# ===========================================================================


class TestUpdate:
    def test_returns_ok_with_updated_product(self, repo):
        product = _make_product(name="Old")
        result = repo.update(product.id, {"name": "New"})
        assert isinstance(result, Ok)
        assert result.value.name == "New"
        product.refresh_from_db()
        assert product.name == "New"

    def test_updates_unavailable_product(self, repo):
        product = _make_product(available=False)
        result = repo.update(product.id, {"price": Decimal("1.00")})
        assert isinstance(result, Ok)

    def test_soft_delete_flag(self, repo):
        product = _make_product()
        result = repo.update(product.id, {"available": False})
        assert isinstance(result, Ok)
        product.refresh_from_db()
        assert product.available is False
        assert Product.objects.filter(id=product.id).exists()

    def test_missing_row_returns_err(self, repo):
        result = repo.update(999_999, {"name": "Ghost"})
        assert isinstance(result, Err)
        assert isinstance(result.error, Product.DoesNotExist)

    def test_invalid_id_returns_err(self, repo):
        result = repo.update("abc", {"name": "Ghost"})
        assert isinstance(result, Err)

    def test_unknown_field_returns_err(self, repo):
        product = _make_product()
        result = repo.update(product.id, {"colour": "red"})
        assert isinstance(result, Err)

    def test_constraint_violation_returns_err_and_rolls_back(self, repo):
        product = _make_product(price=Decimal("5"))
        result = repo.update(product.id, {"price": Decimal("-1")})
        assert isinstance(result, Err)
        product.refresh_from_db()
        assert product.price == Decimal("5")

    @pytest.mark.parametrize("error", [InvalidOperation(), OverflowError(), RuntimeError("x")])
    def test_any_store_exception_returns_err(self, error):
        manager = MagicMock()
        manager.select_for_update.return_value.get.side_effect = error
        repo = ProductDjangoRepository(manager=manager)

        result = repo.update(1, {"price": Decimal("1")})

        assert isinstance(result, Err)
        assert result.error is error
