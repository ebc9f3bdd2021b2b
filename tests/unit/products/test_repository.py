"""Unit tests for ProductDjangoRepository.

Covers:
- CRUD operations (get_by_id, list, save, delete).
- Product-specific queries (get_by_name, get_by_price, get_by_stock,
  exists_by_name).
- Translation of name-index violations into ProductAlreadyExists.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.products.exceptions import ProductAlreadyExists
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
        "stock": 10,
    }
    defaults.update(overrides)
    product = Product(**defaults)
    product.save()
    return product


@pytest.fixture()
def repo():
    return ProductDjangoRepository()


# ===========================================================================
# Instantiation
# ===========================================================================


class TestRepositoryInstantiation:
    def test_is_instance_of_interface(self, repo):
        assert isinstance(repo, IProductRepository)


# ===========================================================================
# get_by_id
# ===========================================================================


class TestGetById:
    def test_returns_product_when_found(self, repo):
        product = _make_product()
        result = repo.get_by_id(product.id)
        assert result is not None
        assert result.id == product.id

    def test_returns_none_when_not_found(self, repo):
        assert repo.get_by_id(999_999) is None


# ===========================================================================
# list
# ===========================================================================


class TestList:
    def test_returns_all_products(self, repo):
        _make_product(name="A")
        _make_product(name="B")
        results = repo.list()
        assert [p.name for p in results] == ["A", "B"]

    def test_returns_empty_list_when_no_products(self, repo):
        assert repo.list() == []


# ===========================================================================
# save
# ===========================================================================


class TestSave:
    def test_creates_new_product(self, repo):
        product = Product(name="New Product", price=Decimal("9.99"), stock=5)
        saved = repo.save(product)
        assert saved.id is not None
        assert Product.objects.filter(id=saved.id).exists()

    def test_updates_existing_product(self, repo):
        product = _make_product()
        product.name = "Updated Name"
        repo.save(product)
        product.refresh_from_db()
        assert product.name == "Updated Name"

    def test_returns_same_entity(self, repo):
        product = Product(name="Return Test", price=Decimal("5.00"), stock=1)
        assert repo.save(product) is product

    def test_name_index_violation_raises_already_exists(self, repo):
        _make_product(name="Widget")
        duplicate = Product(name="WIDGET", price=Decimal("1.00"), stock=1)
        with pytest.raises(ProductAlreadyExists, match="WIDGET"):
            repo.save(duplicate)
        assert Product.objects.count() == 1

    def test_rename_onto_other_product_raises_already_exists(self, repo):
        _make_product(name="Widget")
        gadget = _make_product(name="Gadget")
        gadget.name = "widget"
        with pytest.raises(ProductAlreadyExists):
            repo.save(gadget)
        gadget.refresh_from_db()
        assert gadget.name == "Gadget"


# ===========================================================================
# delete
# ===========================================================================


class TestDelete:
    def test_deletes_existing_product(self, repo):
        product = _make_product()
        assert repo.delete(product.id) is True
        assert not Product.objects.filter(id=product.id).exists()

    def test_returns_false_for_nonexistent(self, repo):
        assert repo.delete(999_999) is False


# ===========================================================================
# get_by_name
# ===========================================================================


class TestGetByName:
    def test_returns_product_when_found(self, repo):
        product = _make_product(name="Widget")
        result = repo.get_by_name("Widget")
        assert result is not None
        assert result.id == product.id

    def test_is_case_insensitive(self, repo):
        product = _make_product(name="Widget")
        result = repo.get_by_name("wIDGET")
        assert result is not None
        assert result.id == product.id

    def test_is_exact_match(self, repo):
        _make_product(name="Widget Pro")
        assert repo.get_by_name("Widget") is None

    def test_returns_none_when_not_found(self, repo):
        assert repo.get_by_name("Nonexistent") is None


# ===========================================================================
# get_by_price / get_by_stock
# ===========================================================================


class TestGetByPrice:
    def test_returns_product_with_exact_price(self, repo):
        _make_product(name="Cheap", price=Decimal("1.00"))
        product = _make_product(name="Widget", price=Decimal("9.99"))
        result = repo.get_by_price(Decimal("9.99"))
        assert result is not None
        assert result.id == product.id

    def test_lowest_id_wins_when_several_match(self, repo):
        first = _make_product(name="First", price=Decimal("5.00"))
        _make_product(name="Second", price=Decimal("5.00"))
        assert repo.get_by_price(Decimal("5.00")).id == first.id

    def test_returns_none_when_not_found(self, repo):
        _make_product(price=Decimal("9.99"))
        assert repo.get_by_price(Decimal("10.00")) is None


class TestGetByStock:
    def test_returns_product_with_exact_stock(self, repo):
        _make_product(name="Many", stock=100)
        product = _make_product(name="Few", stock=3)
        result = repo.get_by_stock(3)
        assert result is not None
        assert result.id == product.id

    def test_lowest_id_wins_when_several_match(self, repo):
        first = _make_product(name="First", stock=7)
        _make_product(name="Second", stock=7)
        assert repo.get_by_stock(7).id == first.id

    def test_returns_none_when_not_found(self, repo):
        _make_product(stock=10)
        assert repo.get_by_stock(11) is None


# ===========================================================================
# exists_by_name
# ===========================================================================


class TestExistsByName:
    def test_true_when_name_taken(self, repo):
        _make_product(name="Widget")
        assert repo.exists_by_name("Widget") is True

    def test_is_case_insensitive(self, repo):
        _make_product(name="Widget")
        assert repo.exists_by_name("WIDGET") is True

    def test_false_when_name_free(self, repo):
        _make_product(name="Widget")
        assert repo.exists_by_name("Gadget") is False

    def test_exclude_id_ignores_that_record(self, repo):
        product = _make_product(name="Widget")
        assert repo.exists_by_name("widget", exclude_id=product.id) is False

    def test_exclude_id_still_sees_other_records(self, repo):
        _make_product(name="Widget")
        other = _make_product(name="Gadget")
        assert repo.exists_by_name("Widget", exclude_id=other.id) is True
