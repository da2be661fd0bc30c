"""Unit tests for ProductDjangoRepository."""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.products.models import Product, ProductImage
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.repositories.interfaces import IProductRepository

pytestmark = pytest.mark.unit


@pytest.fixture()
def repo():
    return ProductDjangoRepository()


class TestRepositoryInstantiation:
    def test_is_instance_of_interface(self, repo):
        assert isinstance(repo, IProductRepository)


class TestGetById:
    def test_returns_product_when_found(self, repo, make_product):
        product = make_product()
        result = repo.get_by_id(str(product.id))
        assert result is not None
        assert result.id == product.id

    def test_returns_none_when_not_found(self, repo):
        assert repo.get_by_id("00000000-0000-0000-0000-000000000000") is None

    def test_returns_none_for_invalid_uuid(self, repo):
        assert repo.get_by_id("not-a-uuid") is None


class TestList:
    def test_returns_all_products(self, repo, make_product):
        first = make_product(name="First")
        second = make_product(name="Second")

        result = repo.list()

        assert [p.id for p in result] == [first.id, second.id]

    def test_empty(self, repo):
        assert repo.list() == []


class TestSave:
    def test_assigns_id_and_persists(self, repo):
        product = Product(name="Widget", description="desc", price=Decimal("1.5"))

        saved = repo.save(product)

        assert saved.id is not None
        stored = Product.objects.get(id=saved.id)
        assert stored.price == Decimal("1.50")

    def test_save_twice_updates(self, repo):
        product = repo.save(
            Product(name="Widget", description="desc", price=Decimal("1"))
        )
        product.name = "Renamed"
        product.image = ProductImage("a.png", "image/png", b"\x89PNG")

        repo.save(product)

        assert Product.objects.count() == 1
        stored = Product.objects.get(id=product.id)
        assert stored.name == "Renamed"
        assert stored.image == ProductImage("a.png", "image/png", b"\x89PNG")


class TestDelete:
    def test_removes_row(self, repo, make_product):
        product = make_product()

        repo.delete(str(product.id))

        assert not Product.objects.filter(id=product.id).exists()

    def test_unknown_id_is_noop(self, repo, make_product):
        make_product()

        repo.delete("00000000-0000-0000-0000-000000000000")

        assert Product.objects.count() == 1
