"""Unit tests for the Product model.

Covers:
- Price normalisation on save.
- The composite ``image`` property and its all-or-nothing storage.
- Database constraints.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from django.db import IntegrityError, transaction

from modules.products.models import Product, ProductImage

pytestmark = pytest.mark.unit

IMAGE = ProductImage(file_name="cat.gif", content_type="image/gif", data=b"GIF89a")


class TestPriceNormalisation:
    def test_save_rounds_price_up(self, make_product):
        product = make_product(price=Decimal("9.995"))
        product.refresh_from_db()
        assert product.price == Decimal("10.00")

    def test_save_pads_to_two_decimals(self, make_product):
        product = make_product(price=Decimal("3"))
        assert product.price == Decimal("3.00")
        assert product.price.as_tuple().exponent == -2

    def test_largest_price_round_trips(self, make_product):
        product = make_product(price=Decimal("9999999999.99"))
        product.refresh_from_db()
        assert product.price == Decimal("9999999999.99")


class TestName:
    def test_long_name_is_stored_whole(self, make_product):
        name = "x" * 300
        product = make_product(name=name)
        product.refresh_from_db()
        assert product.name == name


class TestImageProperty:
    def test_new_product_has_no_image(self):
        product = Product(name="Widget", description="desc", price=Decimal("1"))
        assert product.image is None
        assert product.has_image is False

    def test_setting_image_sets_all_columns(self):
        product = Product(name="Widget", description="desc", price=Decimal("1"))
        product.image = IMAGE

        assert product.image_file_name == "cat.gif"
        assert product.image_content_type == "image/gif"
        assert product.image_data == b"GIF89a"
        assert product.has_image is True

    def test_clearing_image_clears_all_columns(self):
        product = Product(name="Widget", description="desc", price=Decimal("1"))
        product.image = IMAGE
        product.image = None

        assert product.image_file_name is None
        assert product.image_content_type is None
        assert product.image_data is None

    def test_image_round_trips_through_database(self, make_product):
        product = make_product(image=IMAGE)

        reloaded = Product.objects.get(id=product.id)

        assert reloaded.image == IMAGE
        assert isinstance(reloaded.image.data, bytes)


class TestConstraints:
    def test_partial_image_rejected(self, make_product):
        product = make_product()
        product.image_file_name = "orphan.png"

        with pytest.raises(IntegrityError), transaction.atomic():
            product.save()

    def test_non_positive_price_rejected(self, make_product):
        product = make_product()
        product.price = Decimal("-1")

        with pytest.raises(IntegrityError), transaction.atomic():
            product.save()


class TestDisplay:
    def test_str(self):
        product = Product(name="Widget", description="desc", price=Decimal("2.50"))
        assert str(product) == "Widget (2.50)"
