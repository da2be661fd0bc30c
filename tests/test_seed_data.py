from decimal import Decimal
from io import StringIO

from django.contrib.auth import get_user_model
from django.core.management import call_command

from modules.products.models import Product


class TestSeedData:
    def test_seeds_users_and_products(self):
        out = StringIO()
        call_command("seed_data", stdout=out)

        assert "users=2" in out.getvalue()
        assert Product.objects.count() == 5
        assert get_user_model().objects.filter(username="admin").exists()

    def test_prices_go_through_normalisation(self):
        call_command("seed_data", stdout=StringIO())
        assert Product.objects.get(name="Croissant").price == Decimal("3.00")

    def test_is_idempotent(self):
        call_command("seed_data", stdout=StringIO())
        out = StringIO()
        call_command("seed_data", stdout=out)

        assert "users=0, products=0" in out.getvalue()
        assert Product.objects.count() == 5
