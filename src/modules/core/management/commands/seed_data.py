from __future__ import annotations

from decimal import Decimal

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand

from modules.products.dtos import ProductInputDTO
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService

SEED_PRODUCTS = [
    ("Espresso", "Single shot of dark roast", Decimal("2.50")),
    ("Cappuccino", "Espresso with steamed milk foam", Decimal("3.75")),
    ("Croissant", "Butter croissant, baked daily", Decimal("2.995")),
    ("Cheesecake", "New York style slice", Decimal("4.20")),
    ("Iced Tea", "Black tea over ice with lemon", Decimal("2.25")),
]


class Command(BaseCommand):
    help = "Seed database with development users and catalog products."

    def handle(self, *args, **options):
        self.stdout.write("Seeding development data...")

        users_created = self._seed_users()
        products_created = self._seed_products()

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"users={users_created}, "
                f"products={products_created}"
            )
        )

    def _seed_users(self) -> int:
        User = get_user_model()
        created = 0
        if not User.objects.filter(username="admin").exists():
            User.objects.create_superuser("admin", password="admin123")
            created += 1
        if not User.objects.filter(username="user").exists():
            User.objects.create_user("user", password="user123")
            created += 1
        return created

    def _seed_products(self) -> int:
        self.stdout.write("Creating products...")
        service = ProductService(repository=ProductDjangoRepository())
        created = 0
        for name, description, price in SEED_PRODUCTS:
            if Product.objects.filter(name=name).exists():
                continue
            service.create_product(
                ProductInputDTO(name=name, description=description, price=price)
            )
            created += 1
        return created
