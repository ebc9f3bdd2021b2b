from __future__ import annotations

from decimal import Decimal

from django.core.management.base import BaseCommand

from modules.products.dtos import ProductInputDTO
from modules.products.exceptions import ProductAlreadyExists
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService

SEED_PRODUCTS = [
    ("Notebook Pro 14", "14-inch laptop, 16GB RAM", Decimal("7499.90"), 12),
    ("Mouse Sem Fio", "Wireless optical mouse", Decimal("89.90"), 150),
    ("Teclado Mecânico", "ABNT2 mechanical keyboard", Decimal("349.00"), 40),
    ("Monitor 27", "27-inch IPS monitor", Decimal("1899.00"), 18),
    ("Headset USB", "Stereo headset with microphone", Decimal("229.90"), 65),
    ("Webcam Full HD", "1080p webcam", Decimal("259.00"), 30),
    ("SSD 1TB", "NVMe solid state drive", Decimal("499.90"), 75),
    ("Cabo HDMI 2m", "", Decimal("39.90"), 300),
]


class Command(BaseCommand):
    help = "Seed database with sample products for development."

    def handle(self, *args, **options):
        self.stdout.write("Seeding products...")
        service = ProductService(repository=ProductDjangoRepository())

        created = skipped = 0
        for name, description, price, stock in SEED_PRODUCTS:
            dto = ProductInputDTO(
                name=name, description=description, price=price, stock=stock
            )
            try:
                service.create_product(dto)
            except ProductAlreadyExists:
                skipped += 1
                continue
            created += 1

        self.stdout.write(
            self.style.SUCCESS(f"Seed completed: created={created}, skipped={skipped}")
        )
