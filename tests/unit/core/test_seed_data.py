from io import StringIO

import pytest
from django.core.management import call_command

from modules.core.management.commands.seed_data import SEED_PRODUCTS
from modules.products.models import Product

pytestmark = pytest.mark.unit


class TestSeedDataCommand:
    def test_creates_sample_products(self):
        out = StringIO()
        call_command("seed_data", stdout=out)
        assert Product.objects.count() == len(SEED_PRODUCTS)
        assert f"created={len(SEED_PRODUCTS)}" in out.getvalue()

    def test_is_idempotent(self):
        call_command("seed_data", stdout=StringIO())
        out = StringIO()
        call_command("seed_data", stdout=out)
        assert Product.objects.count() == len(SEED_PRODUCTS)
        assert f"skipped={len(SEED_PRODUCTS)}" in out.getvalue()
