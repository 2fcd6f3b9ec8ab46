# tests/conftest.py
import os
import sys
import tempfile
from datetime import datetime, timedelta, UTC
from decimal import Decimal
from pathlib import Path

import pytest

# Resolve backend/ folder and add it to sys.path
BACKEND_DIR = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(BACKEND_DIR))

# Isolated database and log folder for the whole test session; must be set
# before core.settings is first imported
TEST_ROOT = Path(tempfile.mkdtemp(prefix="storefront-tests-"))
os.environ["ENVIRONMENT"] = "test"
os.environ["DATA_FOLDER"] = str(TEST_ROOT / "data")
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_ROOT / 'data' / 'storefront.db'}"
os.environ["LOG_DIR"] = str(TEST_ROOT / "logs")
os.environ["SEED_SAMPLE_DATA"] = "false"

from models.db_models import Inventory, Product, Review  # noqa: E402

BASE_TIME = datetime(2024, 1, 1, tzinfo=UTC)

def build_product(
    id: int,
    name: str,
    brand: str,
    *,
    category=None,
    gender=None,
    in_stock: bool = True,
    prices=(None, None, None),
    description=None,
    inventory=None,
    reviews=None,
    created_at=None
) -> Product:
    """Product fixture; later ids are newer unless created_at is given"""
    return Product(
        id=id,
        name=name,
        slug=f"{brand}-{name}-{id}".lower().replace(" ", "-"),
        brand=brand,
        description=description,
        category=category,
        gender=gender,
        in_stock=in_stock,
        price_2ml=Decimal(prices[0]) if prices[0] is not None else None,
        price_5ml=Decimal(prices[1]) if prices[1] is not None else None,
        price_10ml=Decimal(prices[2]) if prices[2] is not None else None,
        top_notes=["Bergamot", "Pepper", "Lavender", "Amber"],
        created_at=created_at or BASE_TIME + timedelta(minutes=id),
        inventory=inventory or [],
        reviews=reviews or [],
    )

def build_catalog() -> list[Product]:
    """Six products covering every category, gender, stock state and a missing price tier"""
    return [
        build_product(
            1, "Sauvage", "Dior", category="designer", gender="masculine",
            prices=("6.50", "14.00", "26.00"), description="Fresh spicy ambroxan",
            inventory=[Inventory(id=1, bottle_size_ml=100, low_stock_alert=False)],
            reviews=[Review(id=1, rating=5, is_published=True), Review(id=2, rating=4, is_published=False)],
        ),
        build_product(
            2, "J'adore", "Dior", category="designer", gender="feminine",
            prices=("6.00", "13.50", "25.00"), description="Floral bouquet",
            inventory=[Inventory(id=2, bottle_size_ml=100, low_stock_alert=True)],
        ),
        build_product(
            3, "Oud Wood", "Tom Ford", category="niche", gender="unisex",
            prices=(None, "29.00", "55.00"), description="Smoky rosewood and oud",
        ),
        build_product(
            4, "Black Opium", "Yves Saint Laurent", category="oriental", gender="feminine",
            in_stock=False, prices=("5.50", "12.50", None), description="Coffee and vanilla",
        ),
        build_product(
            5, "Acqua di Gio", "Giorgio Armani", category="fresh", gender="masculine",
            prices=("5.00", "11.00", "20.00"), description="Marine citrus",
        ),
        build_product(
            6, "Baccarat Rouge 540", "Maison Francis Kurkdjian", category="niche", gender="unisex",
            prices=("18.00", "42.00", "79.00"), description="Amber woody saffron",
            reviews=[Review(id=3, rating=5, is_published=True), Review(id=4, rating=5, is_published=True)],
        ),
    ]

@pytest.fixture
def catalog() -> list[Product]:
    return build_catalog()

@pytest.fixture
def product_factory():
    return build_product
