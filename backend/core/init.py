# core/init.py
import os
from datetime import datetime, timedelta, UTC
from decimal import Decimal

from sqlmodel import select

from core.db import get_sync_session, init_db
from core.logger import get_logger
from core.settings import settings
from models.db_models import Inventory, Product

# export environment variables
DATA_FOLDER = settings.DATA_FOLDER
SEED_SAMPLE_DATA = settings.SEED_SAMPLE_DATA

logger = get_logger(__name__)

SAMPLE_PRODUCTS = [
    # name, brand, category, gender, (2ml, 5ml, 10ml), top notes
    ("Sauvage", "Dior", "designer", "masculine", ("6.50", "14.00", "26.00"), ["Bergamot", "Pepper"]),
    ("Baccarat Rouge 540", "Maison Francis Kurkdjian", "niche", "unisex", ("18.00", "42.00", "79.00"), ["Saffron", "Jasmine"]),
    ("Acqua di Gio", "Giorgio Armani", "fresh", "masculine", ("5.00", "11.00", "20.00"), ["Lime", "Lemon", "Bergamot"]),
    ("Black Opium", "Yves Saint Laurent", "oriental", "feminine", ("5.50", "12.50", None), ["Pear", "Pink Pepper"]),
    ("Oud Wood", "Tom Ford", "niche", "unisex", (None, "29.00", "55.00"), ["Rosewood", "Cardamom"]),
    ("J'adore", "Dior", "designer", "feminine", ("6.00", "13.50", "25.00"), ["Pear", "Melon", "Magnolia"]),
]

def init_data_folder():
    if not os.path.exists(DATA_FOLDER):
        os.makedirs(DATA_FOLDER)

def _price(value):
    return Decimal(value) if value is not None else None

def seed_sample_catalog() -> int:
    """Insert the sample catalog into an empty product table. Returns rows added."""
    with get_sync_session() as session:
        if session.exec(select(Product)).first():
            return 0

        now = datetime.now(UTC)
        for offset, (name, brand, category, gender, prices, top_notes) in enumerate(SAMPLE_PRODUCTS):
            product = Product(
                name=name,
                slug=f"{brand}-{name}".lower().replace(" ", "-").replace("'", ""),
                brand=brand,
                category=category,
                gender=gender,
                price_2ml=_price(prices[0]),
                price_5ml=_price(prices[1]),
                price_10ml=_price(prices[2]),
                top_notes=top_notes,
                created_at=now - timedelta(days=offset),
                inventory=[Inventory(bottle_size_ml=100, total_volume=Decimal("100"), used_volume=Decimal("35"))],
            )
            session.add(product)
        session.commit()

    logger.info(f"Seeded {len(SAMPLE_PRODUCTS)} sample products")
    return len(SAMPLE_PRODUCTS)

def run_all():
    init_data_folder()
    init_db()
    if SEED_SAMPLE_DATA:
        seed_sample_catalog()
