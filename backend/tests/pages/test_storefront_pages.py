# tests/pages/test_storefront_pages.py
"""
Server-rendered storefront pages: home and product listing.
"""
import pytest
from fastapi.testclient import TestClient

from main import app
from api.pages import page_url
from core.catalog_engine import InMemoryProductStore
from core.db import get_product_store


class BrokenStore(InMemoryProductStore):
    async def find_products(self, predicate, plan):
        raise RuntimeError("database is locked")

    async def list_brands(self, predicate):
        raise RuntimeError("database is locked")

# ===== TEST SETUP =====

@pytest.fixture
def client_for():
    def _client(store):
        app.dependency_overrides[get_product_store] = lambda: store
        return TestClient(app)

    yield _client
    app.dependency_overrides.clear()

@pytest.fixture
def client(client_for, catalog):
    return client_for(InMemoryProductStore(catalog))

# ===== LISTING PAGE =====

class TestProductsPage:
    """Test the /products listing"""

    def test_lists_in_stock_products_only(self, client):
        response = client.get("/products")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        html = response.text
        assert "Sauvage" in html
        assert "Baccarat Rouge 540" in html
        assert "Black Opium" not in html
        assert "5 products available." in html

    def test_prices_are_formatted(self, client):
        html = client.get("/products", params={"search": "sauvage"}).text
        assert "6,50 €" in html
        assert "26,00 €" in html

    def test_missing_price_tier_shows_na(self, client):
        html = client.get("/products", params={"search": "oud wood"}).text
        assert "N/A" in html

    def test_low_stock_badge(self, client):
        html = client.get("/products", params={"brand": "dior"}).text
        assert "Low stock" in html
        assert "In stock" in html

    def test_brand_selector_lists_in_stock_brands(self, client):
        html = client.get("/products").text
        assert '<option value="Tom Ford">Tom Ford</option>' in html
        assert 'value="Yves Saint Laurent"' not in html

    def test_selected_filters_are_kept_in_form(self, client):
        html = client.get("/products", params={"brand": "Dior", "category": "designer"}).text
        assert '<option value="Dior" selected>Dior</option>' in html
        assert '<option value="designer" selected>Designer</option>' in html

    def test_pagination_links_keep_filters(self, client):
        html = client.get("/products", params={"brand": "Dior", "limit": 1}).text

        assert "Page 1 of 2" in html
        assert 'href="/products?brand=Dior&amp;limit=1&amp;page=2"' in html
        assert 'rel="prev"' not in html

    def test_no_matches(self, client):
        html = client.get("/products", params={"search": "patchouli"}).text
        assert "No products found matching your criteria." in html
        assert "pagination" not in html

    def test_store_failure_renders_empty_page(self, client_for):
        response = client_for(BrokenStore()).get("/products")

        assert response.status_code == 200
        assert "0 products available." in response.text
        assert "No products found matching your criteria." in response.text


def test_page_url():
    assert page_url({"brand": "Tom Ford"}, 3) == "/products?brand=Tom+Ford&page=3"
    assert page_url({}, 1) == "/products?page=1"

# ===== HOME PAGE =====

class TestHomePage:
    """Test the featured products on /"""

    def test_featured_products(self, client):
        html = client.get("/").text
        assert "Featured Fragrances" in html
        assert "Acqua di Gio" in html
        assert "Black Opium" not in html

    def test_store_failure_shows_placeholder(self, client_for):
        html = client_for(BrokenStore()).get("/").text
        assert "No products available at the moment." in html
