# tests/catalog_engine/test_assembler.py
from core.catalog_engine import (
    FETCH_PRODUCTS_ERROR,
    PagePlan,
    build_fetch_error,
    build_product_page,
)
from models.product_models import ProductResponse


class TestBuildProductPage:
    """Test the success envelope around one page of products"""

    def test_meta_reflects_page_and_total(self, catalog):
        items = [ProductResponse.from_product(p) for p in catalog[:2]]
        response = build_product_page(items, total=5, page=PagePlan(page=2, limit=2))

        assert response.success is True
        assert len(response.data) == 2
        assert response.meta.total == 5
        assert response.meta.page == 2
        assert response.meta.limit == 2
        assert response.meta.has_more is True
        assert response.error is None

    def test_last_page_has_no_more(self):
        response = build_product_page([], total=4, page=PagePlan(page=2, limit=2))
        assert response.meta.has_more is False

    def test_empty_result(self):
        response = build_product_page([], total=0, page=PagePlan())
        payload = response.to_payload()

        assert payload["success"] is True
        assert payload["data"] == []
        assert payload["meta"] == {"total": 0, "page": 1, "limit": 12, "hasMore": False}
        assert "error" not in payload

    def test_payload_uses_camel_case(self, catalog):
        items = [ProductResponse.from_product(catalog[0], review_count=1)]
        product = build_product_page(items, total=1, page=PagePlan()).to_payload()["data"][0]

        assert product["price2ml"] == 6.5
        assert product["price5ml"] == 14.0
        assert product["price10ml"] == 26.0
        assert product["inStock"] is True
        assert product["reviewCount"] == 1
        assert product["topNotes"] == ["Bergamot", "Pepper", "Lavender", "Amber"]
        assert product["inventory"][0]["lowStockAlert"] is False


class TestBuildFetchError:
    """Test the failure envelope"""

    def test_error_fields(self):
        response = build_fetch_error(RuntimeError("database is locked"))

        assert response.success is False
        assert response.data is None
        assert response.meta is None
        assert response.error.code == FETCH_PRODUCTS_ERROR
        assert response.error.message == "Failed to fetch products"
        assert response.error.details == "database is locked"

    def test_unknown_error_details(self):
        assert build_fetch_error(None).error.details == "Unknown error"
        assert build_fetch_error(RuntimeError()).error.details == "Unknown error"

    def test_payload_omits_data_and_meta(self):
        payload = build_fetch_error(RuntimeError("boom")).to_payload()
        assert set(payload) == {"success", "error"}
        assert payload["error"]["code"] == "FETCH_PRODUCTS_ERROR"
