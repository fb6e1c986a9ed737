"""Tests for product payloads."""

import pytest
from pydantic import ValidationError

from app.models import Category, Product
from app.schemas.product import ProductPayload, ProductRead


class TestProductPayload:

    def test_minimal_payload(self):
        payload = ProductPayload.model_validate({"name": "Audífonos"})

        assert payload.price is None
        assert payload.stock is None

    def test_full_payload(self):
        payload = ProductPayload.model_validate({"name": "Audífonos", "price": 249.9, "stock": 50})

        assert payload.price == 249.9
        assert payload.stock == 50

    def test_non_integer_stock_rejected(self):
        with pytest.raises(ValidationError):
            ProductPayload.model_validate({"name": "Audífonos", "stock": "muchos"})


class TestProductRead:

    def test_embeds_category_without_products(self):
        category = Category(id=2, name="Electrónica", code=10)
        product = Product(id=7, name="Audífonos", price=249.9, stock=50, category=category)

        data = ProductRead.model_validate(product).model_dump(by_alias=True)

        assert data["id"] == 7
        assert data["registrationTimestamp"] is None
        assert data["category"]["id"] == 2
        assert data["category"]["name"] == "Electrónica"
        assert "products" not in data["category"]
