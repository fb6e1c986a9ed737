"""Tests for category payloads."""

from datetime import datetime

import pytest
from pydantic import ValidationError

from app.models import Category, Product
from app.schemas.category import CategoryPayload, CategoryRead


class TestCategoryPayload:
    """Tests for the writable category payload."""

    def test_only_name_is_required(self):
        payload = CategoryPayload(name="Hogar")

        assert payload.description is None
        assert payload.code is None
        assert payload.discount is None

    def test_missing_name_rejected(self):
        with pytest.raises(ValidationError):
            CategoryPayload.model_validate({"description": "sin nombre"})

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            CategoryPayload(name="")

    def test_read_only_fields_are_ignored(self):
        """Clients cannot set id or creation time."""
        payload = CategoryPayload.model_validate(
            {"name": "Hogar", "id": 99, "creationTimestamp": "2025-01-01T10:15:30"}
        )

        assert payload.model_dump() == {
            "name": "Hogar",
            "description": None,
            "code": None,
            "discount": None,
        }


class TestCategoryRead:
    """Tests for the category response shape."""

    def test_serializes_camel_case(self):
        created = datetime(2025, 1, 1, 10, 15, 30)
        category = Category(
            id=1,
            name="Electrónica",
            description="Productos tecnológicos",
            code=10,
            discount=5.5,
            creation_timestamp=created,
        )

        data = CategoryRead.model_validate(category).model_dump(by_alias=True)

        assert data == {
            "id": 1,
            "name": "Electrónica",
            "description": "Productos tecnológicos",
            "code": 10,
            "discount": 5.5,
            "creationTimestamp": created,
        }

    def test_products_never_serialized(self):
        category = Category(id=1, name="Electrónica")
        category.products = [Product(id=5, name="Audífonos")]

        data = CategoryRead.model_validate(category).model_dump(by_alias=True)

        assert "products" not in data
