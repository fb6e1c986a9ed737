"""Tests for Category model."""

from app.models import Category


def test_category_tablename():
    """Category should map to categories table."""
    assert Category.__tablename__ == "categories"


def test_category_has_columns():
    columns = {c.name for c in Category.__table__.columns}
    assert columns == {
        "id", "name", "name_search", "description", "code", "discount", "creation_timestamp"
    }


def test_category_name_is_unique_and_required():
    name = Category.__table__.c.name
    assert name.unique is True
    assert name.nullable is False


def test_category_code_is_not_unique():
    assert not Category.__table__.c.code.unique


def test_category_products_relationship_removes_orphans():
    """Deleting a category must delete its products."""
    products = Category.__mapper__.relationships["products"]
    assert products.cascade.delete
    assert products.cascade.delete_orphan


def test_category_repr():
    assert repr(Category(id=3, name="Hogar")) == "<Category(id=3, name='Hogar')>"


def test_category_name_fills_search_column():
    category = Category(name="Electrónica")
    assert category.name_search == "electronica"

    category.name = "ÁUDIO Y VÍDEO"
    assert category.name_search == "audio y video"
