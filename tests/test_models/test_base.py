"""Tests for base model infrastructure."""

import pytest
from sqlalchemy.orm import DeclarativeBase

from app.models import Base, search_key


def test_base_is_declarative_base():
    """Base should be a SQLAlchemy DeclarativeBase."""
    assert hasattr(Base, "metadata")
    assert issubclass(Base, DeclarativeBase)


def test_catalog_tables_registered():
    """Importing app.models registers both catalog tables."""
    assert {"categories", "products"} <= set(Base.metadata.tables)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("Electrónica", "electronica"),
        ("ELECTRÓNICA", "electronica"),
        ("Lámpara de Baño", "lampara de bano"),
        ("50%_off", "50%_off"),
    ],
)
def test_search_key_folds_case_and_accents(value, expected):
    assert search_key(value) == expected
