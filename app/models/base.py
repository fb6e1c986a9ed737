"""Base model infrastructure for SQLAlchemy models."""

import unicodedata

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""
    pass


def search_key(value: str) -> str:
    """Fold ``value`` for accent- and case-insensitive matching.

    "Electrónica" and "ELECTRONICA" both become "electronica".
    """
    decomposed = unicodedata.normalize("NFKD", value)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold()
