"""Catalog service - categories and products over a REST API."""

__version__ = "0.1.0"
