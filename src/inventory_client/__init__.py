"""Headless client for the inventory REST API."""

__version__ = "0.1.0"
