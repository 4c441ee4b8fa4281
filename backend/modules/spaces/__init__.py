"""Spaces module: proxies space reads to the upstream API."""

from .service import SpacesService

__all__ = ["SpacesService"]
