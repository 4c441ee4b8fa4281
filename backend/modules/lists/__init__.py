"""Lists module: proxies list reads to the upstream API."""

from .service import ListsService

__all__ = ["ListsService"]
