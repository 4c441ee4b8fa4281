"""
Usage module.

Append-only log of API calls made by authenticated users.

Public API:
- IUsageService: Interface for recording usage
- ApiLogEntry: A single log entry
"""

from .interfaces import IApiLogRepository, IUsageService
from .models import ApiLogEntry

__all__ = [
    "IApiLogRepository",
    "IUsageService",
    "ApiLogEntry",
]
