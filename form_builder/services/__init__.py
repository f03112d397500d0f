"""
Services Module - Business Logic Layer

Provides the async data manager and its listing cache.
"""

from form_builder.services.cache_service import CacheService
from form_builder.services.data_manager import DataManager

__all__ = [
    "CacheService",
    "DataManager",
]
