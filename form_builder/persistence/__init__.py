"""
Persistence Module - Object Store

Arena-style store standing in for the platform persistence engine.
"""

from form_builder.persistence.store import ObjectStore, StoreIndex

__all__ = [
    "ObjectStore",
    "StoreIndex",
]
