"""
Domain Repositories
"""

from .base import RecordStore, SQLAlchemyRecordStore

__all__ = ["RecordStore", "SQLAlchemyRecordStore"]
