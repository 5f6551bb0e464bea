"""
Storage layer for importing flat-file content into the database.

This module provides:
- file_storage: Reads entries, navigations and schema files (source of truth)
- database: Upserts records into the database (destination)
"""

from .file_storage import FileStorage
from .database import DatabaseStorage

__all__ = ['FileStorage', 'DatabaseStorage']
