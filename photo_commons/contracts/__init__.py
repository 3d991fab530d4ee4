"""
Request and response contracts for photo-service handlers
"""
from .photo_contracts import (
    PhotoItem,
    PhotoUploadRequest,
    PhotoUpdateRequest,
    PhotoDeleteRequest,
    TableFetchRequest,
)

__all__ = [
    "PhotoItem",
    "PhotoUploadRequest",
    "PhotoUpdateRequest",
    "PhotoDeleteRequest",
    "TableFetchRequest",
]
