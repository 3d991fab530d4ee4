"""
Photo service with list/upload/replace/delete operations
against the photo storage bucket
"""
from typing import Any, Dict, List, Optional
from ..constants import StorageConstants
from ..config import config
from ..contracts.photo_contracts import PhotoItem
from ..error_handler import error_handler
from ..logger import photo_logger as logger
from ..utils import current_timestamp_ms, with_cache_buster
from ..validation_utils import generate_photo_name
from .supabase_client import get_service_role_client


class PhotoService:
    """
    Photo operations over a single storage bucket
    Every operation uses a fresh service-role client
    """

    def __init__(self, bucket_name: str = None):
        self.bucket_name = bucket_name or config.photo_bucket_name

    def _bucket(self):
        return get_service_role_client().storage.from_(self.bucket_name)

    def list_photos(self, limit: int = None) -> List[PhotoItem]:
        """
        List the newest photos in the bucket

        Args:
            limit: Page size (default from config)

        Returns:
            PhotoItems ordered by creation time, newest first, each URL
            carrying the same cache-busting timestamp
        """
        limit = limit or config.photo_list_limit
        logger.log_service_operation("photo_list", bucket_name=self.bucket_name, limit=limit)

        bucket = self._bucket()
        try:
            files = bucket.list("", {
                "limit": limit,
                "offset": 0,
                "sortBy": {
                    "column": StorageConstants.LIST_SORT_COLUMN,
                    "order": StorageConstants.LIST_SORT_ORDER
                }
            })
        except Exception as e:
            raise error_handler.handle_storage_error(e, 'list', self.bucket_name)

        listed_at = current_timestamp_ms()
        photos = [
            PhotoItem(
                name=item['name'],
                url=with_cache_buster(bucket.get_public_url(item['name']), listed_at)
            )
            for item in files or []
        ]

        logger.log_storage_operation(self.bucket_name, 'list', count=len(photos))
        return photos

    def upload_photo(self, data: bytes, filename: Optional[str], content_type: Optional[str] = None) -> PhotoItem:
        """
        Store a new photo under a generated name

        Args:
            data: Raw file content
            filename: Original filename, used only for its extension
            content_type: Declared MIME type

        Returns:
            PhotoItem for the generated name (no cache-busting suffix)
        """
        name = generate_photo_name(filename)
        logger.log_service_operation("photo_upload", bucket_name=self.bucket_name,
                                     photo_name=name, size=len(data))

        # Generated names are unique, so a collision is an error rather than an overwrite
        return self._store(name, data, content_type, upsert=False, operation='upload')

    def replace_photo(self, name: str, data: bytes, content_type: Optional[str] = None) -> PhotoItem:
        """
        Overwrite an existing photo in place

        Args:
            name: Existing object name; kept unchanged
            data: New file content
            content_type: Declared MIME type

        Returns:
            PhotoItem with the same name and its public URL
        """
        logger.log_service_operation("photo_replace", bucket_name=self.bucket_name,
                                     photo_name=name, size=len(data))

        return self._store(name, data, content_type, upsert=True, operation='replace')

    def delete_photo(self, name: str) -> Dict[str, Any]:
        """
        Remove exactly one object from the bucket

        Whatever the backend reports for unknown names is passed through.
        """
        logger.log_service_operation("photo_delete", bucket_name=self.bucket_name, photo_name=name)

        bucket = self._bucket()
        try:
            removed = bucket.remove([name])
        except Exception as e:
            raise error_handler.handle_storage_error(e, 'delete', self.bucket_name, name)

        logger.log_storage_operation(self.bucket_name, 'delete', name,
                                     removed_count=len(removed) if isinstance(removed, list) else None)
        return {'success': True}

    def _store(self, name: str, data: bytes, content_type: Optional[str], upsert: bool, operation: str) -> PhotoItem:
        bucket = self._bucket()
        file_options = {
            "content-type": content_type or StorageConstants.DEFAULT_CONTENT_TYPE,
            "upsert": "true" if upsert else "false"
        }

        try:
            bucket.upload(name, data, file_options)
        except Exception as e:
            raise error_handler.handle_storage_error(e, operation, self.bucket_name, name)

        logger.log_storage_operation(self.bucket_name, operation, name,
                                     content_type=file_options["content-type"], size=len(data))

        return PhotoItem(name=name, url=bucket.get_public_url(name))
