"""
Supabase error handling utilities for the photo-service
Translates SDK exceptions into photo-service exceptions and Lambda responses
"""
from typing import Any, Dict, Optional
from postgrest.exceptions import APIError
from storage3.utils import StorageException
from .constants import ErrorConstants, HTTPConstants
from .exceptions import PhotoServiceError, StorageOperationError, TableQueryError
from .logger import logger
from .utils import create_error_response


class BackendErrorHandler:
    """
    Centralized Supabase error handling for the photo-service
    """

    @staticmethod
    def extract_message(error: Exception) -> Optional[str]:
        """
        Pull the backend-supplied message out of an SDK exception

        storage3 raises StorageException with a dict payload (or a
        StorageApiError carrying .message); postgrest raises APIError with
        .message. Returns None when the backend gave no message.
        """
        message = getattr(error, 'message', None)
        if message:
            return str(message)

        if isinstance(error, APIError):
            # APIError.args holds a formatted summary, not a backend message
            return None

        if error.args:
            payload = error.args[0]
            if isinstance(payload, dict):
                return payload.get('message') or payload.get('error') or None
            if payload:
                return str(payload)

        return None

    @staticmethod
    def handle_storage_error(error: Exception, operation: str, bucket_name: str = None,
                             key: str = None) -> StorageOperationError:
        """
        Handle storage-related errors

        Args:
            error: The exception that occurred
            operation: The operation being performed
            bucket_name: Optional bucket name for context
            key: Optional object key for context

        Returns:
            StorageOperationError carrying the backend message verbatim
        """
        message = BackendErrorHandler.extract_message(error) or ErrorConstants.UNKNOWN_BACKEND_ERROR

        error_context = {
            'operation': operation,
            'bucket_name': bucket_name or 'unknown',
            'object_key': key or 'unknown',
            'backend_message': message
        }

        if isinstance(error, StorageException):
            logger.error("Storage API error", error=error, **error_context)
        else:
            logger.error("Unexpected storage error", error=error, **error_context)

        return StorageOperationError(message, operation=operation, bucket=bucket_name, key=key)

    @staticmethod
    def handle_table_error(error: Exception, operation: str, table_name: str = None) -> TableQueryError:
        """
        Handle table query errors

        Args:
            error: The exception that occurred
            operation: The operation being performed
            table_name: Optional table name for context

        Returns:
            TableQueryError carrying the backend message verbatim
        """
        message = BackendErrorHandler.extract_message(error) or ErrorConstants.UNKNOWN_BACKEND_ERROR

        error_context = {
            'operation': operation,
            'table_name': table_name or 'unknown',
            'backend_message': message
        }

        if isinstance(error, APIError):
            error_context['backend_code'] = getattr(error, 'code', None)
            logger.error("Table API error", error=error, **error_context)
        else:
            logger.error("Unexpected table error", error=error, **error_context)

        return TableQueryError(message, operation=operation, table=table_name, original_error=str(error))

    @staticmethod
    def create_lambda_error_response(error: PhotoServiceError, event: dict = None) -> Dict[str, Any]:
        """
        Create Lambda-compatible error response from a photo-service exception

        Args:
            error: Photo-service exception
            event: Original Lambda event for context

        Returns:
            Lambda proxy integration response
        """
        status_code = getattr(error, 'status_code', HTTPConstants.INTERNAL_SERVER_ERROR)
        details = None
        if status_code == HTTPConstants.BAD_REQUEST and error.details.get('field'):
            details = {'field': error.details['field']}

        return create_error_response(status_code, error.message, event, details)


# Global error handler instance
error_handler = BackendErrorHandler()
