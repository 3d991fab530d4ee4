"""
Photo Service Exceptions
Custom exception classes for photo-service operations; each carries the
HTTP status it maps to
"""
from .constants import HTTPConstants


class PhotoServiceError(Exception):
    """Base exception for all photo service errors"""

    status_code = HTTPConstants.INTERNAL_SERVER_ERROR

    def __init__(self, message: str, error_code: str = None, details: dict = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(message)


class ValidationError(PhotoServiceError):
    """Raised when input validation fails"""

    status_code = HTTPConstants.BAD_REQUEST

    def __init__(self, message: str, field: str = None, value: str = None):
        self.field = field
        self.value = value

        details = {}
        if field:
            details['field'] = field
        if value:
            details['value'] = value

        super().__init__(message, 'VALIDATION_ERROR', details)


class StorageOperationError(PhotoServiceError):
    """Raised when a storage bucket operation fails"""

    def __init__(self, message: str, operation: str = None, bucket: str = None, key: str = None):
        self.operation = operation
        self.bucket = bucket
        self.key = key

        details = {}
        if operation:
            details['operation'] = operation
        if bucket:
            details['bucket'] = bucket
        if key:
            details['key'] = key

        super().__init__(message, 'STORAGE_OPERATION_ERROR', details)


class TableQueryError(PhotoServiceError):
    """Raised when a table query fails"""

    def __init__(self, message: str, operation: str = None, table: str = None, original_error: str = None):
        self.operation = operation
        self.table = table
        self.original_error = original_error

        details = {}
        if operation:
            details['operation'] = operation
        if table:
            details['table'] = table
        if original_error:
            details['original_error'] = original_error

        super().__init__(message, 'TABLE_QUERY_ERROR', details)


class ConfigurationError(PhotoServiceError):
    """Raised when configuration is invalid or missing"""

    def __init__(self, message: str, config_key: str = None, config_source: str = None):
        self.config_key = config_key
        self.config_source = config_source

        details = {}
        if config_key:
            details['config_key'] = config_key
        if config_source:
            details['config_source'] = config_source

        super().__init__(message, 'CONFIGURATION_ERROR', details)


class AuthorizationError(PhotoServiceError):
    """Raised when authorization fails"""

    status_code = HTTPConstants.FORBIDDEN

    def __init__(self, message: str = "Access denied", resource: str = None, action: str = None):
        self.resource = resource
        self.action = action

        details = {}
        if resource:
            details['resource'] = resource
        if action:
            details['action'] = action

        super().__init__(message, 'AUTHORIZATION_ERROR', details)


class RequestTooLargeError(PhotoServiceError):
    """Raised when request payload is too large"""

    status_code = HTTPConstants.REQUEST_TOO_LARGE

    def __init__(self, message: str, max_size: int = None, actual_size: int = None):
        self.max_size = max_size
        self.actual_size = actual_size

        details = {}
        if max_size:
            details['max_size_bytes'] = max_size
        if actual_size:
            details['actual_size_bytes'] = actual_size

        super().__init__(message, 'REQUEST_TOO_LARGE', details)
