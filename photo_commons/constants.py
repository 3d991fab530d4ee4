"""
Photo Service Constants
HTTP, storage, form and error-message constants shared by every handler
"""


class HTTPConstants:
    """HTTP status codes and headers"""

    # Status codes
    OK = 200
    NO_CONTENT = 204
    BAD_REQUEST = 400
    FORBIDDEN = 403
    REQUEST_TOO_LARGE = 413
    INTERNAL_SERVER_ERROR = 500

    # Headers
    CONTENT_TYPE = 'Content-Type'
    AUTHORIZATION = 'Authorization'
    ACCESS_CONTROL_ALLOW_ORIGIN = 'Access-Control-Allow-Origin'
    ACCESS_CONTROL_ALLOW_HEADERS = 'Access-Control-Allow-Headers'
    ACCESS_CONTROL_ALLOW_METHODS = 'Access-Control-Allow-Methods'

    # MIME types
    JSON = 'application/json'
    MULTIPART_FORM = 'multipart/form-data'


class StorageConstants:
    """Object storage constants"""

    DEFAULT_BUCKET = 'Pictures'

    # Listing
    LIST_LIMIT = 100
    LIST_SORT_COLUMN = 'created_at'
    LIST_SORT_ORDER = 'desc'

    # Cache-busting query parameter appended to listed URLs
    CACHE_BUST_PARAM = 'v'

    # Upload defaults
    DEFAULT_EXTENSION = 'jpg'
    DEFAULT_CONTENT_TYPE = 'image/*'
    NAME_SUFFIX_LENGTH = 13
    MAX_UPLOAD_SIZE = 6 * 1024 * 1024  # API Gateway/Lambda payload ceiling


class FormConstants:
    """Multipart form field names"""

    FILE = 'file'
    OLD_NAME = 'oldName'


class SecurityConstants:
    """Security-related constants"""

    BEARER_PREFIX = 'Bearer '

    # Event keys never written to logs
    REDACTED_EVENT_KEYS = ['body', 'authorization', 'password', 'token', 'secret', 'key', 'cookie']


class ErrorConstants:
    """Error message constants"""

    INTERNAL_ERROR = 'Internal server error occurred'
    INVALID_JSON = 'Invalid JSON in request body'
    NO_FORM_DATA = 'No form data'
    NO_FILE_UPLOADED = 'No file uploaded'
    MISSING_FILE_OR_OLD_NAME = 'Missing file or oldName'
    MISSING_FILE_NAME = 'Missing file name'
    TABLE_NOT_ALLOWED = 'Table is not available'
    FILE_TOO_LARGE = 'Uploaded file too large'
    UNKNOWN_BACKEND_ERROR = 'Backend operation failed'
