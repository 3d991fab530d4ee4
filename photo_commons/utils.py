"""
Lambda response and URL utilities for the photo-service
"""
import json
import time
from datetime import datetime, timezone
from typing import Dict, Any, Optional
from urllib.parse import urlsplit, urlunsplit, urlencode, parse_qsl
from .constants import HTTPConstants, StorageConstants
from .config import config


def create_response(status_code: int, body: str, event: Optional[dict] = None, headers: Optional[dict] = None) -> Dict[str, Any]:
    """
    Create standardized Lambda proxy response

    Args:
        status_code: HTTP status code
        body: Response body (JSON string)
        event: Original Lambda event for context
        headers: Additional headers

    Returns:
        Lambda proxy integration response
    """
    default_headers = {
        HTTPConstants.CONTENT_TYPE: HTTPConstants.JSON,
        HTTPConstants.ACCESS_CONTROL_ALLOW_ORIGIN: _allowed_origin(event),
        HTTPConstants.ACCESS_CONTROL_ALLOW_HEADERS: 'Content-Type,Authorization,X-Api-Key',
        HTTPConstants.ACCESS_CONTROL_ALLOW_METHODS: 'GET,POST,OPTIONS'
    }

    if headers:
        default_headers.update(headers)

    return {
        'statusCode': status_code,
        'headers': default_headers,
        'body': body
    }


def create_json_response(data: Any, event: Optional[dict] = None, status_code: int = HTTPConstants.OK) -> Dict[str, Any]:
    """Serialize data as the JSON body of a Lambda proxy response"""
    return create_response(status_code, json.dumps(data, default=str), event)


def create_error_response(status_code: int, message: str, event: Optional[dict] = None, details: Optional[dict] = None) -> Dict[str, Any]:
    """
    Create standardized error response

    Args:
        status_code: HTTP status code
        message: Error message
        event: Original Lambda event for context
        details: Additional error details

    Returns:
        Lambda proxy integration error response
    """
    error_body = {
        'success': False,
        'error': message,
        'timestamp': datetime.now(timezone.utc).isoformat()
    }

    if details:
        error_body.update(details)

    return create_response(status_code, json.dumps(error_body), event)


def _allowed_origin(event: Optional[dict]) -> str:
    allowed = config.cors_allowed_origins
    if '*' in allowed:
        return '*'

    origin = get_header(event or {}, 'origin')
    if origin and origin in allowed:
        return origin
    return allowed[0] if allowed else '*'


def get_header(event: dict, name: str) -> Optional[str]:
    """Case-insensitive header lookup on an API Gateway event"""
    headers = event.get('headers') or {}
    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() == wanted:
            return value
    return None


def current_timestamp_ms() -> int:
    """Current time in epoch milliseconds"""
    return int(time.time() * 1000)


def with_cache_buster(url: str, timestamp_ms: Optional[int] = None) -> str:
    """
    Append the cache-busting parameter to a public URL

    Existing query parameters are kept; a previous cache-bust value is replaced.
    """
    if timestamp_ms is None:
        timestamp_ms = current_timestamp_ms()

    parts = urlsplit(url)
    query = [
        (k, v) for k, v in parse_qsl(parts.query, keep_blank_values=True)
        if k != StorageConstants.CACHE_BUST_PARAM
    ]
    query.append((StorageConstants.CACHE_BUST_PARAM, str(timestamp_ms)))

    return urlunsplit((parts.scheme, parts.netloc, parts.path, urlencode(query), parts.fragment))
