"""
Request validation utilities for the photo-service
Parses API Gateway bodies (JSON and multipart/form-data) and generates
storage names
"""
import base64
import json
import uuid
from dataclasses import dataclass
from email.parser import BytesParser
from email.policy import default as email_default
from typing import Any, Dict, List, Optional
from .constants import ErrorConstants, HTTPConstants, SecurityConstants, StorageConstants
from .exceptions import RequestTooLargeError, ValidationError
from .utils import current_timestamp_ms, get_header


@dataclass
class FormPart:
    """One part of a multipart/form-data body"""
    name: str
    data: bytes
    filename: Optional[str] = None
    content_type: Optional[str] = None

    def text(self, encoding: str = 'utf-8') -> str:
        return self.data.decode(encoding)


def get_raw_body(event: dict) -> Optional[bytes]:
    """Return the request body as bytes, decoding API Gateway base64 bodies"""
    body = event.get('body')
    if body is None or body == '':
        return None

    if isinstance(body, bytes):
        return body

    if event.get('isBase64Encoded'):
        try:
            return base64.b64decode(body)
        except (ValueError, TypeError):
            raise ValidationError("Invalid base64 request body")

    return body.encode('utf-8')


def parse_json_body(event: dict) -> Dict[str, Any]:
    """
    Parse a JSON request body

    Returns an empty dict when the request has no body; raises
    ValidationError for malformed JSON or a non-object payload.
    """
    body = event.get('body')
    if isinstance(body, dict):
        return body

    raw = get_raw_body(event)
    if raw is None:
        return {}

    try:
        parsed = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise ValidationError(ErrorConstants.INVALID_JSON)

    if parsed is None:
        return {}
    if not isinstance(parsed, dict):
        raise ValidationError(ErrorConstants.INVALID_JSON)
    return parsed


def parse_multipart_form(event: dict) -> Optional[List[FormPart]]:
    """
    Parse a multipart/form-data request body into FormPart objects

    Returns None when the request carries no multipart body at all.
    """
    content_type = get_header(event, HTTPConstants.CONTENT_TYPE) or ''
    if not content_type.lower().startswith(HTTPConstants.MULTIPART_FORM):
        return None

    raw = get_raw_body(event)
    if raw is None:
        return None

    # The email parser needs the boundary-bearing header in front of the body
    envelope = f"Content-Type: {content_type}\r\nMIME-Version: 1.0\r\n\r\n".encode('utf-8') + raw
    message = BytesParser(policy=email_default).parsebytes(envelope)
    if not message.is_multipart():
        return None

    parts = []
    for part in message.iter_parts():
        name = part.get_param('name', header='content-disposition')
        if not name:
            continue

        filename = part.get_filename()
        declared_type = part.get('Content-Type')
        parts.append(FormPart(
            name=name,
            data=part.get_payload(decode=True) or b'',
            filename=filename,
            content_type=part.get_content_type() if declared_type else None
        ))

    return parts


def find_form_part(parts: List[FormPart], name: str) -> Optional[FormPart]:
    """Find the first form part with the given field name"""
    for part in parts:
        if part.name == name:
            return part
    return None


def validate_upload_size(upload, max_size: int) -> None:
    """Reject file payloads (anything with a .data attribute) above the configured ceiling"""
    if max_size and len(upload.data) > max_size:
        raise RequestTooLargeError(
            f"{ErrorConstants.FILE_TOO_LARGE}. Maximum size: {max_size} bytes",
            max_size=max_size,
            actual_size=len(upload.data)
        )


def get_file_extension(filename: Optional[str]) -> str:
    """
    Extension of an uploaded filename, without the dot

    Falls back to jpg when the filename has no extension.
    """
    if filename and '.' in filename:
        extension = filename.rsplit('.', 1)[1]
        if extension:
            return extension
    return StorageConstants.DEFAULT_EXTENSION


def generate_photo_name(filename: Optional[str]) -> str:
    """
    Generate a storage name for a new upload

    Format: <epoch millis>-<random hex>.<extension>
    """
    suffix = uuid.uuid4().hex[:StorageConstants.NAME_SUFFIX_LENGTH]
    return f"{current_timestamp_ms()}-{suffix}.{get_file_extension(filename)}"


def get_bearer_token(event: dict) -> Optional[str]:
    """Extract the caller's bearer token from the Authorization header"""
    header = get_header(event, HTTPConstants.AUTHORIZATION)
    if header and header.startswith(SecurityConstants.BEARER_PREFIX):
        token = header[len(SecurityConstants.BEARER_PREFIX):].strip()
        return token or None
    return None
