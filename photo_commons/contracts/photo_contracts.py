"""
Photo Service Contracts
Request and response shapes for the photo and table handlers
"""
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional
from ..constants import ErrorConstants, FormConstants
from ..exceptions import ValidationError
from ..validation_utils import FormPart, find_form_part


@dataclass
class PhotoItem:
    """A stored photo: its bucket key and public URL"""
    name: str
    url: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class PhotoUploadRequest:
    """
    Multipart upload of a new photo

    Requires a `file` part with a non-empty filename and payload.
    """
    data: bytes
    filename: str
    content_type: Optional[str] = None

    @classmethod
    def from_form(cls, parts: Optional[List[FormPart]]) -> 'PhotoUploadRequest':
        if parts is None:
            raise ValidationError(ErrorConstants.NO_FORM_DATA)

        file_part = find_form_part(parts, FormConstants.FILE)
        if not file_part or not file_part.filename or not file_part.data:
            raise ValidationError(ErrorConstants.NO_FILE_UPLOADED, field=FormConstants.FILE)

        return cls(data=file_part.data, filename=file_part.filename, content_type=file_part.content_type)


@dataclass
class PhotoUpdateRequest:
    """
    Multipart replacement of an existing photo

    Requires a `file` part and a non-empty `oldName` part.
    """
    old_name: str
    data: bytes
    content_type: Optional[str] = None

    @classmethod
    def from_form(cls, parts: Optional[List[FormPart]]) -> 'PhotoUpdateRequest':
        if parts is None:
            raise ValidationError(ErrorConstants.NO_FORM_DATA)

        file_part = find_form_part(parts, FormConstants.FILE)
        old_name_part = find_form_part(parts, FormConstants.OLD_NAME)
        if not file_part or not file_part.data or not old_name_part or not old_name_part.data:
            raise ValidationError(ErrorConstants.MISSING_FILE_OR_OLD_NAME)

        try:
            old_name = old_name_part.text()
        except UnicodeDecodeError:
            raise ValidationError(ErrorConstants.MISSING_FILE_OR_OLD_NAME, field=FormConstants.OLD_NAME)

        return cls(
            old_name=old_name,
            data=file_part.data,
            content_type=file_part.content_type
        )


@dataclass
class PhotoDeleteRequest:
    """JSON body `{name}` naming the object to remove"""
    name: str

    @classmethod
    def from_body(cls, body: Dict[str, Any]) -> 'PhotoDeleteRequest':
        name = body.get('name')
        if not name or not isinstance(name, str):
            raise ValidationError(ErrorConstants.MISSING_FILE_NAME, field='name')
        return cls(name=name)


@dataclass
class TableFetchRequest:
    """
    JSON body `{table}`

    The table name is deliberately not checked for presence; the backend
    rejects a missing one.
    """
    table: Optional[str]

    @classmethod
    def from_body(cls, body: Dict[str, Any]) -> 'TableFetchRequest':
        return cls(table=body.get('table'))
