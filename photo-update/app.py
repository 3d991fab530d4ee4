"""
Photo Update Lambda Function
Overwrites an existing photo in place, keeping its name
"""
from photo_commons.config import config
from photo_commons.contracts import PhotoUpdateRequest
from photo_commons.decorators import http_handler, MULTIPART_BODY
from photo_commons.services.service_container import get_service
from photo_commons.utils import create_json_response
from photo_commons.validation_utils import validate_upload_size


@http_handler(body_format=MULTIPART_BODY)
def lambda_handler(event, context):
    """
    Photo replace handler

    Expected request: multipart/form-data with a `file` part and an
    `oldName` part naming the object to overwrite.

    Returns: {"name": oldName, "url": str}
    """
    request = PhotoUpdateRequest.from_form(event['form_parts'])
    validate_upload_size(request, config.max_upload_size)

    photo_service = get_service('photo_service')
    photo = photo_service.replace_photo(
        name=request.old_name,
        data=request.data,
        content_type=request.content_type
    )

    print(f"Photo replaced successfully: {photo.name}")
    return create_json_response(photo.to_dict(), event)
