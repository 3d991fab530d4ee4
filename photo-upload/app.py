"""
Photo Upload Lambda Function
Stores a new photo in the pictures bucket under a generated name
"""
from photo_commons.config import config
from photo_commons.contracts import PhotoUploadRequest
from photo_commons.decorators import http_handler, MULTIPART_BODY
from photo_commons.services.service_container import get_service
from photo_commons.utils import create_json_response
from photo_commons.validation_utils import validate_upload_size


@http_handler(body_format=MULTIPART_BODY)
def lambda_handler(event, context):
    """
    Photo upload handler

    Expected request: multipart/form-data with a `file` part
    (filename and content required). The stored name is
    <epoch millis>-<random hex>.<original extension>.

    Returns: {"name": str, "url": str}
    """
    request = PhotoUploadRequest.from_form(event['form_parts'])
    validate_upload_size(request, config.max_upload_size)

    photo_service = get_service('photo_service')
    photo = photo_service.upload_photo(
        data=request.data,
        filename=request.filename,
        content_type=request.content_type
    )

    print(f"Photo upload completed successfully: {photo.name}")
    return create_json_response(photo.to_dict(), event)
