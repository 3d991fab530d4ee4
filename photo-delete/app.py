"""
Photo Delete Lambda Function
Removes a single photo from the pictures bucket
"""
from photo_commons.contracts import PhotoDeleteRequest
from photo_commons.decorators import http_handler, JSON_BODY
from photo_commons.services.service_container import get_service
from photo_commons.utils import create_json_response


@http_handler(body_format=JSON_BODY)
def lambda_handler(event, context):
    """
    Photo deletion handler

    Expected request: {"name": "<object name>"}

    Returns: {"success": true}
    """
    request = PhotoDeleteRequest.from_body(event['parsed_body'])

    photo_service = get_service('photo_service')
    result = photo_service.delete_photo(request.name)

    print(f"Photo deletion completed successfully: {request.name}")
    return create_json_response(result, event)
