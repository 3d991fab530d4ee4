"""
Photo List Lambda Function
Lists the newest photos in the pictures bucket with cache-busted URLs
"""
from photo_commons.decorators import http_handler
from photo_commons.services.service_container import get_service
from photo_commons.utils import create_json_response


@http_handler()
def lambda_handler(event, context):
    """
    Photo list handler

    Returns: [{"name": str, "url": str}, ...] newest first, each URL
    suffixed with ?v=<list time in epoch millis>
    """
    photo_service = get_service('photo_service')
    photos = photo_service.list_photos()

    return create_json_response([photo.to_dict() for photo in photos], event)
