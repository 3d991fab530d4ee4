"""
Post Data Lambda Function
Placeholder route for writing rows or objects; accepts the request and
returns 204 without touching the backend
"""
from photo_commons.constants import HTTPConstants
from photo_commons.decorators import http_handler
from photo_commons.utils import create_response


@http_handler()
def lambda_handler(event, context):
    # TODO: upsert the posted row once the target table and payload shape are agreed
    return create_response(HTTPConstants.NO_CONTENT, '', event)
