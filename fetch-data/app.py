"""
Fetch Data Lambda Function
Returns every row of a table, read with the caller's own credential
"""
from photo_commons.contracts import TableFetchRequest
from photo_commons.decorators import http_handler, JSON_BODY
from photo_commons.services.service_container import get_service
from photo_commons.utils import create_json_response


@http_handler(body_format=JSON_BODY)
def lambda_handler(event, context):
    """
    Generic table fetch handler

    Expected request: {"table": "<table name>"}

    The caller's bearer token (Authorization header) is forwarded, so the
    backend's row-level policy applies.

    Returns: list of rows as stored
    """
    request = TableFetchRequest.from_body(event['parsed_body'])

    table_service = get_service('table_service')
    rows = table_service.fetch_all(request.table, event)

    return create_json_response(rows, event)
