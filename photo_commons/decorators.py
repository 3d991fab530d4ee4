"""
Lambda handler decorators for the photo-service
"""
import time
from functools import wraps
from typing import Callable, Optional
from .constants import ErrorConstants, HTTPConstants
from .error_handler import error_handler
from .exceptions import PhotoServiceError
from .logger import logger
from .utils import create_error_response
from .validation_utils import parse_json_body, parse_multipart_form

JSON_BODY = 'json'
MULTIPART_BODY = 'multipart'


def http_handler(body_format: Optional[str] = None, log_requests: bool = True):
    """
    Decorator for API Gateway proxy handlers

    Parses the request body, then maps photo-service exceptions to their
    HTTP status. Parsed input is placed on the event:
    - body_format='json': event['parsed_body'] (dict, empty when no body)
    - body_format='multipart': event['form_parts'] (list of FormPart, or
      None when the request carries no form)

    Args:
        body_format: 'json', 'multipart' or None (no body expected)
        log_requests: Whether to log request start/end
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(event, context):
            start_time = time.time()
            function_name = getattr(context, 'function_name', None) or getattr(func, '__name__', 'unknown')

            if log_requests:
                logger.log_lambda_start(function_name, event, context)

            try:
                if body_format == JSON_BODY:
                    event['parsed_body'] = parse_json_body(event)
                elif body_format == MULTIPART_BODY:
                    event['form_parts'] = parse_multipart_form(event)

                result = func(event, context)

                if log_requests:
                    duration_ms = (time.time() - start_time) * 1000
                    logger.log_lambda_end(function_name, True, duration_ms,
                                          status_code=result.get('statusCode'))

                return result

            except PhotoServiceError as e:
                # Client input and backend errors carry their own status
                if log_requests:
                    duration_ms = (time.time() - start_time) * 1000
                    logger.log_lambda_end(function_name, False, duration_ms,
                                          error=e.message, error_code=e.error_code,
                                          status_code=e.status_code)

                return error_handler.create_lambda_error_response(e, event)

            except Exception as e:
                if log_requests:
                    duration_ms = (time.time() - start_time) * 1000
                    logger.log_lambda_end(function_name, False, duration_ms, error=str(e))

                logger.error(f"Unexpected error in {function_name}", error=e)

                return create_error_response(
                    HTTPConstants.INTERNAL_SERVER_ERROR,
                    ErrorConstants.INTERNAL_ERROR,
                    event
                )

        return wrapper
    return decorator
