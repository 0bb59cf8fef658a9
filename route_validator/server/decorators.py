"""Server-side decorators for endpoint handlers"""
from functools import wraps
from typing import Callable, Any, Type, Optional
from flask import request, jsonify
from werkzeug.exceptions import BadRequest, UnsupportedMediaType
from pydantic import BaseModel, ValidationError
import traceback
import logging

from route_validator.core import ResponseKey
from route_validator.server.enums import Endpoint, HTTPStatus

logger = logging.getLogger(__name__)


def _format_pydantic_errors(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in item['loc']) or 'request'}: {item['msg']}"
        for item in error.errors()
    )


def endpoint_error_handler(
    endpoint: Endpoint,
    request_model: Optional[Type[BaseModel]] = None
) -> Callable:
    """
    Decorator for endpoint handlers to provide unified error handling and JSON extraction.

    Handles:
    - JSON data extraction (missing or unreadable body becomes an empty dict)
    - Pydantic model validation (optional, for type safety)
    - BadRequest exceptions (logged and returned as 400)
    - ValueError exceptions, including request parsing errors (logged and returned as 400)
    - Pydantic ValidationError (logged and returned as 400)
    - Generic exceptions (logged and returned as 500)

    The decorated function receives the data as first parameter after self:
        @endpoint_error_handler(Endpoint.VALIDATE, RouteRequestSchema)
        def _validate_route(self, data: RouteRequestSchema):
            # data is a validated RouteRequestSchema

    Args:
        endpoint: The Endpoint enum member for this handler
        request_model: Optional Pydantic BaseModel class for request validation

    Returns:
        Decorated function with JSON extraction, validation, and error handling
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                try:
                    raw_data = request.get_json(force=True)
                except (BadRequest, UnsupportedMediaType):
                    raw_data = None

                if raw_data is None:
                    raw_data = {}

                if request_model:
                    if not isinstance(raw_data, dict):
                        raise BadRequest(f"Request body must be a JSON object, got {type(raw_data).__name__}")
                    try:
                        data = request_model(**raw_data)
                    except ValidationError as e:
                        error_msgs = _format_pydantic_errors(e)
                        logger.error(f"{endpoint.value} validation error: {error_msgs}")
                        return jsonify({ResponseKey.ERROR.value: f"Validation error: {error_msgs}"}), HTTPStatus.BAD_REQUEST.value
                else:
                    data = raw_data

                return func(*args, data, **kwargs)
            except BadRequest as e:
                logger.error(f"{endpoint.value} bad request: {str(e)}")
                return jsonify({ResponseKey.ERROR.value: str(e)}), HTTPStatus.BAD_REQUEST.value
            except ValidationError as e:
                error_msgs = _format_pydantic_errors(e)
                logger.error(f"{endpoint.value} validation error: {error_msgs}")
                return jsonify({ResponseKey.ERROR.value: f"Validation error: {error_msgs}"}), HTTPStatus.BAD_REQUEST.value
            except ValueError as e:
                logger.error(f"{endpoint.value} error: {str(e)}")
                return jsonify({ResponseKey.ERROR.value: str(e)}), HTTPStatus.BAD_REQUEST.value
            except Exception as e:
                error_trace = traceback.format_exc()
                logger.error(
                    f"{endpoint.value} failed: {str(e)}\n"
                    f"Error type: {type(e).__name__}\n"
                    f"Traceback:\n{error_trace}"
                )
                return jsonify({
                    ResponseKey.ERROR.value: f"{endpoint.value} failed: {str(e)}",
                    ResponseKey.ERROR_TYPE.value: type(e).__name__
                }), HTTPStatus.INTERNAL_SERVER_ERROR.value

        return wrapper

    return decorator
