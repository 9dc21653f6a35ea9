"""
Error taxonomy and the single point where errors become HTTP responses.

Services raise :class:`ValidationError`, :class:`InvalidArgument` and
:class:`NotFound`; DRF hands them to :func:`api_exception_handler`, which
renders every failure as ``{"error": <reason phrase>, "message": <detail>}``.
"""
from __future__ import annotations

from http import HTTPStatus

import structlog
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler, set_rollback

logger = structlog.get_logger(__name__)


class ValidationError(exceptions.APIException):
    """Input fields are missing, blank or out of range."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Invalid input.'
    default_code = 'validation_error'


class InvalidArgument(exceptions.APIException):
    """An identifier is missing or not a positive number."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Invalid identifier.'
    default_code = 'invalid_argument'


class NotFound(exceptions.APIException):
    """A referenced entity does not exist."""
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = 'Resource not found.'
    default_code = 'not_found'


def error_body(status_code: int, message: str) -> dict[str, str]:
    return {'error': HTTPStatus(status_code).phrase, 'message': message}


def flatten_detail(detail) -> str:
    """Reduce a DRF error detail (str, list or dict) to one message.

    Serializer errors arrive as ``{"age": ["A valid integer is required."]}``;
    the first error wins and is prefixed with its field name.
    """
    if isinstance(detail, dict):
        for field, errors in detail.items():
            message = flatten_detail(errors)
            if field in ('non_field_errors', 'detail'):
                return message
            return f'{field}: {message}'
        return ''
    if isinstance(detail, (list, tuple)):
        return flatten_detail(detail[0]) if detail else ''
    return str(detail)


def api_exception_handler(exc, context):
    resp = drf_exception_handler(exc, context)
    view = context.get('view')
    view_name = type(view).__name__ if view is not None else None
    if resp is None:
        logger.exception('unhandled_exception', view=view_name, error=str(exc))
        set_rollback()
        return Response(
            error_body(status.HTTP_500_INTERNAL_SERVER_ERROR, 'An unexpected error occurred'),
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    message = flatten_detail(resp.data)
    logger.info('api_error', view=view_name, status=resp.status_code, message=message)
    resp.data = error_body(resp.status_code, message)
    return resp
