# ============================================
# issuehub/exceptions.py
# ============================================
"""
Error taxonomy shared by every operation.

Operations raise one of the ``TrackerError`` kinds below. Anything else that
escapes an operation is an internal failure: ``handle_operation_errors`` logs
it with its traceback and rewrites it to ``OperationFailed`` so store or
programming errors never reach the caller verbatim.
"""
import functools
import logging

from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class TrackerError(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Something went wrong'
    default_code = 'error'

    def __init__(self, detail=None):
        super().__init__(detail=detail, code=self.default_code)

    @property
    def message(self) -> str:
        return str(self.detail)


class Unauthenticated(TrackerError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = 'Not authenticated'
    default_code = 'unauthenticated'


class InvalidId(TrackerError):
    default_detail = 'Invalid ID submitted'
    default_code = 'invalid_id'


class Invalid(TrackerError):
    default_detail = 'Invalid input'
    default_code = 'invalid'


class NotFound(TrackerError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = 'Resource not found'
    default_code = 'not_found'


class Forbidden(TrackerError):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = 'Not authorized to access this resource'
    default_code = 'forbidden'


class Conflict(TrackerError):
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'Conflicting state'
    default_code = 'conflict'


class OperationFailed(TrackerError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = 'Something went wrong'
    default_code = 'operation_failed'


def handle_operation_errors(func):
    """Surface a single user-facing error per operation."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except TrackerError as exc:
            logger.info("[%s] %s: %s", func.__name__, exc.default_code, exc.message)
            raise
        except Exception:
            logger.exception("[%s] unexpected failure", func.__name__)
            raise OperationFailed()

    return wrapper


def api_exception_handler(exc, context):
    """Render every failure as {"detail": ..., "code": ...}."""
    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, TrackerError):
        response.data = {'detail': exc.message, 'code': exc.default_code}
    elif isinstance(response.data, dict) and 'code' not in response.data:
        response.data.setdefault('detail', 'Invalid input')
        response.data['code'] = getattr(exc, 'default_code', 'error')
    return response
