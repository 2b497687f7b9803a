"""
Application errors and their HTTP mapping.

Repository and views raise the errors below; `leave_notifier_exception_handler`
turns them into responses. Anything unexpected is logged with its traceback
and answered with a 500 that carries no internal detail.
"""
import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class LeaveNotifierError(Exception):
    """Base class for application errors"""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = 'An unexpected error occurred.'

    def __init__(self, detail=None):
        self.detail = detail if detail is not None else self.default_detail
        super().__init__(self.detail)

    def get_response_data(self):
        if isinstance(self.detail, dict):
            return self.detail
        return {'detail': str(self.detail)}


class NotFoundError(LeaveNotifierError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = 'Not found.'


class ValidationError(LeaveNotifierError):
    """
    Malformed input. `detail` is either a message or a dict of
    field name -> list of messages.
    """
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Invalid input.'


class AuthorizationError(LeaveNotifierError):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = 'You do not have permission to perform this action.'


def leave_notifier_exception_handler(exc, context):
    """
    DRF exception handler.
    DRF and Django HTTP errors keep their default handling.
    """
    response = exception_handler(exc, context)
    if response is not None:
        return response

    view = context.get('view')
    view_name = view.__class__.__name__ if view is not None else 'unknown view'

    if isinstance(exc, LeaveNotifierError) and type(exc) is not LeaveNotifierError:
        logger.info(f"{view_name}: {exc.__class__.__name__}: {exc.detail}")
        return Response(exc.get_response_data(), status=exc.status_code)

    logger.error(f"Unhandled exception in {view_name}: {exc}", exc_info=exc)
    return Response(
        {'detail': LeaveNotifierError.default_detail},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR
    )
