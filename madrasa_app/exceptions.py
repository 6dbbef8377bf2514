# exceptions.py
import logging

from django.core.exceptions import PermissionDenied
from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from .validation import flatten_errors

logger = logging.getLogger(__name__)


class TenantNotFound(exceptions.NotFound):
    default_detail = 'No active tenant found'
    default_code = 'tenant_not_found'


class DemoDataAlreadyLoaded(exceptions.APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Demo data already loaded. Clear existing data first.'
    default_code = 'demo_data_loaded'


def _message_from(detail):
    if isinstance(detail, (dict, list)):
        return ', '.join(flatten_errors(detail))
    return str(detail)


def api_exception_handler(exc, context):
    """Every failure leaves as {success: false, message} with its status code"""
    if isinstance(exc, Http404):
        exc = exceptions.NotFound()
    elif isinstance(exc, PermissionDenied):
        exc = exceptions.PermissionDenied()

    response = exception_handler(exc, context)
    if response is None:
        view = context.get('view')
        logger.exception(f"Unhandled error in {view.__class__.__name__ if view else 'view'}: {exc}")
        return Response({
            'success': False,
            'message': 'An unexpected error occurred'
        }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    response.data = {
        'success': False,
        'message': _message_from(exc.detail),
    }
    return response
