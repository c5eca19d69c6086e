"""
Unified API exception handler.

Translates the failures raised by the treatment services into HTTP
responses.  Every error body has the same shape::

    {"ok": false, "error": {"code": "...", "message": "..."}}
"""
import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from treatment.errors import NotFound, TreatmentError, UnexpectedFailure, ValidationFailure

logger = logging.getLogger(__name__)

# Most specific classes first; the first isinstance match wins
ERROR_RESPONSES = (
    (NotFound, status.HTTP_404_NOT_FOUND, 'not_found'),
    (ValidationFailure, status.HTTP_400_BAD_REQUEST, 'invalid'),
    (UnexpectedFailure, status.HTTP_500_INTERNAL_SERVER_ERROR, 'server_error'),
)


def _error(code, message, status_code, **extra):
    body = {'code': code, 'message': message}
    body.update(extra)
    return Response({'ok': False, 'error': body}, status=status_code)


def _treatment_error_response(exc: TreatmentError) -> Response:
    for cls, status_code, code in ERROR_RESPONSES:
        if isinstance(exc, cls):
            break
    else:
        status_code, code = status.HTTP_500_INTERNAL_SERVER_ERROR, 'server_error'
    if status_code >= 500:
        logger.error('treatment failure: %s', exc.message, exc_info=exc)
    if isinstance(exc, ValidationFailure):
        return _error(code, exc.message, status_code, fields=exc.errors)
    return _error(code, exc.message, status_code)


def api_exception_handler(exc, context):
    if isinstance(exc, TreatmentError):
        return _treatment_error_response(exc)
    resp = drf_exception_handler(exc, context)
    if resp is None:
        logger.exception('unhandled error in %s', context.get('view'), exc_info=exc)
        return _error('server_error', str(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
    # normalize response
    if isinstance(resp.data, dict):
        detail = resp.data.get('detail') or resp.data
    else:
        detail = resp.data
    code = 'invalid' if resp.status_code == status.HTTP_400_BAD_REQUEST else 'api_error'
    return _error(code, detail, resp.status_code)
