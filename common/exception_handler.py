import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from policies.catalog import NotFound

logger = logging.getLogger(__name__)


def custom_exception_handler(exc, context):
    # Call the default exception handler first
    response = exception_handler(exc, context)

    # Unknown feature names surface as 404 rather than a server error
    if isinstance(exc, NotFound):
        return Response({"error": str(exc)}, status=status.HTTP_404_NOT_FOUND)

    # If the response is None, handle other uncaught exceptions
    if response is None:
        response = handle_other_exceptions(exc, context)

    return response


def handle_other_exceptions(exc, context):
    view = context.get("view")
    logger.error(
        f"Unhandled error in {view.__class__.__name__ if view else 'unknown view'}: {exc}",
        exc_info=exc,
    )
    return Response({"error": str(exc)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
