import logging

from django.core.exceptions import PermissionDenied
from django.http import Http404

logger = logging.getLogger(__name__)

# raised on purpose by views, not worth reporting
EXPECTED_EXCEPTIONS = (Http404, PermissionDenied)


def log_server_error(error, request=None):
    """Report an unhandled server error. Only the log backend is wired up."""
    exc_info = (type(error), error, error.__traceback__)
    if request is not None:
        logger.error(
            "[Server Error] %s %s: %r", request.method, request.get_full_path(), error, exc_info=exc_info
        )
    else:
        logger.error("[Server Error] %r", error, exc_info=exc_info)


class ExceptionMonitoringMiddleware:
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exception):
        if not isinstance(exception, EXPECTED_EXCEPTIONS):
            log_server_error(exception, request)
        # let django's normal error handling take over
        return None
