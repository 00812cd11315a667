"""
Health check endpoint.

/health - Liveness probe (fast, no dependency checks)
"""
from django.http import JsonResponse
from django.views.decorators.http import require_GET

from apps.backend.core import __version__


@require_GET
def health(request):
    """Returns 200 OK if the application process is alive."""
    return JsonResponse({
        'status': 'alive',
        'service': 'conduit-backend',
        'version': __version__,
    }, status=200)
