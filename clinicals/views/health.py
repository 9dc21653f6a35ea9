import structlog
from django.db import DatabaseError, connections
from django.http import JsonResponse

from clinicals.exceptions import error_body

logger = structlog.get_logger(__name__)


def healthz(request):
    try:
        with connections['default'].cursor() as c:
            c.execute('SELECT 1')
            row = c.fetchone()
    except DatabaseError as e:
        logger.error('healthcheck_failed', error=str(e))
        return JsonResponse(error_body(500, str(e)), status=500)
    return JsonResponse({'ok': True, 'db': bool(row and row[0] == 1)})
