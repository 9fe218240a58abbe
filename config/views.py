from django.conf import settings
from django.db import connection, DatabaseError
from django.http import FileResponse, JsonResponse


def health_check(request):
    """Liveness probe that also touches the database."""
    try:
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1')
    except DatabaseError:
        return JsonResponse({'status': 'error', 'database': 'unavailable'}, status=503)
    return JsonResponse({'status': 'ok'})


def serve_frontend(request):
    """Serve the single-page app's index.html (SPA fallback)."""
    index = settings.FRONTEND_DIR / 'index.html'
    if not index.exists():
        return error_404(request, None)
    return FileResponse(open(index, 'rb'), content_type='text/html')


def error_404(request, exception):
    """Custom 404 handler."""
    return JsonResponse({
        'error': 'Not found',
        'status': 404
    }, status=404)


def error_500(request):
    """Custom 500 handler."""
    return JsonResponse({
        'error': 'Internal server error',
        'status': 500
    }, status=500)
