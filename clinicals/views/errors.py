"""JSON replacements for Django's HTML 404/500 pages."""
from django.http import JsonResponse

from clinicals.exceptions import error_body


def not_found(request, exception=None):
    return JsonResponse(error_body(404, f'No route for {request.method} {request.path}'), status=404)


def server_error(request):
    return JsonResponse(error_body(500, 'An unexpected error occurred'), status=500)
