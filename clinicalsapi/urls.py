"""
URL configuration for the patient clinicals API project.

This module includes both the Django admin and the API routes provided
by the clinicals app. OpenAPI documentation is exposed at ``/swagger/``
and ``/redoc/``.
"""
from django.contrib import admin
from django.urls import path, include

from rest_framework import permissions
from drf_yasg.views import get_schema_view
from drf_yasg import openapi

# API metadata for Swagger/OpenAPI documentation
api_info = openapi.Info(
    title="Clinical Data API",
    default_version='1.0.0',
    description="API for managing patients and their clinical data with field validation.",
)

schema_view = get_schema_view(
    api_info,
    public=True,
    permission_classes=(permissions.AllowAny,),
)

urlpatterns = [
    path('admin/', admin.site.urls),
    path('', include('clinicals.routers')),
    path('swagger/', schema_view.with_ui('swagger', cache_timeout=0), name='schema-swagger-ui'),
    path('redoc/', schema_view.with_ui('redoc', cache_timeout=0), name='schema-redoc'),
]

handler404 = 'clinicals.views.errors.not_found'
handler500 = 'clinicals.views.errors.server_error'
