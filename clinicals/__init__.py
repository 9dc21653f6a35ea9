"""Patient and clinical data application.

This package contains models, repositories, services, serializers, views
and route registrations implementing the patient clinicals REST API.
"""
