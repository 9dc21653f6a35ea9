#!/usr/bin/env python
"""Command line entry point for the patient clinicals API.

Runs Django management commands (``runserver``, ``migrate``,
``seed_clinicals``, ...) against ``clinicalsapi.settings`` unless
``DJANGO_SETTINGS_MODULE`` says otherwise.
"""
import os
import sys


def main() -> None:
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'clinicalsapi.settings')
    try:
        from django.core.management import execute_from_command_line  # type: ignore
    except ImportError as exc:
        raise ImportError(
            "Couldn't import Django. Is it installed and available on your "
            "PYTHONPATH? Install the project with `pip install -e .`."
        ) from exc
    execute_from_command_line(sys.argv)


if __name__ == '__main__':
    main()
