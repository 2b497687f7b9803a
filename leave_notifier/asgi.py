"""
ASGI config for leave_notifier project.
"""
import os

from django.core.asgi import get_asgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'leave_notifier.settings')

application = get_asgi_application()
