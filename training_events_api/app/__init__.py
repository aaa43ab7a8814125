"""
FastAPI application for the Training Events API.

Import ``training_events_api.app.main:app`` to obtain the configured
ASGI application, or call ``create_app`` to build a fresh instance with
custom settings.
"""
