"""
TaskBridge API package.

Provides the FastAPI application for the TaskBridge gateway. The
application itself lives in ``api.app``.
"""
