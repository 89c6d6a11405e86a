"""
Vercel Serverless Function Entry Point

Exposes the relay FastAPI app for Vercel's Python runtime, which detects the
ASGI application through the `handler` name.
"""

from app.api.http_api import app

handler = app
