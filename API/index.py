"""
Serverless entrypoint

Serverless Python runtimes (e.g. Vercel) import a WSGI ``app`` from this file; it
exposes the backend stub under that name. Run ``etsy-viewer-backend`` instead
for a local server.
"""

from etsy_viewer.backend import app

__all__ = ["app"]
