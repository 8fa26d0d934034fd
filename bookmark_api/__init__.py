"""
Top‑level package for the Bookmark API.

The package provides no public exports; all functionality lives in
submodules under ``app``.  Import the application factory from
``bookmark_api.app.main`` or run the server through
``bookmark_api.app.server``.
"""

__all__ = []
