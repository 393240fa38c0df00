"""
Top-level package for the LTRegistrator API.

All functionality lives in submodules under ``app``; import the ASGI
application as ``ltregistrator_api.app.main:app``.
"""

__all__ = []
