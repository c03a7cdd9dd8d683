"""
Top‑level package for the Registration App.

The web application lives in the ``app`` subpackage and can be served
with ``uvicorn registration_app.app.main:app``.  The ``client`` module
provides a small ``requests`` based wrapper around the REST API.
"""

__all__ = []
