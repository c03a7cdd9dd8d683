"""
Application package initializer.

The package is split the same way for every concern: request and
response models live in ``schemas``, business logic in ``services``,
HTTP routing in ``api`` (JSON) and ``web`` (server‑rendered pages) and
shared infrastructure (configuration, logging, storage, errors) in
``core``.
"""

from .main import app  # noqa: F401
