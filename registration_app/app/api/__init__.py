"""
JSON API package.

``router.py`` exposes a top‑level ``router`` which includes the
domain‑specific routers from ``endpoints``.  The application mounts it
under ``/api``.
"""
