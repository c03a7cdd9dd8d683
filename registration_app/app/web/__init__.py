"""
Server‑rendered HTML pages: the registration form, the terms page and
the legacy form submission endpoint.
"""
