"""
Service layer abstraction.

Each service encapsulates business logic for a domain.  Services only
talk to the store through the ``SubmissionStore`` interface, so the
in‑memory implementation used here can be swapped for a database
backed one without changing API handlers.
"""
