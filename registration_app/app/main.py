"""
Main entrypoint for the Registration App.

This module assembles the FastAPI application: it sets up logging,
attaches the submission store, enables CORS, registers the handlers
that turn domain errors into JSON envelopes and includes the API and
page routers.  ``create_app`` builds the app; a default instance is
created at import time as ``app`` so it can be served directly::

    uvicorn registration_app.app.main:app --reload

Pass a ``SubmissionStore`` to ``create_app`` to run the application on
a different store (tests create a fresh in‑memory store per app).
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.router import router as api_router
from .core.config import settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.store import InMemorySubmissionStore, SubmissionStore
from .web.routes import router as pages_router


def create_app(store: Optional[SubmissionStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[SubmissionStore]
        Store backing the API and the form.  A new
        ``InMemorySubmissionStore`` is used when omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the rest of the
    # setup can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.store = store if store is not None else InMemorySubmissionStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH"],
        allow_headers=["Content-Type"],
    )
    register_exception_handlers(app)

    app.include_router(api_router, prefix="/api")
    app.include_router(pages_router)

    logging.getLogger(__name__).info(
        "%s %s ready with %s",
        settings.project_name,
        settings.api_version,
        type(app.state.store).__name__,
    )
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
