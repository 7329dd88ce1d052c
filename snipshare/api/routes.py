"""
Route Registration

Centralizes all route registration for the FastAPI application.

Route Hierarchy:
================
    /health, /ready, /live → Health check endpoints
    /auth                  → Register, login, current user, profile update
    /snippets              → Listings, CRUD, fork, like, directories
    /users                 → Profiles, search, stats, liked snippets

Usage:
======
    from snipshare.api.routes import register_routes

    app = FastAPI()
    register_routes(app)
"""

from fastapi import FastAPI

from snipshare.api.handlers import (
    auth_handler,
    health_handler,
    snippet_handler,
    user_handler,
)


def register_routes(app: FastAPI) -> None:
    """
    Register all API routes.

    Args:
        app: FastAPI application instance
    """
    # Health check endpoints (no prefix, root level)
    app.include_router(
        health_handler.router,
        tags=["Health"],
    )

    # Authentication endpoints
    app.include_router(
        auth_handler.router,
        prefix="/auth",
        tags=["Authentication"],
    )

    # Snippet endpoints
    app.include_router(
        snippet_handler.router,
        prefix="/snippets",
        tags=["Snippets"],
    )

    # User endpoints
    app.include_router(
        user_handler.router,
        prefix="/users",
        tags=["Users"],
    )
