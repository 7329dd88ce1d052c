"""
API Module

FastAPI application and route handlers for the snippet sharing API.

Package Structure:
==================
    api/
    ├── main.py           ← Application entry point
    ├── routes.py         ← Route registration
    ├── dependencies/     ← FastAPI dependencies
    ├── handlers/         ← Route handlers
    └── middleware/       ← Custom middleware

Usage:
======
    # Run the API
    uvicorn snipshare.api.main:app --reload

    # Import the app
    from snipshare.api.main import app, create_application
"""
