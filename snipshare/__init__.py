"""
Snipshare Backend

Code-snippet sharing service: users create, tag, publish, like and fork
snippets; anyone can browse public snippets and author profiles.

Package Structure:
==================
    snipshare/
    ├── api/        ← FastAPI application
    ├── shared/     ← Models, repositories, services, schemas
    └── config/     ← Configuration

Running the Application:
========================
    # API Server
    uvicorn snipshare.api.main:app --reload

    # Migrations
    alembic upgrade head
"""
