"""
Service Skeleton Backend — Application Package Initializer
============================================================

What: Marks the `app` directory as a Python package.
Why:  Enables module imports like `from app.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    The skeleton keeps the layering new services are expected to grow into:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Bootstrap runner lives here
    ├─────────────────────────────────────┤
    │          Schemas (API contracts)    │  ← Pydantic response models
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Optional async SQLAlchemy engine
    └─────────────────────────────────────┘

    The only shipped behaviour is the bootstrap runner, which writes one
    diagnostic line per invocation to var/test.log. Everything else is the
    wiring a real service fills in.
"""

__version__ = "0.1.0"
