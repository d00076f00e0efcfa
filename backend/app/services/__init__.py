# Services package init
"""
Service Skeleton Backend — Services Layer
===========================================

What:  Business logic layer sitting between routes (HTTP) and the filesystem/database.
Why:   Routes handle HTTP, services handle the work, so services can be tested
       without an HTTP client and reused by the CLI entry point.

Service Inventory:
    - ApplicationRunner: bootstrap smoke test (data dir + diagnostic log line)

New services for a real application go next to it and are injected into
routes with FastAPI's Depends(), the same way get_runner() is.
"""
