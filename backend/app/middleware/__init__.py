# Middleware package init
"""
Service Skeleton Backend — Middleware Package
===============================================

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID first, so every later log line can carry it
    2. Logging measures the full duration and sees the final status code
    3. GZip and CORS are FastAPI's stock middleware
"""
