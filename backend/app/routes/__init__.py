# Routes package init
"""
Service Skeleton Backend — API Routes Package
===============================================

Route Inventory:
    - index.py:   GET /        (run the bootstrap smoke test)
    - health.py:  GET /health  (service health check)

Design Principle:
    Routes stay THIN. They pull what they need from the request, call a
    service, and shape the response. Business logic belongs in services.
"""
