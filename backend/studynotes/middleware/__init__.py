# Middleware package init
"""
Mini Study Notes Backend — Middleware Package
==============================================

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID: correlation ID for logs, error bodies and the response header
    2. Logging: one access line per request, tagged with that ID
    3. GZip / CORS: FastAPI's stock middleware
"""
