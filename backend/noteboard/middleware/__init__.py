# Middleware package init
"""
Noteboard Backend: Middleware Package
======================================

Middleware Chain (outermost first):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID: correlation id for logs, error bodies and X-Request-ID
    2. Logging: access line with status and duration
    3. GZip / CORS: FastAPI's stock middleware
"""
