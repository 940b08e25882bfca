# Middleware package init
"""
Employee API - Middleware Package
===================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (request direction):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID: correlation ID for logs, error bodies and response headers
    2. Logging: method, path, status and duration tagged with the request ID
"""
