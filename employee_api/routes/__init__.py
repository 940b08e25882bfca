# Routes package init
"""
Employee API - API Routes Package
===================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - employees.py: /v1/api/employees CRUD (list, get, create, update, delete)
    - health.py:    GET /health (service health check)

Routes are thin: they extract path/body data, call the service, and set
status codes and headers. Business rules live in services.
"""
