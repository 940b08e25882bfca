"""
Employee API - Application Package
====================================

CRUD HTTP service for employee records backed by a relational `employees`
table.

Layers:
    ┌─────────────────────────────────────┐
    │        Routes (API Layer)           │  ← HTTP status codes, path/body
    ├─────────────────────────────────────┤
    │      Services (Business Logic)      │  ← number > 0, existence checks
    ├─────────────────────────────────────┤
    │   Repositories (Data Access)        │  ← parameterized SQL, row mapping
    ├─────────────────────────────────────┤
    │   Database (Async SQLAlchemy)       │  ← engine, per-request sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
