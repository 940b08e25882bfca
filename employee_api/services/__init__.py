# Services package init
"""
Employee API - Services Layer
===============================

What:  Business logic layer sitting between routes (HTTP) and repositories (SQL).
How:   Services receive their repository through the constructor, apply
       business rules, and return response schemas.

Service Inventory:
    - EmployeeService: number positivity on create, existence on
      get/update/delete, store failures as DatabaseError
"""
