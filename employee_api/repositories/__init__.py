# Repositories package init
"""
Employee API - Data-Access Layer
==================================

What:  Classes that issue SQL statements and map rows to ORM entities.
How:   One repository per table, constructed around a request-scoped
       AsyncSession. Repositories never raise for missing rows.

Repository Inventory:
    - EmployeeRepository: CRUD statements for the `employees` table
"""
