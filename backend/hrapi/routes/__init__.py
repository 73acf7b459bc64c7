# Routes package init
"""
HR API Backend — API Routes Package
=====================================

What:  HTTP route handlers (controllers) and their path bindings.

Route Inventory (all under settings.api_prefix, default /api/v1):
    - branches.py:   GET/POST        /branches
                     GET/PUT/DELETE  /branches/{id}
    - employees.py:  GET/POST        /employees
                     GET             /employees/branch/{branchId}
                     GET             /employees/department/{department}
                     GET/PUT/DELETE  /employees/{id}
    - health.py:     GET             /health
                     GET             /   (outside the prefix)

Design Principle:
    Handlers are THIN. Validation runs as a dependency before the handler,
    business rules live in services, and errors raised by services propagate
    to the global exception handlers in main.py.
"""
