# Validation package init
"""
HR API Backend — Request Validation
=====================================

What:  Declarative per-endpoint request rules and the interpreter that runs them.

Modules:
    - rules.py:             FieldRule / ObjectRule / RequestSchema, the
                            interpreter, and the validate_request dependency
    - branch_schemas.py:    rule sets for /branches endpoints
    - employee_schemas.py:  rule sets for /employees endpoints
"""
