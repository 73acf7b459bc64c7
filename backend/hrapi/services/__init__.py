# Services package init
"""
HR API Backend — Services Layer
=================================

What:  Business logic between the routes (HTTP) and the document store.
How:   One service per resource, built per request by a FastAPI dependency
       around the request's DocumentStore.

Service Inventory:
    - CollectionService (generic): list / get / create / merge-update / delete
    - BranchService: the `branches` collection
    - EmployeeService: the `employees` collection, plus listings by branch
      and by department

Services never raise for missing records (they return None / False) and
never catch store errors.
"""
