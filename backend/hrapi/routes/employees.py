"""
HR API Backend — Employee Route Handlers
==========================================

What:  CRUD endpoints for employees plus listings by branch and by department,
       all under /api/v1/employees.
How:   Same shape as the branch routes: validator dependency → EmployeeService
       call → envelope or 404.

Filtered listings:
    GET /employees/branch/{branchId} and /employees/department/{department}
    answer 404 when nothing matches, so an unknown branch or department and
    an empty one look the same to clients.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from hrapi.schemas.common import ErrorResponse, SuccessResponse
from hrapi.schemas.employee import EMPLOYEE_FIELDS, Employee
from hrapi.services.employee_service import EmployeeService, get_employee_service
from hrapi.validation.employee_schemas import employee_schemas
from hrapi.validation.rules import ValidatedRequest, validate_request

router = APIRouter(tags=["Employees"])

EMPLOYEE_NOT_FOUND = "Employee not found"
BRANCH_NOT_FOUND = "Branch not found"
DEPARTMENT_NOT_FOUND = "Department not found"


def _not_found(message: str = EMPLOYEE_NOT_FOUND) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": message})


def _employee_fields(body: Dict[str, Any]) -> Dict[str, Any]:
    """Picks the employee fields present in a validated body."""
    return {key: body[key] for key in EMPLOYEE_FIELDS if key in body}


@router.get(
    "/employees",
    response_model=SuccessResponse[List[Employee]],
    summary="List all employees",
)
async def get_all_employees(
    validated: ValidatedRequest = Depends(validate_request(employee_schemas["list"])),
    service: EmployeeService = Depends(get_employee_service),
):
    employees = await service.get_all()
    return SuccessResponse[List[Employee]](data=employees, message="Employees retrieved successfully")


@router.post(
    "/employees",
    status_code=status.HTTP_201_CREATED,
    response_model=SuccessResponse[Employee],
    responses={400: {"description": "Invalid employee data", "model": ErrorResponse}},
    summary="Create an employee",
)
async def create_employee(
    validated: ValidatedRequest = Depends(validate_request(employee_schemas["create"])),
    service: EmployeeService = Depends(get_employee_service),
):
    employee = await service.create(_employee_fields(validated.body))
    return SuccessResponse[Employee](data=employee, message="Employee created successfully")


@router.get(
    "/employees/branch/{branchId}",
    response_model=SuccessResponse[List[Employee]],
    responses={404: {"description": "No employees in this branch", "model": ErrorResponse}},
    summary="List the employees of a branch",
)
async def get_employees_by_branch(
    validated: ValidatedRequest = Depends(validate_request(employee_schemas["getByBranch"])),
    service: EmployeeService = Depends(get_employee_service),
):
    employees = await service.get_by_branch(validated.params["branchId"])
    if not employees:
        return _not_found(BRANCH_NOT_FOUND)
    return SuccessResponse[List[Employee]](data=employees, message="Employees retrieved successfully")


@router.get(
    "/employees/department/{department}",
    response_model=SuccessResponse[List[Employee]],
    responses={404: {"description": "No employees in this department", "model": ErrorResponse}},
    summary="List the employees of a department",
)
async def get_employees_by_department(
    validated: ValidatedRequest = Depends(validate_request(employee_schemas["getByDepartment"])),
    service: EmployeeService = Depends(get_employee_service),
):
    employees = await service.get_by_department(validated.params["department"])
    if not employees:
        return _not_found(DEPARTMENT_NOT_FOUND)
    return SuccessResponse[List[Employee]](data=employees, message="Employees retrieved successfully")


@router.get(
    "/employees/{id}",
    response_model=SuccessResponse[Employee],
    responses={404: {"description": EMPLOYEE_NOT_FOUND, "model": ErrorResponse}},
    summary="Get an employee by id",
)
async def get_employee_by_id(
    validated: ValidatedRequest = Depends(validate_request(employee_schemas["getById"])),
    service: EmployeeService = Depends(get_employee_service),
):
    employee = await service.get_by_id(validated.params["id"])
    if employee is None:
        return _not_found()
    return SuccessResponse[Employee](data=employee, message="Employee retrieved successfully")


@router.put(
    "/employees/{id}",
    response_model=SuccessResponse[Employee],
    responses={
        400: {"description": "Invalid employee data", "model": ErrorResponse},
        404: {"description": EMPLOYEE_NOT_FOUND, "model": ErrorResponse},
    },
    summary="Update some or all fields of an employee",
)
async def update_employee(
    validated: ValidatedRequest = Depends(validate_request(employee_schemas["update"])),
    service: EmployeeService = Depends(get_employee_service),
):
    employee = await service.update(validated.params["id"], _employee_fields(validated.body))
    if employee is None:
        return _not_found()
    return SuccessResponse[Employee](data=employee, message="Employee updated successfully")


@router.delete(
    "/employees/{id}",
    response_model=SuccessResponse[Dict[str, Any]],
    responses={404: {"description": EMPLOYEE_NOT_FOUND, "model": ErrorResponse}},
    summary="Delete an employee",
)
async def delete_employee(
    validated: ValidatedRequest = Depends(validate_request(employee_schemas["delete"])),
    service: EmployeeService = Depends(get_employee_service),
):
    deleted = await service.delete(validated.params["id"])
    if not deleted:
        return _not_found()
    return SuccessResponse[Dict[str, Any]](data={}, message="Employee deleted successfully")
