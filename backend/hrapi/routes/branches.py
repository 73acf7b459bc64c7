"""
HR API Backend — Branch Route Handlers
========================================

What:  CRUD endpoints for branches under /api/v1/branches.
How:   Each handler depends on the endpoint's request validator and on a
       BranchService, calls one service method, and shapes the response.

Response mapping:
    success           → 200 (201 on create) with the success envelope
    None / False      → 404 {"error": "Branch not found"}
    raised exception  → not caught here; the global handlers answer
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from hrapi.schemas.branch import BRANCH_FIELDS, Branch
from hrapi.schemas.common import ErrorResponse, SuccessResponse
from hrapi.services.branch_service import BranchService, get_branch_service
from hrapi.validation.branch_schemas import branch_schemas
from hrapi.validation.rules import ValidatedRequest, validate_request

router = APIRouter(tags=["Branches"])

BRANCH_NOT_FOUND = "Branch not found"


def _not_found() -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": BRANCH_NOT_FOUND})


def _branch_fields(body: Dict[str, Any]) -> Dict[str, Any]:
    """Picks the branch fields present in a validated body."""
    return {key: body[key] for key in BRANCH_FIELDS if key in body}


@router.get(
    "/branches",
    response_model=SuccessResponse[List[Branch]],
    summary="List all branches",
)
async def get_all_branches(
    validated: ValidatedRequest = Depends(validate_request(branch_schemas["list"])),
    service: BranchService = Depends(get_branch_service),
):
    branches = await service.get_all()
    return SuccessResponse[List[Branch]](data=branches, message="Branches retrieved successfully")


@router.post(
    "/branches",
    status_code=status.HTTP_201_CREATED,
    response_model=SuccessResponse[Branch],
    responses={400: {"description": "Invalid branch data", "model": ErrorResponse}},
    summary="Create a branch",
)
async def create_branch(
    validated: ValidatedRequest = Depends(validate_request(branch_schemas["create"])),
    service: BranchService = Depends(get_branch_service),
):
    branch = await service.create(_branch_fields(validated.body))
    return SuccessResponse[Branch](data=branch, message="Branch created successfully")


@router.get(
    "/branches/{id}",
    response_model=SuccessResponse[Branch],
    responses={404: {"description": BRANCH_NOT_FOUND, "model": ErrorResponse}},
    summary="Get a branch by id",
)
async def get_branch_by_id(
    validated: ValidatedRequest = Depends(validate_request(branch_schemas["getById"])),
    service: BranchService = Depends(get_branch_service),
):
    branch = await service.get_by_id(validated.params["id"])
    if branch is None:
        return _not_found()
    return SuccessResponse[Branch](data=branch, message="Branch retrieved successfully")


@router.put(
    "/branches/{id}",
    response_model=SuccessResponse[Branch],
    responses={
        400: {"description": "Invalid branch data", "model": ErrorResponse},
        404: {"description": BRANCH_NOT_FOUND, "model": ErrorResponse},
    },
    summary="Update some or all fields of a branch",
)
async def update_branch(
    validated: ValidatedRequest = Depends(validate_request(branch_schemas["update"])),
    service: BranchService = Depends(get_branch_service),
):
    branch = await service.update(validated.params["id"], _branch_fields(validated.body))
    if branch is None:
        return _not_found()
    return SuccessResponse[Branch](data=branch, message="Branch updated successfully")


@router.delete(
    "/branches/{id}",
    response_model=SuccessResponse[Dict[str, Any]],
    responses={404: {"description": BRANCH_NOT_FOUND, "model": ErrorResponse}},
    summary="Delete a branch",
)
async def delete_branch(
    validated: ValidatedRequest = Depends(validate_request(branch_schemas["delete"])),
    service: BranchService = Depends(get_branch_service),
):
    deleted = await service.delete(validated.params["id"])
    if not deleted:
        return _not_found()
    return SuccessResponse[Dict[str, Any]](data={}, message="Branch deleted successfully")
