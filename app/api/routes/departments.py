from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from app.api.deps import get_settings
from app.core.config import Settings
from app.db.session import get_db
from app.schemas.department import DepartmentIn, DepartmentOut
from app.schemas.common import ErrorResponse, SuccessResponse
from app.services.department_service import DepartmentService
from typing import List

router = APIRouter()

VALIDATION_ERROR = {400: {"model": ErrorResponse}}
INTERNAL_ERROR = {500: {"model": ErrorResponse}}
NOT_FOUND = {404: {"model": ErrorResponse}}

# SQLite INTEGER range, the driver cannot bind anything wider
SQLITE_INT_MIN = -2**63
SQLITE_INT_MAX = 2**63 - 1


# LIST departments (ordered by name)
@router.get("", response_model=List[DepartmentOut], responses=INTERNAL_ERROR)
def list_departments(db: Session = Depends(get_db)):
    return DepartmentService.list_departments(db)

# CREATE department
@router.post(
    "",
    response_model=DepartmentOut,
    responses={**VALIDATION_ERROR, **INTERNAL_ERROR},
)
def create_department(payload: DepartmentIn, db: Session = Depends(get_db)):
    return DepartmentService.create_department(db, payload)

# UPDATE department
@router.put(
    "/{department_id}",
    response_model=DepartmentOut,
    responses={**VALIDATION_ERROR, **NOT_FOUND, **INTERNAL_ERROR},
)
def update_department(
    payload: DepartmentIn,
    department_id: int = Path(..., ge=SQLITE_INT_MIN, le=SQLITE_INT_MAX),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    return DepartmentService.update_department(db, department_id, payload, settings)

# HARD DELETE (permanent)
@router.delete(
    "/{department_id}",
    response_model=SuccessResponse,
    responses={**NOT_FOUND, **INTERNAL_ERROR},
)
def delete_department(
    department_id: int = Path(..., ge=SQLITE_INT_MIN, le=SQLITE_INT_MAX),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    DepartmentService.delete_department(db, department_id, settings)
    return {"success": True}
