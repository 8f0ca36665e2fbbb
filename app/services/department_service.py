from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.config import Settings
from app.core.exceptions import InternalError, NotFoundError
from app.core.logging import get_logger
from app.repositories.department_repo import DepartmentRepository
from app.schemas.department import DepartmentIn, DepartmentOut
from app.db.models.department import Department
from typing import List

logger = get_logger("department_service")


class DepartmentService:
    """
    Department CRUD on top of DepartmentRepository.

    Payloads arrive already validated. Every store call is attempted once;
    any SQLAlchemy failure is logged, rolled back and turned into an
    InternalError carrying a fixed message for the caller.
    """

    @staticmethod
    def list_departments(db: Session) -> List[Department]:
        try:
            return DepartmentRepository.list_all(db)
        except SQLAlchemyError:
            db.rollback()
            logger.exception("Failed to fetch departments")
            raise InternalError("Failed to fetch departments")

    @staticmethod
    def create_department(db: Session, payload: DepartmentIn) -> Department:
        try:
            department = DepartmentRepository.create(db, payload)
        except SQLAlchemyError:
            db.rollback()
            logger.exception("Failed to create department name=%r", payload.name)
            raise InternalError("Failed to create department")

        logger.info("Created department id=%s name=%r", department.id, department.name)
        return department

    # Update Department. Echoes the request, the row may not exist.
    @staticmethod
    def update_department(
        db: Session,
        department_id: int,
        payload: DepartmentIn,
        settings: Settings,
    ) -> DepartmentOut:
        try:
            matched = DepartmentRepository.update_by_id(db, department_id, payload)
        except SQLAlchemyError:
            db.rollback()
            logger.exception("Failed to update department id=%s", department_id)
            raise InternalError("Failed to update department")

        if not matched:
            if settings.STRICT_ID_CHECKS:
                raise NotFoundError()
            logger.warning("Update matched no department id=%s", department_id)
        else:
            logger.info("Updated department id=%s", department_id)

        return DepartmentOut(id=department_id, name=payload.name, url=payload.url)

    # Hard delete Department
    @staticmethod
    def delete_department(db: Session, department_id: int, settings: Settings) -> None:
        try:
            matched = DepartmentRepository.delete_by_id(db, department_id)
        except SQLAlchemyError:
            db.rollback()
            logger.exception("Failed to delete department id=%s", department_id)
            raise InternalError("Failed to delete department")

        if not matched:
            if settings.STRICT_ID_CHECKS:
                raise NotFoundError()
            logger.warning("Delete matched no department id=%s", department_id)
        else:
            logger.info("Deleted department id=%s", department_id)
