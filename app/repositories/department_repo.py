from sqlalchemy.orm import Session
from sqlalchemy import select, update, delete

from app.db.models.department import Department
from app.schemas.department import DepartmentIn
from typing import List


class DepartmentRepository:

    # List all departments, name ascending (SQLite BINARY collation)
    @staticmethod
    def list_all(db: Session) -> List[Department]:
        stmt = select(Department).order_by(Department.name.asc())
        return db.execute(stmt).scalars().all()

    # Create Department
    @staticmethod
    def create(db: Session, payload: DepartmentIn) -> Department:
        department = Department(
            name=payload.name,
            url=payload.url,
        )
        db.add(department)
        db.commit()
        db.refresh(department)
        return department

    # Update by id, returns matched row count
    @staticmethod
    def update_by_id(db: Session, department_id: int, payload: DepartmentIn) -> int:
        stmt = (
            update(Department)
            .where(Department.id == department_id)
            .values(name=payload.name, url=payload.url)
        )
        result = db.execute(stmt)
        db.commit()
        return result.rowcount

    # Hard delete by id, returns matched row count
    @staticmethod
    def delete_by_id(db: Session, department_id: int) -> int:
        stmt = delete(Department).where(Department.id == department_id)
        result = db.execute(stmt)
        db.commit()
        return result.rowcount
