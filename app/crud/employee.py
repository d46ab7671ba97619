"""
CRUD operations for Employee model.

Employees are only ever created and read; there is no update or delete.
"""

from typing import List, Optional
from sqlalchemy.orm import Session
from app.models.employee import Employee
from app.schemas.employee import EmployeeCreate


def create(db: Session, employee_data: EmployeeCreate) -> Employee:
    """
    Insert a new employee row.

    Args:
        db: Database session
        employee_data: Validated employee submission, file fields included

    Returns:
        Created Employee instance with id

    Raises:
        sqlalchemy.exc.IntegrityError: If the email is already registered
    """
    db_employee = Employee(**employee_data.model_dump())

    db.add(db_employee)
    db.commit()
    db.refresh(db_employee)

    return db_employee


def get_by_id(db: Session, employee_id: int) -> Optional[Employee]:
    return db.query(Employee).filter(Employee.id == employee_id).first()


def get_by_email(db: Session, email: str) -> Optional[Employee]:
    return db.query(Employee).filter(Employee.emp_email == email).first()


def get_all(db: Session) -> List[Employee]:
    """All employees, newest first"""
    return db.query(Employee).order_by(Employee.created_at.desc(), Employee.id.desc()).all()
