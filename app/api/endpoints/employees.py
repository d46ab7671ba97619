"""
API endpoints for employee onboarding.

Handles the multipart employee submission (scalar fields plus up to eleven
document uploads) and employee retrieval with derived document URLs.
"""

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import ValidationError
from sqlalchemy.orm import Session
from starlette.datastructures import UploadFile

from app.core.database import get_db
from app.core.errors import server_error
from app.core.storage import storage, UploadRejectedError
from app.core.uploads import (
    DOCUMENT_FIELDS,
    EXPERIENCED_REQUIRED_FIELDS,
    EXPERIENCED_STATUS,
    file_url,
)
from app.crud import employee as employee_crud
from app.models.employee import Employee
from app.schemas.employee import EmployeeCreate, EmployeeCreateResponse, EmployeeResponse

router = APIRouter(tags=["Employees"])
logger = logging.getLogger(__name__)


def serialize_employee(employee: Employee, request: Request) -> Dict[str, Any]:
    """Employee row as JSON, with a `<field>_url` for every populated document field"""
    data = EmployeeResponse.model_validate(employee).model_dump(mode="json")
    for field in DOCUMENT_FIELDS:
        if data.get(field):
            data[f"{field}_url"] = file_url(request, data[field])
    return data


def _bad_request(message: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message)


async def _store_uploads(form, stored: Dict[str, str]) -> None:
    """
    Write every document present in the form, recording each generated
    filename in `stored` as soon as it is on disk so a later failure can
    clean it up.
    """
    for field in DOCUMENT_FIELDS:
        # One file per field; extras sent under the same name are ignored
        uploads = form.getlist(field)
        upload = uploads[0] if uploads else None
        if not isinstance(upload, UploadFile) or not upload.filename:
            continue
        try:
            stored[field] = await storage.save_upload(upload)
        except UploadRejectedError as e:
            raise _bad_request(str(e))


def _form_text(form, name: str) -> str:
    value = form.get(name)
    return value.strip() if isinstance(value, str) else ""


def _validate_required(form, stored: Dict[str, str]) -> None:
    if not _form_text(form, "emp_name") or not _form_text(form, "emp_email"):
        raise _bad_request("Name and email are required")

    if "emp_profile_pic" not in stored:
        raise _bad_request("Profile picture is required")

    # Exact match: " Experienced " is not the experienced status
    if form.get("emp_experience_status") == EXPERIENCED_STATUS:
        for field in EXPERIENCED_REQUIRED_FIELDS:
            if field not in stored:
                raise _bad_request(f"{DOCUMENT_FIELDS[field]} is required for experienced candidates")


def _rejected(exc: ValidationError) -> HTTPException:
    error = exc.errors()[0]
    field = ".".join(str(part) for part in error.get("loc", ())) or "request"
    message = f"Invalid value for {field}: {error.get('msg')}"
    logger.warning(f"Rejected employee submission: {message}", extra={"field": field})
    return _bad_request(message)


@router.post("/save-employee", status_code=201, response_model=EmployeeCreateResponse)
async def save_employee(request: Request, db: Session = Depends(get_db)):
    """
    Save an employee submitted as multipart/form-data.

    Flow:
    1. Store each uploaded document (PDF, JPEG, PNG, DOC, DOCX; 5MB max)
    2. Require emp_name, emp_email and a profile picture
    3. Experienced candidates must also upload salary slip, offer letter,
       relieving letter and experience certificate
    4. Insert the row

    Any failure after step 1 deletes the files stored for this request.

    Raises:
        HTTPException 400: Missing field/document, bad file type/size or malformed value
        HTTPException 500: Database error (including a duplicate email)
    """
    form = await request.form()
    stored: Dict[str, str] = {}

    try:
        await _store_uploads(form, stored)
        _validate_required(form, stored)

        try:
            employee_data = EmployeeCreate.from_form(form, stored)
        except ValidationError as e:
            raise _rejected(e)

        employee = employee_crud.create(db, employee_data)

    except HTTPException:
        storage.delete_files(stored.values())
        raise
    except Exception as e:
        db.rollback()
        storage.delete_files(stored.values())
        logger.error(f"Save employee error: {e}")
        raise server_error("Database error", e)
    finally:
        await form.close()

    logger.info(f"Created employee {employee.id} ({len(stored)} documents)")
    return EmployeeCreateResponse(success=True, employeeId=employee.id)


@router.get("/employees", response_model=List[Dict[str, Any]])
def list_employees(request: Request, db: Session = Depends(get_db)):
    """
    List all employees, newest first, with a download URL for each stored document.
    """
    try:
        employees = employee_crud.get_all(db)
    except Exception as e:
        logger.error(f"Fetch employees error: {e}")
        raise server_error("Database error", e)

    return [serialize_employee(emp, request) for emp in employees]


@router.get("/employees/by-email/{email}", response_model=Dict[str, Any])
def get_employee_by_email(email: str, request: Request, db: Session = Depends(get_db)):
    """Single employee looked up by email address."""
    try:
        employee = employee_crud.get_by_email(db, email)
    except Exception as e:
        logger.error(f"Fetch employee error: {e}")
        raise server_error("Database error", e)

    if not employee:
        raise HTTPException(status_code=404, detail="Employee not found")

    return serialize_employee(employee, request)


@router.get("/employees/{employee_id}", response_model=Dict[str, Any])
def get_employee(employee_id: int, request: Request, db: Session = Depends(get_db)):
    """
    Single employee with full details and document URLs.

    Raises:
        HTTPException 404: If no employee has this id
    """
    try:
        employee = employee_crud.get_by_id(db, employee_id)
    except Exception as e:
        logger.error(f"Fetch employee error: {e}")
        raise server_error("Database error", e)

    if not employee:
        raise HTTPException(status_code=404, detail="Employee not found")

    return serialize_employee(employee, request)
