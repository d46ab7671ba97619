"""
Document listing and download endpoints.
"""

import logging
from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import FileResponse
from pydantic import ValidationError
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.errors import server_error
from app.core.storage import storage
from app.core.uploads import DOCUMENT_FIELDS, file_url
from app.crud import employee as employee_crud
from app.schemas.employee import DocumentInfo, DocumentsRequest, DocumentsResponse

router = APIRouter(tags=["Documents"])
logger = logging.getLogger(__name__)


async def read_documents_request(request: Request) -> DocumentsRequest:
    """
    Body of POST /get-documents.

    A missing, non-JSON or non-object body is read as one without empEmail,
    so the endpoint answers with its own 400 instead of a parser error.
    """
    try:
        payload = await request.json()
    except ValueError:
        return DocumentsRequest()

    if not isinstance(payload, dict):
        return DocumentsRequest()

    try:
        return DocumentsRequest.model_validate(payload)
    except ValidationError:
        return DocumentsRequest()


@router.post("/get-documents", response_model=DocumentsResponse)
def get_documents(
    request: Request,
    body: DocumentsRequest = Depends(read_documents_request),
    db: Session = Depends(get_db),
):
    """
    List the documents of one employee, identified by email.

    Only document fields whose file is still present in the upload
    directory are returned.

    Raises:
        HTTPException 400: If empEmail is missing
        HTTPException 404: If no employee has this email
    """
    email = (body.empEmail or "").strip()
    if not email:
        raise HTTPException(status_code=400, detail="Employee email is required")

    try:
        employee = employee_crud.get_by_email(db, email)
    except Exception as e:
        logger.error(f"Get documents error: {e}")
        raise server_error("Server error while fetching documents", e)

    if not employee:
        raise HTTPException(status_code=404, detail="Employee not found")

    documents = {}
    for field, display_name in DOCUMENT_FIELDS.items():
        filename = getattr(employee, field)
        if filename and storage.file_exists(filename):
            documents[field] = DocumentInfo(
                url=file_url(request, filename),
                name=display_name,
                filename=filename,
            )

    return DocumentsResponse(documents=documents)


@router.get("/download/{filename}")
def download_document(filename: str):
    """
    Download a stored document as an attachment.

    Raises:
        HTTPException 404: If the file does not exist in the upload directory
    """
    if not storage.file_exists(filename):
        raise HTTPException(status_code=404, detail="File not found")

    return FileResponse(
        path=storage.path_for(filename),
        filename=filename,
        media_type=storage.content_type(filename),
    )
