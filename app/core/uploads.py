"""
Upload rules and the catalogue of employee document fields.
"""

from collections import OrderedDict
from typing import Optional

from starlette.requests import Request

UPLOADS_PATH = "/uploads"

ALLOWED_CONTENT_TYPES = {
    "application/pdf",
    "image/jpeg",
    "image/png",
    "application/msword",  # .doc
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",  # .docx
}

# Form field -> display name, in the order documents are listed
DOCUMENT_FIELDS = OrderedDict([
    ("emp_profile_pic", "Profile Picture"),
    ("emp_salary_slip", "Salary Slip"),
    ("emp_offer_letter", "Offer Letter"),
    ("emp_relieving_letter", "Relieving Letter"),
    ("emp_experience_certificate", "Experience Certificate"),
    ("emp_ssc_doc", "SSC Document"),
    ("emp_inter_doc", "Intermediate Document"),
    ("emp_grad_doc", "Graduation Document"),
    ("resume", "Resume"),
    ("id_proof", "ID Proof"),
    ("signed_document", "Signed Document"),
])

EXPERIENCED_STATUS = "Experienced"

# Required when emp_experience_status == "Experienced", checked in this order
EXPERIENCED_REQUIRED_FIELDS = (
    "emp_salary_slip",
    "emp_offer_letter",
    "emp_relieving_letter",
    "emp_experience_certificate",
)


def file_url(request: Request, filename: Optional[str]) -> Optional[str]:
    """Absolute download URL for a stored file, derived from the incoming request"""
    if not filename:
        return None
    return f"{request.url.scheme}://{request.url.netloc}{UPLOADS_PATH}/{filename}"
