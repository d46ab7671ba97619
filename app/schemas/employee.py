"""
Pydantic schemas for Employee API requests/responses.
"""

from datetime import date, datetime
from typing import Any, Dict, Mapping, Optional
from pydantic import BaseModel, Field, field_validator
from pydantic.networks import validate_email

from app.core.uploads import DOCUMENT_FIELDS


class EmployeeCreate(BaseModel):
    """
    Validated employee submission.

    Built from the raw multipart form with `from_form`, which normalises blank
    strings to None before pydantic coerces ints and dates.
    """
    emp_name: str = Field(..., min_length=1, max_length=255)
    emp_email: str = Field(..., min_length=3, max_length=255)
    emp_dob: Optional[date] = None
    emp_mobile: Optional[str] = None
    emp_address: Optional[str] = None
    emp_city: Optional[str] = None
    emp_state: Optional[str] = None
    emp_zipcode: Optional[str] = None

    emp_bank: Optional[str] = None
    emp_account: Optional[str] = None
    emp_ifsc: Optional[str] = None
    emp_bank_branch: Optional[str] = None

    emp_job_role: Optional[str] = None
    emp_department: Optional[str] = None
    emp_experience_status: Optional[str] = None
    emp_company_name: Optional[str] = None
    emp_years_of_experience: Optional[int] = Field(None, ge=0)
    emp_joining_date: Optional[date] = None

    ssc_school: Optional[str] = None
    ssc_year: Optional[int] = None
    ssc_grade: Optional[str] = None
    inter_college: Optional[str] = None
    inter_year: Optional[int] = None
    inter_grade: Optional[str] = None
    inter_branch: Optional[str] = None
    grad_college: Optional[str] = None
    grad_year: Optional[int] = None
    grad_grade: Optional[str] = None
    grad_degree: Optional[str] = None
    grad_branch: Optional[str] = None

    emp_terms_accepted: bool = False

    # Generated filenames of stored uploads
    emp_profile_pic: Optional[str] = None
    emp_salary_slip: Optional[str] = None
    emp_offer_letter: Optional[str] = None
    emp_relieving_letter: Optional[str] = None
    emp_experience_certificate: Optional[str] = None
    emp_ssc_doc: Optional[str] = None
    emp_inter_doc: Optional[str] = None
    emp_grad_doc: Optional[str] = None
    resume: Optional[str] = None
    id_proof: Optional[str] = None
    signed_document: Optional[str] = None

    @field_validator("emp_email")
    @classmethod
    def check_email(cls, v: str) -> str:
        """Reject malformed addresses but keep the address exactly as entered"""
        validate_email(v)
        return v

    @classmethod
    def from_form(cls, form: Mapping[str, Any], stored_files: Dict[str, str]) -> "EmployeeCreate":
        data: Dict[str, Any] = {}
        for name in cls.model_fields:
            if name in DOCUMENT_FIELDS or name == "emp_terms_accepted":
                continue
            value = form.get(name)
            if isinstance(value, str) and name != "emp_experience_status":
                value = value.strip()
            elif isinstance(value, str) and not value.strip():
                value = None
            data[name] = value or None

        # Checkbox semantics: only the literal string "true" counts
        data["emp_terms_accepted"] = form.get("emp_terms_accepted") == "true"
        data.update(stored_files)
        return cls(**data)


class EmployeeResponse(BaseModel):
    """Stored employee row. `<field>_url` keys are added when serializing."""
    id: int
    emp_name: str
    emp_email: str
    emp_dob: Optional[date] = None
    emp_mobile: Optional[str] = None
    emp_address: Optional[str] = None
    emp_city: Optional[str] = None
    emp_state: Optional[str] = None
    emp_zipcode: Optional[str] = None
    emp_bank: Optional[str] = None
    emp_account: Optional[str] = None
    emp_ifsc: Optional[str] = None
    emp_bank_branch: Optional[str] = None
    emp_job_role: Optional[str] = None
    emp_department: Optional[str] = None
    emp_experience_status: Optional[str] = None
    emp_company_name: Optional[str] = None
    emp_years_of_experience: Optional[int] = None
    emp_joining_date: Optional[date] = None
    emp_profile_pic: Optional[str] = None
    emp_salary_slip: Optional[str] = None
    emp_offer_letter: Optional[str] = None
    emp_relieving_letter: Optional[str] = None
    emp_experience_certificate: Optional[str] = None
    emp_ssc_doc: Optional[str] = None
    ssc_school: Optional[str] = None
    ssc_year: Optional[int] = None
    ssc_grade: Optional[str] = None
    emp_inter_doc: Optional[str] = None
    inter_college: Optional[str] = None
    inter_year: Optional[int] = None
    inter_grade: Optional[str] = None
    inter_branch: Optional[str] = None
    emp_grad_doc: Optional[str] = None
    grad_college: Optional[str] = None
    grad_year: Optional[int] = None
    grad_grade: Optional[str] = None
    grad_degree: Optional[str] = None
    grad_branch: Optional[str] = None
    resume: Optional[str] = None
    id_proof: Optional[str] = None
    signed_document: Optional[str] = None
    emp_terms_accepted: bool = False
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class EmployeeCreateResponse(BaseModel):
    success: bool = True
    employeeId: int


class DocumentsRequest(BaseModel):
    """Body of POST /get-documents"""
    empEmail: Optional[str] = None


class DocumentInfo(BaseModel):
    url: str
    name: str
    filename: str


class DocumentsResponse(BaseModel):
    documents: Dict[str, DocumentInfo]
