"""
Employee database model.

One row per onboarded employee: personal, bank, employment and education
details plus the generated filenames of the documents they uploaded.
"""

from sqlalchemy import Column, Integer, String, Text, Date, Boolean, DateTime, func
from app.core.database import Base


class Employee(Base):
    __tablename__ = "employees"

    id = Column(Integer, primary_key=True, index=True)
    emp_name = Column(String(255), nullable=False)
    emp_email = Column(String(255), unique=True, nullable=False, index=True)
    emp_dob = Column(Date, nullable=True)
    emp_mobile = Column(String(20), nullable=True)
    emp_address = Column(Text, nullable=True)
    emp_city = Column(String(100), nullable=True)
    emp_state = Column(String(100), nullable=True)
    emp_zipcode = Column(String(20), nullable=True)

    # Bank details
    emp_bank = Column(String(255), nullable=True)
    emp_account = Column(String(50), nullable=True)
    emp_ifsc = Column(String(20), nullable=True)
    emp_bank_branch = Column(String(100), nullable=True)

    # Employment
    emp_job_role = Column(String(255), nullable=True)
    emp_department = Column(String(255), nullable=True)
    emp_experience_status = Column(String(20), nullable=True)  # "Experienced" / "Fresher"
    emp_company_name = Column(String(255), nullable=True)
    emp_years_of_experience = Column(Integer, nullable=True)
    emp_joining_date = Column(Date, nullable=True)

    # Uploaded documents (generated filenames in the upload directory)
    emp_profile_pic = Column(String(255), nullable=True)
    emp_salary_slip = Column(String(255), nullable=True)
    emp_offer_letter = Column(String(255), nullable=True)
    emp_relieving_letter = Column(String(255), nullable=True)
    emp_experience_certificate = Column(String(255), nullable=True)

    # Education: SSC
    emp_ssc_doc = Column(String(255), nullable=True)
    ssc_school = Column(String(255), nullable=True)
    ssc_year = Column(Integer, nullable=True)
    ssc_grade = Column(String(20), nullable=True)

    # Education: Intermediate
    emp_inter_doc = Column(String(255), nullable=True)
    inter_college = Column(String(255), nullable=True)
    inter_year = Column(Integer, nullable=True)
    inter_grade = Column(String(20), nullable=True)
    inter_branch = Column(String(100), nullable=True)

    # Education: Graduation
    emp_grad_doc = Column(String(255), nullable=True)
    grad_college = Column(String(255), nullable=True)
    grad_year = Column(Integer, nullable=True)
    grad_grade = Column(String(20), nullable=True)
    grad_degree = Column(String(100), nullable=True)
    grad_branch = Column(String(100), nullable=True)

    resume = Column(String(255), nullable=True)
    id_proof = Column(String(255), nullable=True)
    signed_document = Column(String(255), nullable=True)

    emp_terms_accepted = Column(Boolean, default=False, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)

    def __repr__(self):
        return f"<Employee(id={self.id}, email='{self.emp_email}')>"
