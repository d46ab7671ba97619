"""Create employees and job_postings tables

Revision ID: 3f2a9c1d7e40
Revises:
Create Date: 2024-06-10 11:20:00.000000

"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision = '3f2a9c1d7e40'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'employees',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('emp_name', sa.String(length=255), nullable=False),
        sa.Column('emp_email', sa.String(length=255), nullable=False),
        sa.Column('emp_dob', sa.Date(), nullable=True),
        sa.Column('emp_mobile', sa.String(length=20), nullable=True),
        sa.Column('emp_address', sa.Text(), nullable=True),
        sa.Column('emp_city', sa.String(length=100), nullable=True),
        sa.Column('emp_state', sa.String(length=100), nullable=True),
        sa.Column('emp_zipcode', sa.String(length=20), nullable=True),
        sa.Column('emp_bank', sa.String(length=255), nullable=True),
        sa.Column('emp_account', sa.String(length=50), nullable=True),
        sa.Column('emp_ifsc', sa.String(length=20), nullable=True),
        sa.Column('emp_bank_branch', sa.String(length=100), nullable=True),
        sa.Column('emp_job_role', sa.String(length=255), nullable=True),
        sa.Column('emp_department', sa.String(length=255), nullable=True),
        sa.Column('emp_experience_status', sa.String(length=20), nullable=True),
        sa.Column('emp_company_name', sa.String(length=255), nullable=True),
        sa.Column('emp_years_of_experience', sa.Integer(), nullable=True),
        sa.Column('emp_joining_date', sa.Date(), nullable=True),
        sa.Column('emp_profile_pic', sa.String(length=255), nullable=True),
        sa.Column('emp_salary_slip', sa.String(length=255), nullable=True),
        sa.Column('emp_offer_letter', sa.String(length=255), nullable=True),
        sa.Column('emp_relieving_letter', sa.String(length=255), nullable=True),
        sa.Column('emp_experience_certificate', sa.String(length=255), nullable=True),
        sa.Column('emp_ssc_doc', sa.String(length=255), nullable=True),
        sa.Column('ssc_school', sa.String(length=255), nullable=True),
        sa.Column('ssc_year', sa.Integer(), nullable=True),
        sa.Column('ssc_grade', sa.String(length=20), nullable=True),
        sa.Column('emp_inter_doc', sa.String(length=255), nullable=True),
        sa.Column('inter_college', sa.String(length=255), nullable=True),
        sa.Column('inter_year', sa.Integer(), nullable=True),
        sa.Column('inter_grade', sa.String(length=20), nullable=True),
        sa.Column('inter_branch', sa.String(length=100), nullable=True),
        sa.Column('emp_grad_doc', sa.String(length=255), nullable=True),
        sa.Column('grad_college', sa.String(length=255), nullable=True),
        sa.Column('grad_year', sa.Integer(), nullable=True),
        sa.Column('grad_grade', sa.String(length=20), nullable=True),
        sa.Column('grad_degree', sa.String(length=100), nullable=True),
        sa.Column('grad_branch', sa.String(length=100), nullable=True),
        sa.Column('resume', sa.String(length=255), nullable=True),
        sa.Column('id_proof', sa.String(length=255), nullable=True),
        sa.Column('signed_document', sa.String(length=255), nullable=True),
        sa.Column('emp_terms_accepted', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_employees_id'), 'employees', ['id'], unique=False)
    op.create_index(op.f('ix_employees_emp_email'), 'employees', ['emp_email'], unique=True)
    op.create_index(op.f('ix_employees_created_at'), 'employees', ['created_at'], unique=False)

    op.create_table(
        'job_postings',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('skill_set', postgresql.JSONB(astext_type=sa.Text()), nullable=False, server_default='[]'),
        sa.Column('experience', sa.Numeric(precision=4, scale=1), nullable=True),
        sa.Column('job_type', sa.String(length=50), nullable=True),
        sa.Column('location', sa.String(length=255), nullable=True),
        sa.Column('salary', sa.String(length=100), nullable=True),
        sa.Column('deadline', sa.Date(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_job_postings_id'), 'job_postings', ['id'], unique=False)
    op.create_index(op.f('ix_job_postings_title'), 'job_postings', ['title'], unique=False)
    op.create_index(op.f('ix_job_postings_created_at'), 'job_postings', ['created_at'], unique=False)


def downgrade():
    op.drop_index(op.f('ix_job_postings_created_at'), table_name='job_postings')
    op.drop_index(op.f('ix_job_postings_title'), table_name='job_postings')
    op.drop_index(op.f('ix_job_postings_id'), table_name='job_postings')
    op.drop_table('job_postings')

    op.drop_index(op.f('ix_employees_created_at'), table_name='employees')
    op.drop_index(op.f('ix_employees_emp_email'), table_name='employees')
    op.drop_index(op.f('ix_employees_id'), table_name='employees')
    op.drop_table('employees')
