"""
Lead model for contact form submissions.

Leads are created by the public lead capture endpoint and triaged by admins
through the status workflow New -> Contacted -> Qualified / Lost.
"""

from . import db, BaseModel
from .base import utcnow


class Lead(BaseModel):
    """
    Contact form submission.

    Attributes:
        id: Primary key
        full_name: Submitter's name
        email: Lowercased email address
        phone: Optional phone number
        company: Optional company name
        message: Optional free-text message
        source_form_name: Name of the form that produced the lead
        submission_url: Page the form was submitted from
        status: Triage status, one of STATUSES
        submission_timestamp: When the form was submitted
        ip_address: Client address of the submission, if known
    """
    __tablename__ = 'leads'
    __resource_name__ = 'Lead'

    STATUS_NEW = 'New'
    STATUS_CONTACTED = 'Contacted'
    STATUS_QUALIFIED = 'Qualified'
    STATUS_LOST = 'Lost'

    STATUSES = (STATUS_NEW, STATUS_CONTACTED, STATUS_QUALIFIED, STATUS_LOST)

    id = db.Column(db.Integer, primary_key=True)
    full_name = db.Column(db.String(200), nullable=False)
    email = db.Column(db.String(255), nullable=False, index=True)
    phone = db.Column(db.String(20), nullable=True)
    company = db.Column(db.String(200), nullable=True)
    message = db.Column(db.Text, nullable=True)
    source_form_name = db.Column(db.String(100), nullable=False, index=True)
    submission_url = db.Column(db.String(500), nullable=True)
    status = db.Column(db.String(20), default=STATUS_NEW, nullable=False, index=True)
    submission_timestamp = db.Column(db.DateTime(timezone=True), default=utcnow,
                                     nullable=False, index=True)
    ip_address = db.Column(db.String(45), nullable=True)
