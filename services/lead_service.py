"""
Lead service for contact form submissions.

Public forms create leads; admins list them with filtering, search, sorting
and pagination, and move them through the status workflow.
"""

import logging
import math
import re
from datetime import date, datetime, time, timedelta, timezone
from typing import Any, Dict, Mapping, Optional

from flask import current_app, has_app_context
from sqlalchemy import Select, or_, select

from core.errors import ContentValidationError
from core.utils.string import is_valid_email
from extensions import get_store
from models.lead import Lead

logger = logging.getLogger(__name__)

PHONE_PATTERN = re.compile(r'^[+\-()\s\d]{10,20}$')

ALLOWED_SORT_FIELDS = ('full_name', 'email', 'source_form_name', 'status', 'submission_timestamp')
SORT_ORDERS = ('asc', 'desc')

DEFAULT_PAGE_SIZE = 10
DEFAULT_PAGE_SIZE_MAX = 100


def _clean(value: Any) -> Optional[str]:
    """Strip a submitted value, mapping empty input to None."""
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def _day_start(value: date) -> datetime:
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    return datetime.combine(value, time.min, tzinfo=timezone.utc)


def _check_sort(sort_by: str, sort_order: str) -> None:
    if sort_by not in ALLOWED_SORT_FIELDS:
        raise ContentValidationError(
            f"Invalid sort_by parameter. Allowed fields: {', '.join(ALLOWED_SORT_FIELDS)}",
            details={"sort_by": sort_by}
        )
    if sort_order not in SORT_ORDERS:
        raise ContentValidationError('Invalid sort_order parameter. Use "asc" or "desc".',
                                     details={"sort_order": sort_order})


def _filtered(form_name, status, start_date, end_date, search) -> Select:
    """Build the lead query for the listing filters."""
    stmt = select(Lead)
    if form_name:
        stmt = stmt.where(Lead.source_form_name == form_name)
    if status:
        stmt = stmt.where(Lead.status == status)
    if start_date:
        stmt = stmt.where(Lead.submission_timestamp >= _day_start(start_date))
    if end_date:
        # Inclusive: everything before the start of the following day
        stmt = stmt.where(Lead.submission_timestamp < _day_start(end_date) + timedelta(days=1))
    if search:
        stmt = stmt.where(or_(
            Lead.full_name.icontains(search, autoescape=True),
            Lead.email.icontains(search, autoescape=True),
            Lead.company.icontains(search, autoescape=True),
        ))
    return stmt


def _sorted(stmt: Select, sort_by: str, sort_order: str) -> Select:
    column = getattr(Lead, sort_by)
    return stmt.order_by(column.asc() if sort_order == 'asc' else column.desc(), Lead.id.desc())


class LeadService:
    """Capture, list and triage leads."""

    def __init__(self, store=None):
        self.store = store or get_store()

    def create_lead(self, data: Mapping[str, Any], ip_address: Optional[str] = None) -> Lead:
        """
        Store a lead submitted through a public form.

        Args:
            data: Submitted fields; full_name, email and source_form_name are
                required
            ip_address: Client address the submission came from

        Returns:
            Lead: The stored lead with status New

        Raises:
            ContentValidationError: If a required field is missing or the
                email or phone is malformed
        """
        errors = {}
        full_name = _clean(data.get('full_name'))
        email = _clean(data.get('email'))
        source_form_name = _clean(data.get('source_form_name'))
        phone = _clean(data.get('phone'))

        if not full_name:
            errors['full_name'] = "Full name is required."
        if not email:
            errors['email'] = "Email is required."
        elif not is_valid_email(email):
            errors['email'] = "Invalid email format."
        if not source_form_name:
            errors['source_form_name'] = "Source form name is required."
        if phone and not PHONE_PATTERN.match(phone):
            errors['phone'] = "Invalid phone number format."

        if errors:
            raise ContentValidationError(next(iter(errors.values())), details=errors)

        with self.store.transaction():
            lead = self.store.create(
                Lead,
                full_name=full_name,
                email=email.lower(),
                phone=phone,
                company=_clean(data.get('company')),
                message=_clean(data.get('message')),
                source_form_name=source_form_name,
                submission_url=_clean(data.get('submission_url')),
                status=Lead.STATUS_NEW,
                ip_address=ip_address,
            )

        logger.info("Lead %s captured from form %s", lead.id, source_form_name)
        return lead

    def list_leads(self, page: int = 1, limit: int = DEFAULT_PAGE_SIZE,
                   sort_by: str = 'submission_timestamp', sort_order: str = 'desc',
                   form_name: Optional[str] = None, status: Optional[str] = None,
                   start_date: Optional[date] = None, end_date: Optional[date] = None,
                   search: Optional[str] = None) -> Dict[str, Any]:
        """
        List leads matching the given filters.

        The end date is inclusive: leads submitted at any time on that day
        are returned. search matches name, email and company
        case-insensitively.

        Returns:
            dict: ``leads``, ``total_count``, ``current_page``, ``total_pages``

        Raises:
            ContentValidationError: If paging or sorting parameters are invalid
        """
        max_limit = DEFAULT_PAGE_SIZE_MAX
        if has_app_context():
            max_limit = current_app.config.get('LEADS_PAGE_SIZE_MAX', DEFAULT_PAGE_SIZE_MAX)

        if page < 1:
            raise ContentValidationError("page must be 1 or greater", details={"page": page})
        if not 1 <= limit <= max_limit:
            raise ContentValidationError(f"limit must be between 1 and {max_limit}",
                                         details={"limit": limit})
        _check_sort(sort_by, sort_order)

        stmt = _filtered(form_name, status, start_date, end_date, search)
        total_count = self.store.count(stmt)

        stmt = _sorted(stmt, sort_by, sort_order)
        leads = self.store.scalars(stmt.offset((page - 1) * limit).limit(limit))

        return {
            'leads': leads,
            'total_count': total_count,
            'current_page': page,
            'total_pages': math.ceil(total_count / limit),
        }

    def update_status(self, lead_id: int, status: str) -> Lead:
        """
        Move a lead to another status.

        Raises:
            ContentValidationError: If status is not one of Lead.STATUSES
            ContentNotFoundError: If the lead does not exist
        """
        if status not in Lead.STATUSES:
            raise ContentValidationError(
                f"Invalid status. Allowed values: {', '.join(Lead.STATUSES)}",
                details={"status": status}
            )

        with self.store.transaction():
            lead = self.store.get_or_raise(Lead, lead_id, Lead.__resource_name__)
            if lead.status != status:
                self.store.update(Lead, lead_id, status=status)

        logger.info("Lead %s status set to %s", lead_id, status)
        return lead
