"""
Preventive health analytics: vaccinations and preventive reminders.
"""
from __future__ import annotations
from typing import Any, Optional, Sequence
from datetime import datetime

from ..schemas import VaccinationStatus
from .utils import as_list, field, is_overdue, to_utc, utcnow


def get_vaccination_status(
    immunization_records: Any, recommended_vaccines: Optional[Sequence[str]]
) -> VaccinationStatus:
    # received mirrors the records, so repeat doses are listed twice
    names = (field(r, "vaccine_name") for r in (as_list(immunization_records) or []))
    received = [str(n) for n in names if n is not None]
    missing = [v for v in (recommended_vaccines or []) if v not in received]
    return VaccinationStatus(received=received, missing=missing)


def get_upcoming_preventive_reminders(reminders: Any, now: Optional[datetime] = None) -> list:
    """Reminders not completed whose due date has passed."""
    now = to_utc(now) if now else utcnow()
    return [r for r in (as_list(reminders) or []) if is_overdue(r, now)]
