"""
Risk and adherence analytics: overdue screenings, medication adherence,
chronic-condition flags.
"""
from __future__ import annotations
from typing import Any, Dict, List, Mapping, Optional, Sequence
from datetime import datetime

from ..schemas import MedicationAdherence
from .utils import as_list, field, is_overdue, round_int, safe_float, to_utc, utcnow


# Lowercase condition key -> display label, in report order
CHRONIC_CONDITION_LABELS: Dict[str, str] = {
    "diabetes": "Diabetes",
    "hypertension": "Hypertension",
}


def get_upcoming_screenings(screenings: Any, now: Optional[datetime] = None) -> list:
    """Screenings that are not completed and already due.

    Despite the name these are overdue items: the due date has passed.
    Input order is kept.
    """
    now = to_utc(now) if now else utcnow()
    return [s for s in (as_list(screenings) or []) if is_overdue(s, now)]


class AdherenceModel:
    """Turns medication records into an adherence summary."""

    def evaluate(self, medications: Sequence[Any]) -> MedicationAdherence:
        raise NotImplementedError


class WeeklyDoseAdherence(AdherenceModel):
    """Assumes one expected dose per medication per day over a 7-day window."""

    def __init__(self, days: int = 7, doses_per_day: int = 1):
        self.days = days
        self.doses_per_day = doses_per_day

    def evaluate(self, medications: Sequence[Any]) -> MedicationAdherence:
        if not medications:
            return MedicationAdherence(adherence=100, missed=0)
        missed = sum(int(safe_float(field(m, "missed_doses")) or 0) for m in medications)
        expected = len(medications) * self.days * self.doses_per_day
        adherence = max(0.0, 100 - (missed / expected) * 100)
        return MedicationAdherence(adherence=round_int(adherence), missed=missed)


default_adherence_model = WeeklyDoseAdherence()


def get_medication_adherence(
    medications: Any, model: Optional[AdherenceModel] = None
) -> MedicationAdherence:
    model = model or default_adherence_model
    return model.evaluate(as_list(medications) or [])


def get_chronic_condition_risk(
    profile: Any, labels: Optional[Mapping[str, str]] = None
) -> List[str]:
    """Display labels of the known chronic conditions listed on the profile."""
    conditions = field(profile, "chronic_conditions") or []
    labels = CHRONIC_CONDITION_LABELS if labels is None else labels
    if isinstance(conditions, str):
        # free-text list such as "diabetes, asthma"
        text = conditions.lower()
        return [label for key, label in labels.items() if key in text]
    present = {str(c).strip().lower() for c in conditions}
    return [label for key, label in labels.items() if key in present]
