from healthnav.analytics import get_upcoming_preventive_reminders, get_vaccination_status
from healthnav.schemas import ImmunizationRecord


RECOMMENDED = ["Influenza", "COVID-19", "Tetanus", "Hepatitis B"]


def test_vaccination_status_lists_received_and_missing():
    records = [
        {"vaccineName": "Influenza", "dateAdministered": "2023-10-01"},
        {"vaccineName": "Tetanus", "dateAdministered": "2015-04-12"},
    ]
    status = get_vaccination_status(records, RECOMMENDED)
    assert status.received == ["Influenza", "Tetanus"]
    assert status.missing == ["COVID-19", "Hepatitis B"]


def test_vaccination_status_keeps_repeat_doses():
    records = [
        ImmunizationRecord(vaccine_name="Influenza", date_administered="2022-10-01"),
        ImmunizationRecord(vaccine_name="Influenza", date_administered="2023-10-01"),
    ]
    status = get_vaccination_status(records, RECOMMENDED)
    assert status.received == ["Influenza", "Influenza"]
    assert "Influenza" not in status.missing


def test_vaccination_status_without_records():
    status = get_vaccination_status(None, RECOMMENDED)
    assert status.received == []
    assert status.missing == RECOMMENDED


def test_vaccination_status_without_recommendations():
    status = get_vaccination_status([{"vaccineName": "Influenza"}], None)
    assert status.missing == []


def test_preventive_reminders_overdue_only(now):
    reminders = [
        {"name": "Dental cleaning", "dueDate": "2024-06-01", "completed": False},
        {"name": "Skin check", "dueDate": "2024-12-01", "completed": False},
        {"name": "Blood panel", "dueDate": "2024-03-01", "completed": True},
    ]
    result = get_upcoming_preventive_reminders(reminders, now=now)
    assert [r["name"] for r in result] == ["Dental cleaning"]


def test_preventive_reminders_empty(now):
    assert get_upcoming_preventive_reminders([], now=now) == []
    assert get_upcoming_preventive_reminders(None, now=now) == []
