from datetime import datetime, timezone

import pytest


@pytest.fixture
def now():
    return datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def profile_doc():
    """Profile document as stored, with camelCase keys."""
    return {
        "uid": "user-123",
        "weight": 82,
        "height": 180,
        "dietaryHabits": "balanced",
        "exerciseFrequency": "5-7_times_week",
        "biometrics": {
            "weight": [
                {"value": 85.0, "date": "2024-06-01"},
                {"value": 84.2, "date": "2024-06-08"},
                {"value": 82.0, "date": "2024-06-14"},
            ],
            "heartRate": [{"value": 70, "date": "2024-06-01"}],
            "sleepHours": [
                {"value": 6.0, "date": "2024-06-01"},
                {"value": 7.5, "date": "2024-06-14"},
            ],
            "steps": [
                {"value": 4000, "date": "2024-06-10"},
                {"value": 9000, "date": "2024-06-11"},
                {"value": 10500, "date": "2024-06-12"},
            ],
        },
        "goals": {"weight": 82, "steps": 8000},
        "screenings": [
            {"name": "Colonoscopy", "dueDate": "2024-05-01", "completed": False},
            {"name": "Mammogram", "dueDate": "2024-09-01", "completed": False},
            {"name": "Eye exam", "dueDate": "2024-01-01", "completed": True},
        ],
        "medications": [
            {"name": "Metformin", "schedule": "daily", "lastTaken": "2024-06-14", "missedDoses": 1},
            {"name": "Lisinopril", "missedDoses": 0},
        ],
        "chronicConditions": ["diabetes"],
        "hydration": [
            {"date": "2024-06-13", "amount": 1800},
            {"date": "2024-06-14", "amount": 2200},
        ],
        "stressLevel": [
            {"date": "2024-06-12", "level": "moderate"},
            {"date": "2024-06-13", "level": "moderate"},
            {"date": "2024-06-14", "level": "low"},
        ],
        "socialSupport": [{"date": "2024-06-14", "feeling": "supported"}],
        "environmentalRisks": [
            {"date": "2024-06-13", "type": "air quality", "level": "high"},
        ],
        "immunizationRecords": [
            {"vaccineName": "Influenza", "dateAdministered": "2023-10-01"},
        ],
        "preventiveReminders": [
            {"name": "Dental cleaning", "dueDate": "2024-06-01", "completed": False},
        ],
        "aiActionPlans": [
            {"date": "2024-06-10", "plan": "Walk 20 minutes"},
        ],
        "moodLog": [
            {"date": "2024-06-13", "mood": "happy"},
            {"date": "2024-06-14", "mood": "happy"},
        ],
        "burnoutRisk": [{"date": "2024-06-14", "risk": "low"}],
        "appUsage": [
            {"date": "2024-06-13", "action": "login"},
            {"date": "2024-06-14", "action": "chat"},
        ],
        "recommendationResponses": [
            {"date": "2024-06-10", "recommendation": "Drink water", "followed": True},
            {"date": "2024-06-11", "recommendation": "Sleep early", "followed": False},
        ],
    }
