"""
Profile-level scoring: overall health score, risk flag and rule-based
recommendations derived from the scalar profile fields.
"""
from __future__ import annotations
from typing import Any, List, Optional

from ..schemas import RiskFlag
from .utils import field, safe_float


BASE_HEALTH_SCORE = 80
HEALTHY_DIETS = ("balanced", "vegetarian", "vegan")

BMI_UNDERWEIGHT = 18.5
BMI_OBESE = 30


def calculate_bmi(weight_kg: Optional[float], height_cm: Optional[float]) -> Optional[float]:
    """BMI from weight (kg) and height (cm); None when either is missing."""
    weight_kg = safe_float(weight_kg)
    height_cm = safe_float(height_cm)
    if not weight_kg or not height_cm or height_cm <= 0:
        return None
    height_m = height_cm / 100
    return weight_kg / (height_m ** 2)


def profile_bmi(profile: Any) -> Optional[float]:
    return calculate_bmi(field(profile, "weight"), field(profile, "height"))


def calculate_health_score(profile: Any) -> int:
    """Score 0-100 starting from 80, adjusted by exercise, diet, disease and BMI."""
    if not profile:
        return 0
    score = BASE_HEALTH_SCORE
    if field(profile, "exercise_frequency") == "5-7_times_week":
        score += 10
    if field(profile, "dietary_habits") in HEALTHY_DIETS:
        score += 5
    if field(profile, "known_diseases"):
        score -= 10
    bmi = profile_bmi(profile)
    if bmi is not None and (bmi < BMI_UNDERWEIGHT or bmi > BMI_OBESE):
        score -= 5
    return max(0, min(100, score))


def get_risk_flag(profile: Any) -> RiskFlag:
    if not profile:
        return RiskFlag(level="low", message="No profile data available.")
    bmi = profile_bmi(profile)
    if field(profile, "known_diseases") or (bmi is not None and bmi > BMI_OBESE):
        return RiskFlag(
            level="high",
            message="Potential health risks detected. Please consult your doctor.",
        )
    if field(profile, "exercise_frequency") == "never" or field(profile, "dietary_habits") == "unspecified":
        return RiskFlag(
            level="medium",
            message="Consider improving your lifestyle for better health.",
        )
    return RiskFlag(level="low", message="No major risks detected. Keep up the good work!")


def get_profile_recommendations(profile: Any) -> List[str]:
    if not profile:
        return ["Complete your health profile to get personalized recommendations."]
    recs: List[str] = []
    if field(profile, "exercise_frequency") == "never":
        recs.append("Try to add at least one short walk per week.")
    if field(profile, "dietary_habits") == "unspecified":
        recs.append("Log your dietary habits for more personalized advice.")
    sleep_hours = safe_float(field(profile, "sleep_hours"))
    if sleep_hours and sleep_hours < 6:
        recs.append("Aim for at least 7 hours of sleep per night.")
    if "hypertension" in str(field(profile, "known_diseases") or "").lower():
        recs.append("Consider a low-sodium diet and regular blood pressure checks.")
    bmi = profile_bmi(profile)
    if bmi is not None:
        if bmi > BMI_OBESE:
            recs.append("Your BMI is high. Consider consulting a nutritionist or doctor.")
        if bmi < BMI_UNDERWEIGHT:
            recs.append("Your BMI is low. Ensure you are getting enough nutrition.")
    if not recs:
        recs.append("Keep up your healthy habits!")
    return recs
