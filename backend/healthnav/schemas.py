"""
Pydantic schemas for health records, profile snapshots and analytics results.

Input records accept the camelCase keys used by the profile documents
(``dueDate``, ``missedDoses``) as well as snake_case field names.
"""
from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel
from typing import List, Literal, Optional, Union
from datetime import date, datetime


DateLike = Union[datetime, date, str]

StressValue = Literal["low", "moderate", "high", "very_high"]
FeelingValue = Literal["supported", "neutral", "isolated"]
RiskValue = Literal["low", "moderate", "high"]
MoodValue = Literal["happy", "neutral", "sad", "anxious", "angry", "stressed"]

TrendLabel = Literal["increasing", "decreasing", "stable", "no data"]
HydrationLabel = Literal["low", "adequate", "high"]
StressLabel = Literal["unknown", "low", "moderate", "high"]
LonelinessLabel = Literal["unknown", "isolated", "supported", "neutral"]
BurnoutLabel = Literal["unknown", "low", "moderate", "high"]
MoodLabel = Literal["unknown", "happy", "neutral", "sad", "anxious", "angry", "stressed"]
EngagementLabel = Literal["unknown", "low", "moderate", "high"]
RiskFlagLevel = Literal["low", "medium", "high"]


class RecordModel(BaseModel):
    """Base for records read from profile documents."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


# ============ Record Schemas ============

class TimePoint(RecordModel):
    """One measurement (weight, heart rate, sleep hours, steps)."""
    value: float
    date: Optional[DateLike] = None


class Screening(RecordModel):
    """Screening or preventive reminder with a due date."""
    name: str
    due_date: DateLike
    completed: bool = False


class Medication(RecordModel):
    name: str
    missed_doses: int = Field(0, ge=0)
    schedule: Optional[str] = None
    last_taken: Optional[DateLike] = None


class HydrationEntry(RecordModel):
    date: DateLike
    amount: float = Field(..., ge=0)  # ml


class StressEntry(RecordModel):
    date: DateLike
    level: StressValue


class SocialSupportEntry(RecordModel):
    date: DateLike
    feeling: FeelingValue


class EnvironmentalRiskEntry(RecordModel):
    date: DateLike
    type: str
    level: RiskValue


class ImmunizationRecord(RecordModel):
    vaccine_name: str
    date_administered: Optional[DateLike] = None


class ActionPlan(RecordModel):
    date: DateLike
    plan: str


class MoodEntry(RecordModel):
    date: DateLike
    mood: MoodValue


class BurnoutEntry(RecordModel):
    date: DateLike
    risk: RiskValue


class AppUsageEntry(RecordModel):
    date: DateLike
    action: str


class RecommendationResponse(RecordModel):
    date: Optional[DateLike] = None
    recommendation: Optional[str] = None
    followed: bool


# ============ Profile Schemas ============

class Biometrics(RecordModel):
    """Chronological measurement series, oldest first."""
    weight: List[TimePoint] = []
    heart_rate: List[TimePoint] = []
    sleep_hours: List[TimePoint] = []
    steps: List[TimePoint] = []


class Goals(RecordModel):
    weight: Optional[float] = None
    steps: Optional[float] = None
    sleep_hours: Optional[float] = None


class HealthProfile(RecordModel):
    """Snapshot of a user profile as consumed by the analytics engine."""
    uid: Optional[str] = None

    # Scalar profile fields
    weight: Optional[float] = Field(None, gt=0)  # kg
    height: Optional[float] = Field(None, gt=0)  # cm
    known_diseases: Optional[str] = None
    dietary_habits: Optional[str] = None
    exercise_frequency: Optional[str] = None
    sleep_hours: Optional[float] = None  # average hours per night

    biometrics: Biometrics = Field(default_factory=Biometrics)
    goals: Goals = Field(default_factory=Goals)

    # Risk/alert analytics
    screenings: List[Screening] = []
    medications: List[Medication] = []
    chronic_conditions: List[str] = []

    # Lifestyle/behavior
    diet_quality_score: Optional[float] = Field(None, ge=0, le=100)
    hydration: List[HydrationEntry] = []
    stress_level: List[StressEntry] = []

    # Social/environmental
    social_support: List[SocialSupportEntry] = []
    environmental_risks: List[EnvironmentalRiskEntry] = []

    # Preventive health
    immunization_records: List[ImmunizationRecord] = []
    preventive_reminders: List[Screening] = []

    # AI-generated recommendations
    ai_action_plans: List[ActionPlan] = []

    # Mental health
    mood_log: List[MoodEntry] = []
    burnout_risk: List[BurnoutEntry] = []

    # Engagement
    app_usage: List[AppUsageEntry] = []
    recommendation_responses: List[RecommendationResponse] = []


# ============ Analytics Result Schemas ============

class TrendResult(BaseModel):
    trend: TrendLabel
    change: float
    percent: float


class GoalProgress(BaseModel):
    percent: int
    met: bool


class StepsProgress(BaseModel):
    """Step streak plus progress of the latest day against the step goal."""
    streak: int = 0
    percent: Optional[int] = None
    met: Optional[bool] = None


class MedicationAdherence(BaseModel):
    adherence: int
    missed: int


class HydrationStatus(BaseModel):
    avg: int
    status: HydrationLabel


class VaccinationStatus(BaseModel):
    received: List[str]
    missing: List[str]


class RiskFlag(BaseModel):
    level: RiskFlagLevel
    message: str


# ============ Report Schemas ============

class Trends(BaseModel):
    weight: TrendResult
    heart_rate: TrendResult
    sleep: TrendResult
    steps: TrendResult


class GoalProgressSummary(BaseModel):
    weight: Optional[GoalProgress] = None
    steps: StepsProgress = Field(default_factory=StepsProgress)


class RiskAlerts(BaseModel):
    upcoming_screenings: List[Screening] = []
    medication_adherence: MedicationAdherence
    chronic_condition_risks: List[str] = []


class Lifestyle(BaseModel):
    diet_quality_score: float
    hydration: HydrationStatus
    stress_level: StressLabel


class Social(BaseModel):
    loneliness: LonelinessLabel
    environmental_risk: str


class Preventive(BaseModel):
    vaccination: VaccinationStatus
    reminders: List[Screening] = []


class MentalHealth(BaseModel):
    mood_pattern: MoodLabel
    burnout_risk: BurnoutLabel


class Engagement(BaseModel):
    app_engagement: EngagementLabel
    recommendation_follow_rate: int


class AnalyticsReport(BaseModel):
    """Complete analytics derived from one profile snapshot."""
    generated_at: datetime
    health_score: int
    risk_flag: RiskFlag
    ai_recommendations: List[str]
    trends: Trends
    goal_progress: GoalProgressSummary
    risk_alerts: RiskAlerts
    lifestyle: Lifestyle
    social: Social
    preventive: Preventive
    action_plans: List[str]
    motivational_feedback: str
    mental_health: MentalHealth
    engagement: Engagement


# ============ Request Schemas ============

class TrendRequest(BaseModel):
    """Series for trend math; plain numbers or {value, date} points."""
    values: List[Union[float, TimePoint]] = []


class GoalProgressRequest(BaseModel):
    current: float
    goal: Optional[float] = None
    values: List[Union[float, TimePoint]] = []


class GoalProgressResponse(BaseModel):
    progress: GoalProgress
    streak: int


class AnalyticsContext(BaseModel):
    context: str
