"""Pydantic models for submitted health data and analysis results."""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional, List, Dict, Tuple

SMOKING_STATUSES = {"never", "former", "current"}
ALCOHOL_LEVELS = {"none", "light", "moderate", "heavy"}

# Accepted ranges for submitted values (same bounds as the data entry form)
FIELD_RANGES: Dict[str, Tuple[float, float]] = {
    "age": (18, 120),
    "height": (100, 250),
    "weight": (30, 300),
    "blood_pressure_systolic": (70, 220),
    "blood_pressure_diastolic": (40, 140),
    "cholesterol_total": (100, 350),
    "cholesterol_hdl": (20, 100),
    "cholesterol_ldl": (30, 250),
    "fasting_glucose": (50, 300),
    "exercise_minutes_per_week": (0, 1200),
    "sleep_hours_per_night": (3, 12),
    "stress_level": (1, 10),
    "diet_quality": (1, 10),
}


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python; both accepted on input."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, allow_inf_nan=False
    )


class HealthProfile(CamelModel):
    # Every field is optional: None means "not provided", never "zero".

    # Basic information
    age: Optional[float] = None
    gender: Optional[str] = None
    height: Optional[float] = Field(None, description="Height in cm")
    weight: Optional[float] = Field(None, description="Weight in kg")

    # Vitals
    blood_pressure_systolic: Optional[float] = None
    blood_pressure_diastolic: Optional[float] = None
    cholesterol_total: Optional[float] = None
    cholesterol_hdl: Optional[float] = Field(None, alias="cholesterolHDL")
    cholesterol_ldl: Optional[float] = Field(None, alias="cholesterolLDL")
    fasting_glucose: Optional[float] = None

    # Lifestyle
    exercise_minutes_per_week: Optional[float] = None
    sleep_hours_per_night: Optional[float] = None
    stress_level: Optional[float] = Field(None, description="1-10 scale")
    diet_quality: Optional[float] = Field(None, description="1-10 scale")
    smoking_status: Optional[str] = Field(None, description="never, former, current")
    alcohol_consumption: Optional[str] = Field(
        None, description="none, light, moderate, heavy"
    )

    # Medical history
    family_history: Optional[List[str]] = None
    existing_conditions: Optional[List[str]] = None
    medications: Optional[str] = None
    additional_notes: Optional[str] = None

    def to_document(self) -> dict:
        """camelCase dict of the provided fields, as stored and returned."""
        return self.model_dump(by_alias=True, exclude_none=True)


class HealthProfileIn(HealthProfile):
    """Health profile as submitted over HTTP, with form-level validation."""

    @field_validator(*FIELD_RANGES.keys())
    @classmethod
    def validate_range(cls, v, info):
        if v is None:
            return v
        low, high = FIELD_RANGES[info.field_name]
        if v < low or v > high:
            raise ValueError(f"must be between {low:g} and {high:g}")
        return v

    @field_validator("smoking_status", "alcohol_consumption", mode="before")
    @classmethod
    def validate_choice(cls, v, info):
        if v is None:
            return None
        allowed = (
            SMOKING_STATUSES
            if info.field_name == "smoking_status"
            else ALCOHOL_LEVELS
        )
        value = str(v).strip().lower()
        if value not in allowed:
            raise ValueError(f"must be one of: {', '.join(sorted(allowed))}")
        return value

    @field_validator("family_history", "existing_conditions")
    @classmethod
    def dedupe_tags(cls, v):
        if v is None:
            return None
        # condition tags are a set; keep first-seen order
        return list(dict.fromkeys(v))


class AnalysisResponse(CamelModel):
    longevity_score: int
    health_age: Optional[int] = None
    focus_areas: List[str] = Field(default_factory=list)
    insights: str
    analyzed: bool = True


class StoredAnalysisResponse(AnalysisResponse):
    id: str
