from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Optional

from app.models.health_data import HealthProfile

BASE_SCORE = 70.0
MIN_SCORE = 0.0
MAX_SCORE = 100.0
MIN_HEALTH_AGE = 20.0

FOCUS_EXERCISE = "Increase physical activity"
FOCUS_SLEEP = "Improve sleep quality and duration"
FOCUS_STRESS = "Implement stress management techniques"
FOCUS_DIET = "Enhance nutritional quality of diet"
FOCUS_BLOOD_PRESSURE = "Monitor and manage blood pressure"


@dataclass
class ScoreResult:
    longevity_score: int
    health_age: Optional[int] = None
    focus_areas: List[str] = field(default_factory=list)


def _round_half_up(x: float) -> int:
    # 33.5 -> 34, 32.5 -> 33 (round() would give 32)
    return int(math.floor(x + 0.5))


def _exercise_adjustment(minutes: Optional[float]) -> float:
    if minutes is None:
        return 0
    if minutes >= 150:
        return 5
    if minutes >= 75:
        return 2
    return 0


def _sleep_adjustment(hours: Optional[float]) -> float:
    if hours is None:
        return 0
    if 7 <= hours <= 9:
        return 5
    if hours < 6 or hours > 10:
        return -3
    return 0


def _diet_adjustment(quality: Optional[float]) -> float:
    if quality is None:
        return 0
    return quality - 5


def _smoking_adjustment(status: Optional[str]) -> float:
    if status == "current":
        return -10
    if status == "former":
        return -3
    return 0


def _blood_pressure_adjustment(
    systolic: Optional[float], diastolic: Optional[float]
) -> float:
    if systolic is None or diastolic is None:
        return 0
    if systolic > 140 or diastolic > 90:
        return -5
    return 0


def raw_score(profile: HealthProfile) -> float:
    """Unclamped, unrounded accumulator: 70 plus every lifestyle adjustment."""
    total = BASE_SCORE
    total += _exercise_adjustment(profile.exercise_minutes_per_week)
    total += _sleep_adjustment(profile.sleep_hours_per_night)
    total += _diet_adjustment(profile.diet_quality)
    total += _smoking_adjustment(profile.smoking_status)
    total += _blood_pressure_adjustment(
        profile.blood_pressure_systolic, profile.blood_pressure_diastolic
    )
    return total


def longevity_score(profile: HealthProfile) -> int:
    clamped = min(MAX_SCORE, max(MIN_SCORE, raw_score(profile)))
    return _round_half_up(clamped)


def health_age(age: Optional[float], score: int) -> Optional[int]:
    """
    Each point above/below 70 moves the estimate half a year the other way,
    never below 20. None when age was not provided.
    """
    if age is None:
        return None
    return _round_half_up(max(MIN_HEALTH_AGE, age - (score - BASE_SCORE) / 2))


def focus_areas(profile: HealthProfile) -> List[str]:
    """Improvement labels from the raw profile, in fixed order."""
    areas: List[str] = []

    exercise = profile.exercise_minutes_per_week
    if exercise is not None and exercise < 150:
        areas.append(FOCUS_EXERCISE)

    sleep = profile.sleep_hours_per_night
    if sleep is not None and sleep < 7:
        areas.append(FOCUS_SLEEP)

    stress = profile.stress_level
    if stress is not None and stress > 6:
        areas.append(FOCUS_STRESS)

    diet = profile.diet_quality
    if diet is not None and diet < 6:
        areas.append(FOCUS_DIET)

    systolic = profile.blood_pressure_systolic
    if systolic is not None and systolic > 130:
        areas.append(FOCUS_BLOOD_PRESSURE)

    return areas


def score(profile: HealthProfile) -> ScoreResult:
    """Derive longevity score, health age and focus areas. Never raises."""
    value = longevity_score(profile)
    return ScoreResult(
        longevity_score=value,
        health_age=health_age(profile.age, value),
        focus_areas=focus_areas(profile),
    )
