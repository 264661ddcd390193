# app/services/insights_llm.py
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Callable

import google.generativeai as genai

from app.core.config import settings
from app.models.health_data import HealthProfile
from app.services.logger import log_debug

logger = logging.getLogger(__name__)

SYSTEM_INSTRUCTION = (
    "You are a health expert specializing in longevity and preventive medicine. "
    "Provide evidence-based, personalized health insights."
)

NOT_PROVIDED = "not provided"

InsightGenerator = Callable[[HealthProfile], str]


class InsightGenerationError(RuntimeError):
    """Raised when the language model cannot produce insights."""


def _fmt(value: Any, suffix: str = "") -> str:
    if value is None:
        return NOT_PROVIDED
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return f"{value}{suffix}"


def _fmt_blood_pressure(profile: HealthProfile) -> str:
    systolic = profile.blood_pressure_systolic
    diastolic = profile.blood_pressure_diastolic
    if systolic is None and diastolic is None:
        return NOT_PROVIDED
    return f"{_fmt(systolic)}/{_fmt(diastolic)}"


def build_prompt(profile: HealthProfile) -> str:
    return f"""
Generate personalized health insights based on the following health data:

Age: {_fmt(profile.age)}
Gender: {_fmt(profile.gender)}
Exercise: {_fmt(profile.exercise_minutes_per_week, " minutes per week")}
Sleep: {_fmt(profile.sleep_hours_per_night, " hours per night")}
Stress Level: {_fmt(profile.stress_level, "/10")}
Diet Quality: {_fmt(profile.diet_quality, "/10")}
Smoking Status: {_fmt(profile.smoking_status)}
Alcohol Consumption: {_fmt(profile.alcohol_consumption)}
Blood Pressure: {_fmt_blood_pressure(profile)}

Provide specific, actionable recommendations for improving health and longevity based on this data and recent scientific research. Focus on personalized diet, exercise, sleep, and stress management strategies.
""".strip()


@lru_cache(maxsize=1)
def _get_model() -> "genai.GenerativeModel":
    if not settings.GEMINI_API_KEY:
        raise InsightGenerationError(
            "Gemini API key not found. Set GEMINI_API_KEY (or GOOGLE_API_KEY) in .env "
            "or as an environment variable."
        )
    genai.configure(api_key=settings.GEMINI_API_KEY)
    return genai.GenerativeModel(
        settings.GEMINI_MODEL, system_instruction=SYSTEM_INSTRUCTION
    )


def generate_insights(profile: HealthProfile) -> str:
    """Ask Gemini for narrative insights on a health profile."""
    prompt = build_prompt(profile)
    log_debug("insights_prompt", {"model": settings.GEMINI_MODEL, "chars": len(prompt)})

    response = _get_model().generate_content(prompt)
    text = (response.text or "").strip()
    if not text:
        raise InsightGenerationError("Empty response from language model")

    log_debug("insights_response", {"chars": len(text)})
    return text


def get_insight_generator() -> InsightGenerator:
    """FastAPI dependency; tests override it with a stub."""
    return generate_insights
