"""Combines the score and the language-model insights into one response."""
from app.models.health_data import AnalysisResponse, HealthProfile
from app.services.insights_llm import InsightGenerator
from app.services.logger import log_debug
from app.services.scoring import score


def analyze_profile(profile: HealthProfile, generate: InsightGenerator) -> AnalysisResponse:
    result = score(profile)
    log_debug(
        "score",
        {
            "longevity_score": result.longevity_score,
            "health_age": result.health_age,
            "focus_areas": result.focus_areas,
        },
    )

    insights = generate(profile)

    return AnalysisResponse(
        longevity_score=result.longevity_score,
        health_age=result.health_age,
        focus_areas=result.focus_areas,
        insights=insights,
        analyzed=True,
    )
