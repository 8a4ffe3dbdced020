# gitin/services/summary.py
"""
Perfil "AI" heurístico

No se consulta ningún modelo: seniority, badges y textos salen de umbrales fijos
sobre el KPISummary. `Summarizer` es el punto de integración si algún día se
conecta un modelo real; el resto del pipeline no cambia.
"""

import logging
from typing import Callable, List, Optional

from gitin.models import HeuristicSummary, KPISummary, Profile

logger = logging.getLogger(__name__)

Summarizer = Callable[[Profile, KPISummary, int], HeuristicSummary]

# ---------------------- Umbrales (fijos, no configurables) ----------------------

SENIOR_STARS = 100
MID_STARS = 20
DOC_BADGE_RATIO = 0.7
DOC_GOOD_RATIO = 0.5
ACTIVE_BADGE_RECENT = 3
VERY_ACTIVE_RECENT = 5
MAX_BADGES = 5
MAX_LANGUAGE_BADGES = 3

FALLBACK_LANGUAGE = "Full Stack"

FALLBACK_SUMMARY = HeuristicSummary(
    narrative_summary="Developer with experience across multiple technologies and open source projects.",
    seniority_label="Analysis unavailable",
    badges=["Developer"],
    kpi_narrative="KPI analysis temporarily unavailable.",
)


def seniority_label(total_stars: int) -> str:
    if total_stars > SENIOR_STARS:
        return "Senior - High community engagement"
    if total_stars > MID_STARS:
        return "Mid - Projects with good visibility"
    return "Junior - Profile in development"


def badges_for(kpis: KPISummary, repo_count: int) -> List[str]:
    candidates = [l.language for l in kpis.top_languages[:MAX_LANGUAGE_BADGES]]
    # con repo_count = 0 ambos umbrales valen 0 y `x > 0` nunca otorga el badge
    if kpis.projects_with_description > DOC_BADGE_RATIO * repo_count:
        candidates.append("Documentation")
    if kpis.recent_projects > ACTIVE_BADGE_RECENT:
        candidates.append("Active")

    out: List[str] = []
    for b in candidates:
        if b and b not in out:
            out.append(b)
    return out[:MAX_BADGES]


def summarize(profile: Profile, kpis: KPISummary, repo_count: int) -> HeuristicSummary:
    lead = kpis.top_languages[0].language if kpis.top_languages else FALLBACK_LANGUAGE
    activity = "Very active" if kpis.recent_projects > VERY_ACTIVE_RECENT else "Moderately active"
    if kpis.projects_with_description > DOC_GOOD_RATIO * repo_count:
        docs = "Good documentation practice."
    else:
        docs = "Project documentation could be improved."

    return HeuristicSummary(
        narrative_summary=(
            f"{lead} developer with experience across {repo_count} public projects. "
            "Focused on building solutions with attention to quality and good practices."
        ),
        seniority_label=seniority_label(kpis.total_stars),
        badges=badges_for(kpis, repo_count),
        kpi_narrative=f"{activity} profile with {kpis.total_stars} accumulated stars. {docs}",
    )


def summarize_or_fallback(
    profile: Profile,
    kpis: Optional[KPISummary],
    repo_count: int,
    summarizer: Summarizer = summarize,
) -> HeuristicSummary:
    """
    Nunca falla: sin KPIs o ante cualquier excepción del summarizer devuelve
    FALLBACK_SUMMARY y deja el error en el log.
    """
    if kpis is None:
        logger.error("No KPI summary for %s, using fallback profile", profile.login)
        return FALLBACK_SUMMARY
    try:
        return summarizer(profile, kpis, repo_count)
    except Exception:
        logger.exception("Profile summary failed for %s, using fallback profile", profile.login)
        return FALLBACK_SUMMARY
