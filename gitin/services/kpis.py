# gitin/services/kpis.py
"""
KPIs de repositorios (pure, sin I/O)

Una sola pasada sobre la lista de repos:
- top_languages: hasta 3 (language, count), count desc; empates en orden de aparición
- total_stars / total_forks: sumas
- projects_with_description: description.strip() no vacía
- recent_projects: updated_at estrictamente posterior a now - 90 días
- projects_with_readme: description o homepage no vacíos
"""

from datetime import datetime
from typing import Dict, Iterable, List, Optional

from gitin.models import KPISummary, LanguageCount, Profile, Repository
from gitin.utils.time import days_ago_dt

RECENT_WINDOW_DAYS = 90
TOP_LANGUAGES_LIMIT = 3


def _filled(s: Optional[str]) -> bool:
    return bool(s and s.strip())


def top_languages(counts: Dict[str, int], limit: int = TOP_LANGUAGES_LIMIT) -> List[LanguageCount]:
    # dict conserva el orden de aparición y sorted() es estable: empates quedan en ese orden
    ranked = sorted(counts.items(), key=lambda kv: kv[1], reverse=True)
    return [LanguageCount(language=k, count=v) for k, v in ranked[:limit]]


def aggregate(profile: Profile, repos: Iterable[Repository], now: datetime) -> KPISummary:
    cutoff = days_ago_dt(RECENT_WINDOW_DAYS, now)

    langs: Dict[str, int] = {}
    stars = forks = described = recent = readme_like = 0

    for r in repos:
        if r.primary_language:
            langs[r.primary_language] = langs.get(r.primary_language, 0) + 1
        stars += r.star_count
        forks += r.fork_count
        has_desc = _filled(r.description)
        if has_desc:
            described += 1
        if r.updated_at > cutoff:
            recent += 1
        if has_desc or _filled(r.homepage):
            readme_like += 1

    return KPISummary(
        top_languages=top_languages(langs),
        total_stars=stars,
        total_forks=forks,
        projects_with_description=described,
        recent_projects=recent,
        projects_with_readme=readme_like,
    )
