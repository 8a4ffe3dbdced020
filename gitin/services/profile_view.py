import logging
from datetime import datetime

from gitin.models import ProfileView
from gitin.services.github import fetch_profile
from gitin.services.kpis import aggregate
from gitin.services.summary import Summarizer, summarize, summarize_or_fallback
from gitin.utils.time import utcnow

logger = logging.getLogger(__name__)

FEATURED_REPOS = 6


def build_profile_view(
    username: str,
    now: datetime | None = None,
    summarizer: Summarizer = summarize,
) -> ProfileView:
    """fetch -> KPIs -> resumen. Propaga ProfileNotFound; el resumen nunca falla."""
    bundle = fetch_profile(username)
    now = now or utcnow()

    kpis = aggregate(bundle.profile, bundle.repos, now)
    summary = summarize_or_fallback(bundle.profile, kpis, len(bundle.repos), summarizer)

    logger.info(
        "Built profile view for %s: %d repos, %d stars",
        bundle.profile.login, len(bundle.repos), kpis.total_stars,
    )
    return ProfileView(
        profile=bundle.profile,
        repos=bundle.repos,
        featured_repos=bundle.repos[:FEATURED_REPOS],
        kpis=kpis,
        summary=summary,
        generated_at=now,
    )
