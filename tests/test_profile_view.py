from conftest import NOW, repo_payload, user_payload

from gitin.models import HeuristicSummary
from gitin.services.profile_view import FEATURED_REPOS, build_profile_view
from gitin.services.summary import FALLBACK_SUMMARY


def test_pipeline_uses_given_now(octocat):
    view = build_profile_view("octocat", now=NOW)
    assert view.generated_at == NOW
    # 2025-05-30 is recent, 2024-11-01 is outside the 90 day window
    assert view.kpis.recent_projects == 1
    assert view.kpis.projects_with_description == 1


def test_featured_repos_capped(fake_github):
    fake_github.routes["/users/octocat"] = (200, user_payload())
    fake_github.routes["/users/octocat/repos"] = (200, [repo_payload(f"r{i}") for i in range(10)])

    view = build_profile_view("octocat", now=NOW)
    assert len(view.repos) == 10
    assert [r.name for r in view.featured_repos] == [f"r{i}" for i in range(FEATURED_REPOS)]


def test_custom_summarizer_receives_repo_count(octocat):
    seen = {}

    def summarizer(profile, kpis, repo_count):
        seen["repo_count"] = repo_count
        return HeuristicSummary(narrative_summary="n", seniority_label="s", badges=[], kpi_narrative="k")

    view = build_profile_view("octocat", now=NOW, summarizer=summarizer)
    assert seen["repo_count"] == 2
    assert view.summary.narrative_summary == "n"


def test_failing_summarizer_falls_back(octocat):
    def summarizer(*_):
        raise ValueError("boom")

    assert build_profile_view("octocat", now=NOW, summarizer=summarizer).summary == FALLBACK_SUMMARY
