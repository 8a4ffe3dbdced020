"""Data models for GitIn profiles, repositories and derived summaries."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Profile(BaseModel):
    """Public GitHub user profile, as returned by GET /users/{username}."""
    model_config = ConfigDict(frozen=True)

    login: str
    display_name: Optional[str] = None
    bio: Optional[str] = None
    avatar_url: str = ""
    location: Optional[str] = None
    followers: int = Field(0, ge=0)
    following: int = Field(0, ge=0)
    public_repo_count: int = Field(0, ge=0)

    @classmethod
    def from_api(cls, payload: Dict[str, Any]) -> "Profile":
        return cls(
            login=payload["login"],
            display_name=payload.get("name"),
            bio=payload.get("bio"),
            avatar_url=payload.get("avatar_url") or "",
            location=payload.get("location"),
            followers=payload.get("followers") or 0,
            following=payload.get("following") or 0,
            public_repo_count=payload.get("public_repos") or 0,
        )


class Repository(BaseModel):
    """One entry of GET /users/{username}/repos."""
    model_config = ConfigDict(frozen=True)

    name: str
    description: Optional[str] = None
    primary_language: Optional[str] = None
    star_count: int = Field(0, ge=0)
    fork_count: int = Field(0, ge=0)
    updated_at: datetime
    homepage: Optional[str] = None

    @field_validator("updated_at")
    @classmethod
    def _aware(cls, v: datetime) -> datetime:
        # GitHub timestamps are UTC; naive values are read the same way
        return v if v.tzinfo else v.replace(tzinfo=timezone.utc)

    @classmethod
    def from_api(cls, payload: Dict[str, Any]) -> "Repository":
        forks = payload.get("forks")
        if forks is None:
            forks = payload.get("forks_count")
        return cls(
            name=payload["name"],
            description=payload.get("description"),
            primary_language=payload.get("language"),
            star_count=payload.get("stargazers_count") or 0,
            fork_count=forks or 0,
            updated_at=payload["updated_at"],
            homepage=payload.get("homepage"),
        )


class LanguageCount(BaseModel):
    model_config = ConfigDict(frozen=True)

    language: str
    count: int


class KPISummary(BaseModel):
    """Aggregate statistics over a user's repositories."""
    model_config = ConfigDict(frozen=True)

    top_languages: List[LanguageCount] = Field(default_factory=list)
    total_stars: int = 0
    total_forks: int = 0
    projects_with_description: int = 0
    recent_projects: int = 0
    # description or homepage present; nothing downstream reads it yet
    projects_with_readme: int = 0


class HeuristicSummary(BaseModel):
    """Rule-derived "AI-style" profile text. No model is consulted."""
    model_config = ConfigDict(frozen=True)

    narrative_summary: str
    seniority_label: str
    badges: List[str] = Field(default_factory=list)
    kpi_narrative: str


class ProfileView(BaseModel):
    """Everything the rendering surface needs for one profile page."""
    model_config = ConfigDict(frozen=True)

    profile: Profile
    repos: List[Repository]
    featured_repos: List[Repository]
    kpis: KPISummary
    summary: HeuristicSummary
    generated_at: datetime
