import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List

import requests
from pydantic import BaseModel, ConfigDict, ValidationError

from gitin.core.config import settings
from gitin.models import Profile, Repository

logger = logging.getLogger(__name__)

HEADERS = {
    "Accept": "application/vnd.github.v3+json",
    "User-Agent": "gitin",
}

REPOS_PER_PAGE = 100


class GitHubError(Exception):
    """A single GitHub call failed (status, network or payload)."""


class ProfileNotFound(Exception):
    """The profile could not be fetched, whatever the underlying cause.

    `reason` keeps the cause for logs; callers handle every instance the same.
    """

    def __init__(self, username: str, reason: str):
        super().__init__(f"{username}: {reason}")
        self.username = username
        self.reason = reason


class ProfileBundle(BaseModel):
    model_config = ConfigDict(frozen=True)

    profile: Profile
    repos: List[Repository]


def gh_get(path: str, params: dict | None = None):
    url = f"{settings.GITHUB_API}{path}"
    try:
        r = requests.get(url, headers=HEADERS, params=params or {}, timeout=settings.GITHUB_TIMEOUT)
    except requests.RequestException as e:
        raise GitHubError(f"network error on {path}: {e}") from e
    if not 200 <= r.status_code < 300:
        raise GitHubError(f"HTTP {r.status_code} from {path}")
    try:
        return r.json()
    except ValueError as e:
        raise GitHubError(f"malformed JSON from {path}") from e


def _user_path(username: str) -> str:
    return f"/users/{requests.utils.quote(username, safe='')}"


def _get_profile(username: str) -> Profile:
    data = gh_get(_user_path(username))
    if not isinstance(data, dict):
        raise GitHubError(f"unexpected user payload for {username}")
    return Profile.from_api(data)


def _get_repos(username: str) -> List[Repository]:
    data = gh_get(f"{_user_path(username)}/repos", {"per_page": REPOS_PER_PAGE})
    if not isinstance(data, list):
        raise GitHubError(f"unexpected repos payload for {username}")
    if not all(isinstance(r, dict) for r in data):
        raise GitHubError(f"unexpected repo entry for {username}")
    return [Repository.from_api(r) for r in data]


def fetch_profile(username: str) -> ProfileBundle:
    """Fetch profile and repositories concurrently; both must succeed."""
    username = (username or "").strip()
    if not username:
        raise ProfileNotFound(username, "empty username")

    with ThreadPoolExecutor(max_workers=2) as pool:
        profile_f = pool.submit(_get_profile, username)
        repos_f = pool.submit(_get_repos, username)
        try:
            profile = profile_f.result()
            repos = repos_f.result()
        except (GitHubError, ValidationError, KeyError, TypeError) as e:
            logger.warning("GitHub fetch failed for %s: %s", username, e)
            raise ProfileNotFound(username, str(e)) from e

    return ProfileBundle(profile=profile, repos=repos)
