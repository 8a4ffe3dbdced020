from datetime import datetime, timedelta, timezone

import pytest

from gitin.core.config import settings
from gitin.models import Profile, Repository
from gitin.services import github

NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)

MALFORMED = object()


def make_repo(name="repo", language=None, stars=0, forks=0, description=None,
              days_ago=1, homepage=None, now=NOW):
    return Repository(
        name=name,
        description=description,
        primary_language=language,
        star_count=stars,
        fork_count=forks,
        updated_at=now - timedelta(days=days_ago),
        homepage=homepage,
    )


def user_payload(login="octocat", **extra):
    data = {
        "login": login,
        "name": "The Octocat",
        "bio": "Mascot",
        "avatar_url": "https://avatars.example/octocat.png",
        "location": "San Francisco",
        "followers": 10,
        "following": 2,
        "public_repos": 2,
    }
    data.update(extra)
    return data


def repo_payload(name, language="Python", stars=0, forks=0, description=None,
                 updated_at="2025-05-30T10:00:00Z", homepage=None):
    return {
        "name": name,
        "description": description,
        "language": language,
        "stargazers_count": stars,
        "forks": forks,
        "updated_at": updated_at,
        "homepage": homepage,
    }


class FakeResponse:
    def __init__(self, status_code, payload):
        self.status_code = status_code
        self._payload = payload

    def json(self):
        if self._payload is MALFORMED:
            raise ValueError("Expecting value")
        return self._payload


@pytest.fixture
def profile():
    return Profile.from_api(user_payload())


@pytest.fixture
def fake_github(monkeypatch):
    """
    Sustituye requests.get en el servicio de GitHub. Las rutas se registran como
    {path: (status, payload)} o {path: excepción}. Devuelve la lista de llamadas.
    """
    routes = {}
    calls = []

    def fake_get(url, headers=None, params=None, timeout=None):
        path = url[len(settings.GITHUB_API):]
        calls.append({"path": path, "params": params, "headers": headers, "timeout": timeout})
        route = routes.get(path)
        if route is None:
            return FakeResponse(404, {"message": "Not Found"})
        if isinstance(route, Exception):
            raise route
        status, payload = route
        return FakeResponse(status, payload)

    monkeypatch.setattr(github.requests, "get", fake_get)
    fake_get.routes = routes
    fake_get.calls = calls
    return fake_get


@pytest.fixture
def octocat(fake_github):
    fake_github.routes["/users/octocat"] = (200, user_payload())
    fake_github.routes["/users/octocat/repos"] = (200, [
        repo_payload("hello-world", language="Go", stars=50, forks=2, description="x"),
        repo_payload("spoon-knife", language="Go", stars=30, forks=1, description="",
                     updated_at="2024-11-01T00:00:00Z"),
    ])
    return fake_github
