"""Pytest configuration and fixtures for gitra tests.

Jira is faked with ``httpx.MockTransport``; git runs for real inside
temporary repositories with global and system configuration disabled.
"""

from __future__ import annotations

import json
import subprocess
from collections.abc import Callable
from pathlib import Path

import httpx
import pytest

from gitra.config import Config

TEST_HOST = "https://jira.example.com"

GIT_ENV = {
    "GIT_CONFIG_GLOBAL": "/dev/null",
    "GIT_CONFIG_NOSYSTEM": "1",
    "GIT_AUTHOR_NAME": "Test",
    "GIT_AUTHOR_EMAIL": "test@test.com",
    "GIT_COMMITTER_NAME": "Test",
    "GIT_COMMITTER_EMAIL": "test@test.com",
}


class FakeJira:
    """Records search requests and answers them with a canned response.

    ``body`` may be a dict (serialized as JSON), raw text, or an exception
    instance to raise from the transport.
    """

    def __init__(self, body: object = None, status_code: int = 200) -> None:
        self.body = {"issues": []} if body is None else body
        self.status_code = status_code
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if isinstance(self.body, Exception):
            raise self.body
        if isinstance(self.body, str):
            return httpx.Response(self.status_code, text=self.body)
        return httpx.Response(self.status_code, content=json.dumps(self.body).encode())

    def client_factory(self) -> Callable[[Config], httpx.Client]:
        def factory(config: Config) -> httpx.Client:
            return httpx.Client(
                auth=httpx.BasicAuth(config.email, config.api_token),
                transport=httpx.MockTransport(self.handler),
            )

        return factory

    @property
    def last_jql(self) -> str | None:
        return self.requests[-1].url.params.get("jql")


@pytest.fixture(autouse=True)
def setup_test_env(monkeypatch):
    """Isolate tests from the developer's git and Jira configuration."""
    for key, value in GIT_ENV.items():
        monkeypatch.setenv(key, value)
    monkeypatch.setenv("JIRA_HOST", TEST_HOST)
    monkeypatch.setenv("JIRA_EMAIL", "dev@example.com")
    monkeypatch.setenv("JIRA_API_TOKEN", "test-api-token")


@pytest.fixture
def config() -> Config:
    return Config(host=TEST_HOST, email="dev@example.com", api_token="test-api-token")


@pytest.fixture
def fake_jira(mocker):
    """Route every Jira request through a ``FakeJira``."""
    jira = FakeJira()
    mocker.patch("gitra.jira.api.get_jira_client", side_effect=jira.client_factory())
    return jira


def git(repo: Path, *args: str) -> str:
    proc = subprocess.run(
        ["git", *args], cwd=repo, capture_output=True, text=True, check=True
    )
    return proc.stdout.strip()


@pytest.fixture
def git_repo(tmp_path, monkeypatch) -> Path:
    """A git repository with one commit on ``main``, used as the cwd."""
    repo = tmp_path / "repo"
    repo.mkdir()
    git(repo, "init", "-q")
    git(repo, "symbolic-ref", "HEAD", "refs/heads/main")
    (repo / "README.md").write_text("# Test Repo\n", encoding="utf-8")
    git(repo, "add", ".")
    git(repo, "commit", "-q", "-m", "Initial commit")
    monkeypatch.chdir(repo)
    return repo


@pytest.fixture
def git_config(git_repo) -> Callable[[str, str], None]:
    """Set a key in the test repository's local git configuration."""

    def setter(key: str, value: str) -> None:
        git(git_repo, "config", key, value)

    return setter
