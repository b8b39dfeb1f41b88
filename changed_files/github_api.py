from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import requests

from changed_files.event_context import ISSUE_HINT
from changed_files.models import ChangedFilesError, FileChangeRecord
from changed_files.reporters import StepReporter

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_TIMEOUT_SECONDS = 30


class CompareError(ChangedFilesError):
    pass


class MissingFilesError(ChangedFilesError):
    pass


@dataclass(frozen=True)
class CompareResponse:
    status_code: int
    data: dict[str, Any]


def _compare_url(api_url: str, owner: str, repo: str, basehead: str) -> str:
    return f"{api_url.rstrip('/')}/repos/{owner}/{repo}/compare/{basehead}"


def compare_commits(
    owner: str,
    repo: str,
    basehead: str,
    token: str,
    api_url: str = DEFAULT_API_URL,
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS,
) -> CompareResponse:
    """Call GitHub's "compare two commits" endpoint for ``base...head``."""
    try:
        resp = requests.get(
            _compare_url(api_url, owner, repo, basehead),
            headers={
                "Authorization": f"Bearer {token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
            },
            timeout=timeout_seconds,
        )
    except requests.RequestException as exc:
        raise CompareError(f"Failed to compare commits {basehead}: {exc}") from exc

    try:
        data = resp.json()
    except ValueError:
        data = {}
    if not isinstance(data, dict):
        data = {}

    return CompareResponse(status_code=resp.status_code, data=data)


def changed_file_records(
    response: CompareResponse,
    event_name: str,
    reporter: StepReporter,
) -> list[FileChangeRecord]:
    if response.status_code != 200:
        reporter.fail(
            f"The GitHub API for comparing the base and head commits for this {event_name} event "
            f"returned {response.status_code}, expected 200. {ISSUE_HINT}"
        )

    if response.data.get("status") != "ahead":
        reporter.fail(
            f"The head commit for this {event_name} event is not ahead of the base commit. {ISSUE_HINT}"
        )

    files = response.data.get("files")
    if files is None:
        raise MissingFilesError(
            f"The GitHub API response for this {event_name} event did not include a list of changed files."
        )

    return [FileChangeRecord.from_api(raw) for raw in files]
