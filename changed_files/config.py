from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import json
import os

from changed_files.github_api import DEFAULT_API_URL
from changed_files.models import ConfigError, EventContext, OutputFormat


@dataclass(frozen=True)
class ActionSettings:
    token: str
    format: OutputFormat
    api_url: str = DEFAULT_API_URL


def load_env_file(path: Path) -> None:
    """Load simple KEY=VALUE pairs from a .env file without overriding existing env."""
    if not path.exists() or not path.is_file():
        return

    for raw in path.read_text(errors="ignore").splitlines():
        line = raw.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key and key not in os.environ:
            os.environ[key] = value


def load_settings(
    token: str,
    fmt: str,
    api_url: str | None = None,
) -> ActionSettings:
    token = (token or "").strip()
    if not token:
        raise ConfigError("Input required and not supplied: token")
    fmt = (fmt or "").strip()
    if not fmt:
        raise ConfigError("Input required and not supplied: format")

    return ActionSettings(
        token=token,
        format=OutputFormat.parse(fmt),
        api_url=api_url or DEFAULT_API_URL,
    )


def load_event_payload(event_path: str | None) -> dict:
    if not event_path:
        return {}
    path = Path(event_path)
    if not path.exists():
        return {}
    data = json.loads(path.read_text(encoding="utf-8") or "{}")
    return data if isinstance(data, dict) else {}


def load_event_context(event_name: str, event_path: str | None, repository: str | None) -> EventContext:
    owner, sep, repo = (repository or "").partition("/")
    if not sep or not owner or not repo:
        raise ConfigError(
            f"GITHUB_REPOSITORY must look like 'owner/repo', got '{repository or ''}'."
        )

    return EventContext(
        event_name=event_name or "",
        payload=load_event_payload(event_path),
        owner=owner,
        repo=repo,
    )
