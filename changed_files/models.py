from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ChangedFilesError(RuntimeError):
    pass


class ConfigError(ChangedFilesError):
    pass


class OutputFormat(str, Enum):
    SPACE_DELIMITED = "space-delimited"
    CSV = "csv"
    JSON = "json"

    @classmethod
    def parse(cls, value: str) -> "OutputFormat":
        try:
            return cls(value)
        except ValueError as exc:
            raise ConfigError(
                f"Format must be one of 'space-delimited', 'csv', or 'json', got '{value}'."
            ) from exc


class FileStatus(str, Enum):
    ADDED = "added"
    MODIFIED = "modified"
    REMOVED = "removed"
    RENAMED = "renamed"

    @classmethod
    def parse(cls, value: str | None) -> "FileStatus | None":
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass(frozen=True)
class EventContext:
    event_name: str
    payload: dict[str, Any]
    owner: str
    repo: str


@dataclass(frozen=True)
class CommitRange:
    base: str
    head: str

    @property
    def basehead(self) -> str:
        return f"{self.base}...{self.head}"

    @property
    def is_complete(self) -> bool:
        return bool(self.base) and bool(self.head)


@dataclass(frozen=True)
class FileChangeRecord:
    filename: str
    status: str
    previous_filename: str | None = None

    @property
    def file_status(self) -> FileStatus | None:
        return FileStatus.parse(self.status)

    @classmethod
    def from_api(cls, raw: dict[str, Any]) -> "FileChangeRecord":
        return cls(
            filename=str(raw.get("filename", "")),
            status=str(raw.get("status", "")),
            previous_filename=raw.get("previous_filename"),
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"filename": self.filename, "status": self.status}
        # Omitted rather than null when absent, matching the action's historical output.
        if self.previous_filename is not None:
            out["previousFilename"] = self.previous_filename
        return out


COMBINED_KEYS = ("added", "modified", "removed", "renamed", "renamedFrom")


def _empty_combined() -> dict[str, list[str]]:
    return {k: [] for k in COMBINED_KEYS}


@dataclass
class ClassificationResult:
    all: list[str] = field(default_factory=list)
    added: list[str] = field(default_factory=list)
    modified: list[str] = field(default_factory=list)
    removed: list[str] = field(default_factory=list)
    renamed: list[str] = field(default_factory=list)
    added_modified: list[str] = field(default_factory=list)
    renamed_from_sources: list[str] = field(default_factory=list)
    renamed_from: dict[str, str] = field(default_factory=dict)
    combined: dict[str, list[str]] = field(default_factory=_empty_combined)
    full_output: list[dict[str, Any]] = field(default_factory=list)

    def renamed_pairs(self) -> list[tuple[str, str]]:
        """Rename relation as ordered (previous, new) pairs."""
        return [(old, new) for new, old in self.renamed_from.items()]
