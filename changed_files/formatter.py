from __future__ import annotations

from dataclasses import dataclass
import json

from changed_files.classifier import SPACE_IN_FILENAME_MESSAGE
from changed_files.models import ClassificationResult, OutputFormat
from changed_files.reporters import StepReporter

RENAME_SEPARATOR = "->"


@dataclass(frozen=True)
class FormattedOutputs:
    all: str
    added: str
    modified: str
    removed: str
    renamed: str
    added_modified: str
    renamed_from: str
    full_output: str
    json_combined: str

    def as_outputs(self) -> dict[str, str]:
        return {
            "all": self.all,
            "added": self.added,
            "modified": self.modified,
            "removed": self.removed,
            "renamed": self.renamed,
            "added_modified": self.added_modified,
            "renamedFrom": self.renamed_from,
            "fullOutput": self.full_output,
            "jsonCombined": self.json_combined,
            # Kept for workflows written against older releases.
            "deleted": self.removed,
        }


def render_list(items: list[str], fmt: OutputFormat) -> str:
    if fmt is OutputFormat.SPACE_DELIMITED:
        return " ".join(items)
    if fmt is OutputFormat.CSV:
        return ",".join(items)
    if fmt is OutputFormat.JSON:
        return json.dumps(items)
    raise AssertionError(f"Unhandled output format: {fmt}")


def render_renamed_pairs(pairs: list[tuple[str, str]], fmt: OutputFormat) -> str:
    """Render (previous, new) pairs; text formats use ``previous->new``."""
    if fmt is OutputFormat.JSON:
        return json.dumps([[old, new] for old, new in pairs])
    return render_list([f"{old}{RENAME_SEPARATOR}{new}" for old, new in pairs], fmt)


def format_outputs(
    result: ClassificationResult,
    fmt: OutputFormat,
    reporter: StepReporter,
) -> FormattedOutputs:
    if fmt is OutputFormat.SPACE_DELIMITED:
        for filename in result.all:
            if " " in filename:
                reporter.fail(SPACE_IN_FILENAME_MESSAGE)

    return FormattedOutputs(
        all=render_list(result.all, fmt),
        added=render_list(result.added, fmt),
        modified=render_list(result.modified, fmt),
        removed=render_list(result.removed, fmt),
        renamed=render_list(result.renamed, fmt),
        added_modified=render_list(result.added_modified, fmt),
        renamed_from=render_renamed_pairs(result.renamed_pairs(), fmt),
        full_output=json.dumps(result.full_output),
        json_combined=json.dumps(result.combined),
    )
