from __future__ import annotations

from typing import Iterable

from changed_files.models import (
    ClassificationResult,
    FileChangeRecord,
    FileStatus,
    OutputFormat,
)
from changed_files.reporters import StepReporter

SPACE_IN_FILENAME_MESSAGE = (
    "One of your files includes a space. Consider using a different output format "
    "or removing spaces from your filenames."
)


def classify_files(
    records: Iterable[FileChangeRecord],
    fmt: OutputFormat,
    reporter: StepReporter,
) -> ClassificationResult:
    """Partition change records into status buckets, keeping API order."""
    result = ClassificationResult()

    for record in records:
        result.full_output.append(record.to_dict())
        filename = record.filename

        if fmt is OutputFormat.SPACE_DELIMITED and " " in filename:
            reporter.fail(SPACE_IN_FILENAME_MESSAGE)

        result.all.append(filename)

        status = record.file_status
        if status is FileStatus.ADDED:
            result.added.append(filename)
            result.added_modified.append(filename)
            result.combined["added"].append(filename)
        elif status is FileStatus.MODIFIED:
            result.modified.append(filename)
            result.added_modified.append(filename)
            result.combined["modified"].append(filename)
        elif status is FileStatus.REMOVED:
            result.removed.append(filename)
            result.combined["removed"].append(filename)
        elif status is FileStatus.RENAMED:
            result.renamed.append(filename)
            if record.previous_filename:
                result.renamed_from[filename] = record.previous_filename
                result.renamed_from_sources.append(record.previous_filename)
                result.combined["renamedFrom"].append(record.previous_filename)
            result.combined["renamed"].append(filename)
        elif status is None:
            reporter.fail(
                f"One of your files includes an unsupported file status '{record.status}', "
                "expected 'added', 'modified', 'removed', or 'renamed'."
            )
        else:
            raise AssertionError(f"Unhandled file status: {status}")

    return result
