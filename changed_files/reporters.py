from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING
import uuid

import typer

if TYPE_CHECKING:
    from changed_files.formatter import FormattedOutputs


def _escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _escape_property(value: str) -> str:
    return _escape_data(value).replace(":", "%3A").replace(",", "%2C")


class StepReporter:
    """Writes step outputs and collects failures for the current run.

    Failures recorded through ``fail`` do not stop the run; the CLI inspects
    ``failed`` once the pipeline finishes to pick the exit code.
    """

    def __init__(self, output_path: Path | None = None) -> None:
        self.output_path = output_path
        self.failures: list[str] = []
        self.outputs: dict[str, str] = {}

    @property
    def failed(self) -> bool:
        return bool(self.failures)

    def info(self, message: str) -> None:
        typer.echo(message)

    def debug(self, message: str) -> None:
        typer.echo(f"::debug::{_escape_data(message)}")

    def fail(self, message: str) -> None:
        self.failures.append(message)
        typer.echo(f"::error::{_escape_data(message)}")

    def set_output(self, name: str, value: str) -> None:
        self.outputs[name] = value
        if self.output_path is None:
            typer.echo(f"::set-output name={_escape_property(name)}::{_escape_data(value)}")
            return

        delimiter = f"ghadelimiter_{uuid.uuid4()}"
        if delimiter in name or delimiter in value:
            raise ValueError(f"Unexpected input: output delimiter collides with '{name}'")
        with self.output_path.open("a", encoding="utf-8") as fh:
            fh.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")

    def write_outputs(self, formatted: "FormattedOutputs") -> None:
        self.info(f"All: {formatted.all}")
        self.info(f"Added: {formatted.added}")
        self.info(f"Modified: {formatted.modified}")
        self.info(f"Removed: {formatted.removed}")
        self.info(f"Renamed: {formatted.renamed}")
        self.info(f"Added or modified: {formatted.added_modified}")
        self.info(f"RenamedFrom: {formatted.renamed_from}")
        self.info(f"JSON Combined: {formatted.json_combined}")

        for name, value in formatted.as_outputs().items():
            self.set_output(name, value)
