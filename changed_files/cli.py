from __future__ import annotations

from pathlib import Path
import typer

from changed_files.classifier import classify_files
from changed_files.config import ActionSettings, load_env_file, load_event_context, load_settings
from changed_files.event_context import read_commit_range
from changed_files.formatter import FormattedOutputs, format_outputs
from changed_files.github_api import DEFAULT_API_URL, changed_file_records, compare_commits
from changed_files.models import EventContext
from changed_files.reporters import StepReporter

app = typer.Typer(help="changed-files: expose the files changed by a push or pull request as step outputs")


@app.callback()
def main() -> None:
    """changed-files command group."""


def run_action(
    settings: ActionSettings,
    context: EventContext,
    reporter: StepReporter,
) -> FormattedOutputs | None:
    """Run the pipeline once; returns ``None`` when no comparison was possible."""
    reporter.debug(f"Payload keys: {','.join(context.payload.keys())}")

    commit_range = read_commit_range(context, reporter)
    if not commit_range.is_complete:
        return None

    reporter.info(f"basehead: {commit_range.basehead}")
    reporter.info("Trying to compare commits using Github Api")
    response = compare_commits(
        owner=context.owner,
        repo=context.repo,
        basehead=commit_range.basehead,
        token=settings.token,
        api_url=settings.api_url,
    )
    reporter.info("Received Response from Github Api")

    records = changed_file_records(response, context.event_name, reporter)
    result = classify_files(records, settings.format, reporter)
    formatted = format_outputs(result, settings.format, reporter)
    reporter.write_outputs(formatted)
    return formatted


@app.command()
def run(
    token: str = typer.Option("", envvar="INPUT_TOKEN", help="GitHub token used to call the compare API"),
    fmt: str = typer.Option("", "--format", envvar="INPUT_FORMAT", help="Output format: space-delimited|csv|json"),
    event_name: str = typer.Option("", envvar="GITHUB_EVENT_NAME", help="Name of the triggering event"),
    event_path: str | None = typer.Option(None, envvar="GITHUB_EVENT_PATH", help="Path to the event payload JSON"),
    repository: str | None = typer.Option(None, envvar="GITHUB_REPOSITORY", help="Repository as owner/repo"),
    api_url: str = typer.Option(DEFAULT_API_URL, envvar="GITHUB_API_URL", help="GitHub REST API base URL"),
    output_path: str | None = typer.Option(None, envvar="GITHUB_OUTPUT", help="File that receives step outputs"),
) -> None:
    reporter = StepReporter(Path(output_path) if output_path else None)

    try:
        settings = load_settings(token, fmt, api_url=api_url)
        context = load_event_context(event_name, event_path, repository)
        run_action(settings, context, reporter)
    except Exception as exc:
        reporter.fail(str(exc) or exc.__class__.__name__)

    if reporter.failed:
        raise typer.Exit(code=1)


def entrypoint() -> None:
    # Local runs pick up INPUT_* and GITHUB_* from a .env file.
    load_env_file(Path.cwd() / ".env")
    app()


if __name__ == "__main__":
    entrypoint()
