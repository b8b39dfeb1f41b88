from __future__ import annotations

from typing import Any

from changed_files.models import CommitRange, EventContext
from changed_files.reporters import StepReporter

ISSUE_HINT = "Please submit an issue on this action's GitHub repo."


def _dig(payload: dict[str, Any], *keys: str) -> Any:
    node: Any = payload
    for key in keys:
        if not isinstance(node, dict):
            return None
        node = node.get(key)
    return node


def read_commit_range(context: EventContext, reporter: StepReporter) -> CommitRange:
    base: str | None = None
    head: str | None = None

    if context.event_name == "pull_request":
        base = _dig(context.payload, "pull_request", "base", "sha")
        head = _dig(context.payload, "pull_request", "head", "sha")
    elif context.event_name == "push":
        base = context.payload.get("before")
        head = context.payload.get("after")
    else:
        reporter.fail(
            f"This action only supports pull requests and pushes, {context.event_name} events are not supported. "
            "Please submit an issue on this action's GitHub repo if you believe this is incorrect."
        )

    reporter.info(f"Base commit: {base}")
    reporter.info(f"Head commit: {head}")

    if not base or not head:
        reporter.fail(
            f"The base and head commits are missing from the payload for this {context.event_name} event. "
            f"{ISSUE_HINT}"
        )
        return CommitRange(base="", head="")

    return CommitRange(base=str(base), head=str(head))
