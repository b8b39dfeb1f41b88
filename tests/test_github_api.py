from unittest.mock import patch

import pytest
import requests

from changed_files.github_api import (
    CompareError,
    CompareResponse,
    MissingFilesError,
    changed_file_records,
    compare_commits,
)
from changed_files.models import FileChangeRecord
from changed_files.reporters import StepReporter


class _Resp:
    def __init__(self, status_code=200, payload=None):
        self.status_code = status_code
        self._payload = payload

    def json(self):
        if self._payload is None:
            raise ValueError("no json")
        return self._payload


@patch("changed_files.github_api.requests.get")
def test_compare_commits_calls_basehead_endpoint(mock_get):
    mock_get.return_value = _Resp(payload={"status": "ahead", "files": []})
    out = compare_commits("octo", "demo", "abc...def", "t0k3n", api_url="https://ghe.example/api/v3/")

    assert out == CompareResponse(status_code=200, data={"status": "ahead", "files": []})
    args, kwargs = mock_get.call_args
    assert args[0] == "https://ghe.example/api/v3/repos/octo/demo/compare/abc...def"
    assert kwargs["headers"]["Authorization"] == "Bearer t0k3n"
    assert kwargs["timeout"] > 0


@patch("changed_files.github_api.requests.get")
def test_compare_commits_tolerates_non_json_body(mock_get):
    mock_get.return_value = _Resp(status_code=502)
    out = compare_commits("octo", "demo", "abc...def", "t")
    assert out.status_code == 502
    assert out.data == {}


def test_compare_commits_wraps_transport_errors():
    with patch("changed_files.github_api.requests.get", side_effect=requests.ConnectionError("boom")):
        with pytest.raises(CompareError):
            compare_commits("octo", "demo", "abc...def", "t")


def test_changed_file_records_in_api_order():
    response = CompareResponse(
        status_code=200,
        data={
            "status": "ahead",
            "files": [
                {"filename": "b.txt", "status": "removed"},
                {"filename": "new.txt", "status": "renamed", "previous_filename": "old.txt"},
            ],
        },
    )
    reporter = StepReporter()
    out = changed_file_records(response, "push", reporter)
    assert out == [
        FileChangeRecord(filename="b.txt", status="removed"),
        FileChangeRecord(filename="new.txt", status="renamed", previous_filename="old.txt"),
    ]
    assert not reporter.failed


def test_non_200_and_not_ahead_are_recorded_but_not_fatal():
    response = CompareResponse(status_code=404, data={"status": "diverged", "files": []})
    reporter = StepReporter()
    out = changed_file_records(response, "push", reporter)
    assert out == []
    assert len(reporter.failures) == 2
    assert "returned 404, expected 200" in reporter.failures[0]
    assert "is not ahead of the base commit" in reporter.failures[1]


def test_missing_file_list_is_fatal():
    response = CompareResponse(status_code=200, data={"status": "ahead"})
    with pytest.raises(MissingFilesError):
        changed_file_records(response, "push", StepReporter())
