import json
from pathlib import Path

import httpx
import pytest
from click.testing import CliRunner
from pytest_httpx import HTTPXMock

from httpbridge._cli import cli
from httpbridge._cli._utils._common import parse_headers, parse_params


@pytest.fixture
def runner(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> CliRunner:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HTTPBRIDGE_DOCUMENTS_DIR", str(tmp_path))
    return CliRunner()


class TestParsing:
    def test_parse_headers(self):
        assert parse_headers(["Accept: application/json", "X-Empty:"]) == {
            "Accept": "application/json",
            "X-Empty": "",
        }

    def test_parse_params_collects_repeated_keys(self):
        assert parse_params(["a=1", "b=2", "a=3", "c=x=y"]) == {
            "a": ["1", "3"],
            "b": "2",
            "c": "x=y",
        }


class TestRequestCommand:
    def test_prints_response_as_json(
        self, runner: CliRunner, httpx_mock: HTTPXMock, base_url: str
    ):
        httpx_mock.add_response(
            url=f"{base_url}/api?q=a%20b", json={"hits": 2}, headers={"X-Id": "7"}
        )

        result = runner.invoke(
            cli,
            ["request", f"{base_url}/api", "-p", "q=a b", "--response-type", "json"],
        )

        assert result.exit_code == 0, result.output
        output = json.loads(result.stdout)
        assert output["status"] == 200
        assert output["data"] == {"hits": 2}
        assert output["headers"]["X-Id"] == "7"
        assert output["error"] is False

    def test_post_with_json_data(
        self, runner: CliRunner, httpx_mock: HTTPXMock, base_url: str
    ):
        received = {}

        def capture(request: httpx.Request) -> httpx.Response:
            received["body"] = json.loads(request.read())
            received["auth"] = request.headers.get("Authorization")
            return httpx.Response(201, text="created")

        httpx_mock.add_callback(capture, method="POST")

        result = runner.invoke(
            cli,
            [
                "request",
                base_url,
                "-X",
                "post",
                "-H",
                "Authorization: Bearer t",
                "-d",
                '{"k": "v"}',
                "--format",
                "body",
            ],
        )

        assert result.exit_code == 0, result.output
        assert result.stdout.strip() == "created"
        assert received == {"body": {"k": "v"}, "auth": "Bearer t"}

    def test_output_to_file(
        self, runner: CliRunner, httpx_mock: HTTPXMock, base_url: str, tmp_path: Path
    ):
        httpx_mock.add_response(text="saved")
        destination = tmp_path / "response.json"

        result = runner.invoke(cli, ["request", base_url, "-o", str(destination)])

        assert result.exit_code == 0, result.output
        assert '"status"' not in result.stdout
        saved = json.loads(destination.read_text(encoding="utf-8"))
        assert saved["status"] == 200
        assert saved["data"] == "saved"

    def test_failure_is_reported(self, runner: CliRunner):
        result = runner.invoke(cli, ["request", "not-a-url"])

        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "Malformed URL" in result.output

    def test_bad_header(self, runner: CliRunner, base_url: str):
        result = runner.invoke(cli, ["request", base_url, "-H", "no-colon"])

        assert result.exit_code == 2
        assert "Name: value" in result.output


class TestDownloadCommand:
    def test_downloads_file(
        self, runner: CliRunner, httpx_mock: HTTPXMock, base_url: str, tmp_path: Path
    ):
        httpx_mock.add_response(content=b"file body")
        destination = tmp_path / "out.bin"

        result = runner.invoke(
            cli, ["download", base_url, str(destination), "--quiet"]
        )

        assert result.exit_code == 0, result.output
        assert destination.read_bytes() == b"file body"
        assert json.loads(result.stdout) == {"path": str(destination.resolve())}

    def test_http_error(
        self, runner: CliRunner, httpx_mock: HTTPXMock, base_url: str, tmp_path: Path
    ):
        httpx_mock.add_response(status_code=404)

        result = runner.invoke(
            cli, ["download", base_url, str(tmp_path / "out.bin"), "--quiet"]
        )

        assert result.exit_code == 1
        assert "status 404" in result.output


class TestUploadCommand:
    def test_uploads_file(
        self, runner: CliRunner, httpx_mock: HTTPXMock, base_url: str, tmp_path: Path
    ):
        source = tmp_path / "in.bin"
        source.write_bytes(b"upload me")
        received = {}

        def capture(request: httpx.Request) -> httpx.Response:
            received["method"] = request.method
            received["body"] = request.read()
            return httpx.Response(200, json={"id": 1})

        httpx_mock.add_callback(capture)

        result = runner.invoke(
            cli,
            ["upload", base_url, str(source), "-X", "PUT", "--response-type", "json"],
        )

        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)["data"] == {"id": 1}
        assert received == {"method": "PUT", "body": b"upload me"}

    def test_missing_source(self, runner: CliRunner, base_url: str, tmp_path: Path):
        result = runner.invoke(cli, ["upload", base_url, str(tmp_path / "absent")])

        assert result.exit_code == 2
