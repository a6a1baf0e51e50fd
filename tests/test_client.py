from __future__ import annotations

import io
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
import requests

from prtemplate_cli.client import TemplateClient, is_url
from prtemplate_cli.exceptions import (
    ApiError,
    AuthenticationError,
    PrTemplateError,
    SourceError,
)

URL = "https://raw.example.com/org/repo/main/.github/pull_request_template.md"


def _mock_response(status_code: int = 200, text: str = "") -> MagicMock:
    resp = MagicMock(spec=requests.Response)
    resp.status_code = status_code
    resp.text = text
    resp.raise_for_status = MagicMock()
    return resp


class TestIsUrl:
    @pytest.mark.parametrize("source,expected", [
        ("https://example.com/tpl.md", True),
        ("http://example.com/tpl.md", True),
        ("tpl.md", False),
        ("-", False),
    ])
    def test_is_url(self, source: str, expected: bool) -> None:
        assert is_url(source) is expected


class TestClientHeaders:
    def test_session_headers(self) -> None:
        headers = TemplateClient()._session.headers
        assert "prtemplate-cli/" in headers["User-Agent"]
        assert "text/markdown" in headers["Accept"]


class TestLoadLocal:
    def test_reads_file(self, tmp_path: Path) -> None:
        path = tmp_path / "description.md"
        path.write_text("## Über\n", encoding="utf-8")
        assert TemplateClient().load(str(path)) == "## Über\n"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(SourceError, match="File not found"):
            TemplateClient().load(str(tmp_path / "nope.md"))

    def test_directory_is_not_a_file(self, tmp_path: Path) -> None:
        with pytest.raises(SourceError, match="File not found"):
            TemplateClient().load(str(tmp_path))

    def test_invalid_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "binary.md"
        path.write_bytes(b"\xff\xfe\x00bad")
        with pytest.raises(SourceError, match="not valid UTF-8"):
            TemplateClient().load(str(path))

    def test_reads_stdin(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("## From stdin\n"))
        assert TemplateClient().load("-") == "## From stdin\n"


class TestFetch:
    def test_fetch_success(self) -> None:
        client = TemplateClient()
        mock_resp = _mock_response(200, "## Summary (mandatory)\n")
        with patch.object(client._session, "request", return_value=mock_resp) as mock_req:
            result = client.load(URL)
        mock_req.assert_called_once_with("GET", URL, timeout=30.0)
        assert result == "## Summary (mandatory)\n"

    def test_plain_http_rejected(self) -> None:
        client = TemplateClient()
        with patch.object(client._session, "request") as mock_req:
            with pytest.raises(SourceError, match="must start with https://"):
                client.load("http://example.com/tpl.md")
        mock_req.assert_not_called()

    @pytest.mark.parametrize("status", [401, 403])
    def test_auth_errors(self, status: int) -> None:
        client = TemplateClient()
        with patch.object(client._session, "request", return_value=_mock_response(status)):
            with pytest.raises(AuthenticationError, match="denied"):
                client.fetch(URL)

    def test_not_found(self) -> None:
        client = TemplateClient()
        with patch.object(client._session, "request", return_value=_mock_response(404)):
            with pytest.raises(ApiError, match="Not found"):
                client.fetch(URL)

    def test_server_error(self) -> None:
        client = TemplateClient()
        with patch.object(client._session, "request", return_value=_mock_response(502)):
            with pytest.raises(ApiError, match="Server error \\(502\\)"):
                client.fetch(URL)

    def test_other_http_error(self) -> None:
        client = TemplateClient()
        resp = _mock_response(418)
        resp.raise_for_status.side_effect = requests.HTTPError("teapot")
        with patch.object(client._session, "request", return_value=resp):
            with pytest.raises(ApiError, match="Request failed \\(418\\)"):
                client.fetch(URL)

    def test_connection_error(self) -> None:
        client = TemplateClient()
        with patch.object(
            client._session, "request", side_effect=requests.ConnectionError("down"),
        ):
            with pytest.raises(ApiError, match="Cannot connect"):
                client.fetch(URL)

    def test_timeout(self) -> None:
        client = TemplateClient()
        with patch.object(client._session, "request", side_effect=requests.Timeout("slow")):
            with pytest.raises(ApiError, match="failed"):
                client.fetch(URL)

    def test_errors_share_base_class(self) -> None:
        assert issubclass(AuthenticationError, PrTemplateError)
        assert issubclass(SourceError, PrTemplateError)
