from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import requests

from prtemplate_cli import __version__
from prtemplate_cli.exceptions import ApiError, AuthenticationError, SourceError

STDIN_SOURCE = "-"


def is_url(source: str) -> bool:
    return source.startswith(("https://", "http://"))


class TemplateClient:
    """Loads template and description text from files, stdin or HTTPS."""

    def __init__(self, timeout: float = 30.0) -> None:
        self._timeout = timeout
        self._session = requests.Session()
        self._session.headers.update({
            "User-Agent": f"prtemplate-cli/{__version__}",
            "Accept": "text/plain, text/markdown, */*",
        })

    def load(self, source: str) -> str:
        if is_url(source):
            return self.fetch(source)
        if source == STDIN_SOURCE:
            return sys.stdin.read()
        return self.read_file(Path(source))

    def read_file(self, path: Path) -> str:
        if not path.is_file():
            raise SourceError(f"File not found: {path}")
        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise SourceError(f"{path} is not valid UTF-8 text.") from exc
        except OSError as exc:
            raise SourceError(f"Cannot read {path}: {exc.strerror or exc}") from exc

    def fetch(self, url: str) -> str:
        if not url.startswith("https://"):
            raise SourceError("Remote sources must start with https://")
        response = self._request("GET", url)
        return response.text

    def _request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        try:
            response = self._session.request(method, url, timeout=self._timeout, **kwargs)
        except requests.ConnectionError as exc:
            raise ApiError(
                f"Cannot connect to {url}. "
                "Check your network connection and the URL."
            ) from exc
        except requests.RequestException as exc:
            raise ApiError(f"Request to {url} failed.") from exc

        if response.status_code in (401, 403):
            raise AuthenticationError(
                f"Access to {url} was denied ({response.status_code}). "
                "Use a publicly readable URL or a local file."
            )
        if response.status_code == 404:
            raise ApiError(f"Not found: {url}")
        if response.status_code >= 500:
            raise ApiError(
                f"Server error ({response.status_code}) for {url}. "
                "Please try again later."
            )

        try:
            response.raise_for_status()
        except requests.HTTPError as exc:
            raise ApiError(f"Request failed ({response.status_code}) for {url}.") from exc

        return response
