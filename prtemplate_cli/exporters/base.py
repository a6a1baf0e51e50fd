from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional

from prtemplate_cli.exceptions import ConfigError
from prtemplate_cli.formatters.base import BaseFormatter
from prtemplate_cli.formatters.json_formatter import JsonFormatter
from prtemplate_cli.formatters.markdown_formatter import MarkdownFormatter
from prtemplate_cli.formatters.yaml_formatter import YamlFormatter

_FORMATTERS = {
    "text": MarkdownFormatter,
    "json": JsonFormatter,
    "yaml": YamlFormatter,
}


class BaseExporter(ABC):
    def __init__(
        self,
        output_format: str = "text",
        output_path: Optional[Path] = None,
        *,
        force: bool = False,
    ) -> None:
        if output_format not in _FORMATTERS:
            raise ConfigError(f"Unknown output format '{output_format}'.")
        self.output_format = output_format
        self.output_path = output_path
        self.force = force
        self._formatter: BaseFormatter = _FORMATTERS[output_format]()

    @abstractmethod
    def export(self) -> None:
        """Render the result and print it or write it to output_path."""
        ...

    @abstractmethod
    def _structured(self) -> Dict[str, Any]:
        """Payload for the JSON and YAML formats."""
        ...

    @abstractmethod
    def _document(self) -> Dict[str, Any]:
        """Title, body and front matter for the text format."""
        ...

    def _payload(self) -> Dict[str, Any]:
        if self.output_format == "text":
            return self._document()
        return self._structured()

    def _log(self, message: str) -> None:
        print(message)

    def _emit(self, data: Any) -> None:
        if self.output_path is None:
            self._log(self._formatter.dumps(data).rstrip("\n"))
            return
        if not self._should_write(self.output_path):
            self._log(f"Skipped {self.output_path.name}")
            return
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        self._formatter.write(data, self.output_path)
        self._log(f"Wrote {self.output_path}")

    def _should_write(self, path: Path) -> bool:
        """Check whether *path* should be written, prompting if needed."""
        if not path.exists() or self.force:
            return True
        while True:
            try:
                answer = input(f"Overwrite existing {path.name}? [Yes/No] ")
            except EOFError as exc:
                print()
                raise ConfigError(
                    f"Cannot confirm overwriting {path}: no input available. "
                    "Use --force to overwrite."
                ) from exc
            answer = answer.strip().lower()
            if answer in ("y", "yes"):
                return True
            if answer in ("n", "no"):
                return False
