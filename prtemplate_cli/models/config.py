from __future__ import annotations

from dataclasses import dataclass

from prtemplate_cli.exceptions import ConfigError

OUTPUT_FORMATS = ("text", "json", "yaml")


@dataclass
class AppConfig:
    template: str
    format: str = "text"
    strict: bool = False

    def __post_init__(self) -> None:
        self.template = self.template.strip()
        if not self.template:
            raise ConfigError("Template source cannot be empty.")
        self.format = self.format.strip().lower()
        if self.format not in OUTPUT_FORMATS:
            raise ConfigError(
                f"Unknown output format '{self.format}'. "
                "Expected one of: " + ", ".join(OUTPUT_FORMATS) + "."
            )
