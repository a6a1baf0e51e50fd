from __future__ import annotations

from typing import Any

import yaml

from prtemplate_cli.formatters.base import BaseFormatter


class YamlFormatter(BaseFormatter):
    def dumps(self, data: Any) -> str:
        return yaml.dump(
            data,
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
        )

    def file_extension(self) -> str:
        return ".yaml"
