from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Tuple

from prtemplate_cli import __version__
from prtemplate_cli.checker import check_compliance
from prtemplate_cli.client import STDIN_SOURCE, TemplateClient, is_url
from prtemplate_cli.config import CONFIG_FILENAME, config_exists, read_config, write_config
from prtemplate_cli.default_template import DEFAULT_TEMPLATE, DEFAULT_TEMPLATE_NAME
from prtemplate_cli.exceptions import ComplianceError, ConfigError
from prtemplate_cli.exporters.report import ReportExporter
from prtemplate_cli.exporters.schema import SchemaExporter
from prtemplate_cli.models.config import OUTPUT_FORMATS, AppConfig
from prtemplate_cli.models.schema import TemplateSchema
from prtemplate_cli.schema import extract_schema


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prtemplate-cli",
        description="Check pull request descriptions against a Markdown PR template.",
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--init",
        metavar="TEMPLATE",
        help="Save the template (file path or https:// URL) to .prtemplate-cli.ini.",
    )
    group.add_argument(
        "--check",
        metavar="FILE",
        help="Check a PR description file ('-' reads from stdin).",
    )
    group.add_argument(
        "--show-schema", action="store_true",
        help="List the template sections and whether they are mandatory.",
    )
    parser.add_argument(
        "--template",
        metavar="PATH_OR_URL",
        help="Template to check against. Overrides the configured template.",
    )
    parser.add_argument(
        "--format", choices=OUTPUT_FORMATS, default=None,
        help="Output format (default: text).",
    )
    parser.add_argument(
        "--strict", action="store_true",
        help="Treat sections left identical to the template's prompt text as empty.",
    )
    parser.add_argument(
        "--advisory", action="store_true",
        help="Print the report but exit successfully when the description is not compliant.",
    )
    parser.add_argument(
        "--output", metavar="PATH", type=Path,
        help="Write the result to PATH instead of stdout.",
    )
    parser.add_argument(
        "--force", action="store_true",
        help="Overwrite the output file without confirmation.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    return parser


def _run_init(template: str) -> None:
    if is_url(template):
        if not template.startswith("https://"):
            raise ConfigError("Template URL must start with https://")
    elif not Path(template).is_file():
        raise ConfigError(f"Template file not found: {template}")

    write_config(Path.cwd(), AppConfig(template=template))
    print(f"Configuration saved to {CONFIG_FILENAME}")


def _load_config() -> Optional[AppConfig]:
    cwd = Path.cwd()
    if not config_exists(cwd):
        return None
    return read_config(cwd)


def _load_schema(
    client: TemplateClient,
    args: argparse.Namespace,
    config: Optional[AppConfig],
) -> Tuple[TemplateSchema, str]:
    source = args.template or (config.template if config else None)
    if source is None:
        return extract_schema(DEFAULT_TEMPLATE), DEFAULT_TEMPLATE_NAME

    schema = extract_schema(client.load(source))
    if not len(schema):
        print(f"Warning: {source} defines no sections.")
    return schema, source


def _output_format(args: argparse.Namespace, config: Optional[AppConfig]) -> str:
    if args.format:
        return args.format
    return config.format if config else "text"


def _run_check(args: argparse.Namespace) -> None:
    if args.check == STDIN_SOURCE and args.template == STDIN_SOURCE:
        raise ConfigError("The template and the description cannot both be read from stdin.")

    config = _load_config()
    client = TemplateClient()
    schema, _ = _load_schema(client, args, config)
    strict = args.strict or (config.strict if config else False)

    report = check_compliance(schema, client.load(args.check), strict=strict)
    ReportExporter(
        report,
        _output_format(args, config),
        args.output,
        force=args.force,
    ).export()

    if not report.is_compliant and not args.advisory:
        raise ComplianceError("PR description does not follow the template.")


def _run_show_schema(args: argparse.Namespace) -> None:
    config = _load_config()
    schema, source = _load_schema(TemplateClient(), args, config)
    SchemaExporter(
        schema,
        _output_format(args, config),
        args.output,
        force=args.force,
        source=source,
    ).export()


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    if args.init:
        _run_init(args.init)
    elif args.check:
        _run_check(args)
    elif args.show_schema:
        _run_show_schema(args)
    else:
        parser.print_help()
