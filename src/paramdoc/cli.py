"""Command-line interface for paramdoc."""

from __future__ import annotations

import argparse
import json
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from paramdoc.ast import Param
from paramdoc.docblock import ParamOccurrence
from paramdoc.errors import TagError
from paramdoc.typeexpr import Context


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path
    output_file: Path | None
    namespace: str
    aliases: dict[str, str]
    json: bool
    debug: bool

    @property
    def context(self) -> Context:
        return Context(self.namespace, self.aliases)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="paramdoc",
        description="Extract and parse @param tags from documentation comments",
    )
    p.add_argument("input", help="Source file to scan")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "-n",
        "--namespace",
        default=None,
        metavar="NAMESPACE",
        help="Namespace for resolving relative class names",
    )
    p.add_argument(
        "-a",
        "--alias",
        action="append",
        default=[],
        metavar="NAME=FQSEN",
        help="Class alias for type resolution (repeatable)",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover paramdoc.toml)",
    )
    p.add_argument("--json", action="store_true", help="Emit tags as a JSON list")
    p.add_argument("--debug", action="store_true", help="Dump parsed tags to stderr")
    return p


def parse_alias_arg(s: str) -> tuple[str, str]:
    """Parse a NAME=FQSEN string into (name, fqsen)."""
    if "=" not in s:
        raise argparse.ArgumentTypeError(f"invalid alias format (expected NAME=FQSEN): {s}")
    name, _, target = s.partition("=")
    if not name or not target:
        raise argparse.ArgumentTypeError(f"invalid alias format (expected NAME=FQSEN): {s}")
    return name, target


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "paramdoc.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: config file < CLI flags.
    """
    input_file = Path(args.input)
    input_dir = input_file.parent
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)

    # Namespace: config < CLI
    namespace = ""
    cfg_context = config.get("context")
    if isinstance(cfg_context, dict):
        cfg_namespace = cfg_context.get("namespace")
        if isinstance(cfg_namespace, str):
            namespace = cfg_namespace
    if args.namespace is not None:
        namespace = args.namespace

    # Aliases: config < CLI
    aliases: dict[str, str] = {}
    cfg_aliases = config.get("aliases")
    if isinstance(cfg_aliases, dict):
        for k, v in cfg_aliases.items():
            aliases[str(k)] = str(v)
    for raw in args.alias:
        name, target = parse_alias_arg(raw)
        aliases[name] = target

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        namespace=namespace,
        aliases=aliases,
        json=args.json,
        debug=args.debug,
    )


def scan_file(options: CliOptions) -> list[ParamOccurrence]:
    """Read a source file and parse every @param tag in it."""
    from paramdoc.debug import dump_param
    from paramdoc.description import DescriptionFactory
    from paramdoc.docblock import collect_params
    from paramdoc.resolver import TypeResolver

    source = options.input_file.read_text(encoding="utf-8")
    found = collect_params(source, TypeResolver(), DescriptionFactory(), options.context)

    if options.debug:
        for occ in found:
            dump_param(occ.param)

    return found


def _type_text(param: Param) -> str | None:
    return None if param.declared_type is None else str(param.declared_type)


def format_occurrences(found: list[ParamOccurrence], as_json: bool) -> str:
    """Format parsed tags as ``LINE:COL: TAG`` lines or a JSON list."""
    if as_json:
        records = [
            {
                "line": occ.span.start.line,
                "column": occ.span.start.column,
                "name": occ.param.variable_name,
                "type": _type_text(occ.param),
                "variadic": occ.param.is_variadic,
                "description": str(occ.param.description or ""),
            }
            for occ in found
        ]
        return json.dumps(records, indent=2) + "\n"

    lines = [f"{occ.span.start.line}:{occ.span.start.column}: {occ.param}" for occ in found]
    return "".join(line + "\n" for line in lines)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        found = scan_file(options)
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except TagError as exc:
        print(exc.format(str(options.input_file)), file=sys.stderr)
        return 1

    output = format_occurrences(found, options.json)
    if options.output_file:
        options.output_file.write_text(output, encoding="utf-8")
    else:
        sys.stdout.write(output)

    return 0
