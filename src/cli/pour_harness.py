# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Command-line harness that pours a stub struct from a Go interface."""

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import TextIO

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text

from stubpour import PourError, PourOptions, PourResult, pour, render_go
from stubpour.render import render_method

logger = logging.getLogger(__name__)

TABLE_COLUMN_RATIOS: dict[str, int] = {
    "method": 2,
    "params": 3,
    "results": 2,
    "stub": 4,
}


def configure_logging(level: int = logging.INFO) -> None:
    """Configure application logging with Rich handler.

    Args:
        level: Logging severity threshold.
    """
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def build_parser() -> argparse.ArgumentParser:
    """Build CLI parser."""
    parser = argparse.ArgumentParser(prog="stubpour")
    parser.add_argument("--input", required=True, help="Go source file path.")
    parser.add_argument(
        "--interface", required=True, help="Name of the interface to implement."
    )
    parser.add_argument(
        "--struct", required=True, help="Name of the struct to generate."
    )
    parser.add_argument(
        "--preserve-param-names",
        action="store_true",
        help="Keep parameter names from the interface where present.",
    )
    parser.add_argument(
        "--package",
        required=False,
        help="Package clause for Go output; defaults to the input package.",
    )
    parser.add_argument(
        "--format",
        choices=("go", "table", "json"),
        default="go",
        help="Output format.",
    )
    parser.add_argument(
        "--output",
        required=False,
        help="Optional output file path for go or json formats.",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging."
    )
    return parser


def run(argv: list[str], stdout: TextIO, stderr: TextIO) -> int:
    """Run pour command.

    Args:
        argv: CLI arguments.
        stdout: Standard output stream.
        stderr: Standard error stream.

    Returns:
        Exit code.
    """
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit:
        logger.warning("Argument parsing failed (argv=%s)", argv)
        return 2
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    input_path = Path(args.input)
    try:
        source = input_path.read_bytes()
    except OSError as exc:
        logger.warning("Failed reading input (path=%s error=%s)", input_path, exc)
        stderr.write(f"Failed to read input file: {input_path}\n")
        return 2

    options = PourOptions(preserve_param_names=args.preserve_param_names)
    try:
        result = pour(
            source,
            interface_name=args.interface,
            struct_name=args.struct,
            options=options,
        )
    except PourError as exc:
        logger.warning(
            "Pour failed (path=%s interface=%s error=%s)",
            input_path,
            args.interface,
            exc,
        )
        stderr.write(f"{type(exc).__name__}: {exc}\n")
        return 2

    if args.format == "table":
        _write_table(result=result, stdout=stdout)
        return 0

    if args.format == "json":
        text = json.dumps(asdict(result), indent=2, sort_keys=True) + "\n"
    else:
        text = render_go(result, package=args.package)

    if args.output:
        try:
            _write_file(text=text, output_path=Path(args.output))
        except OSError as exc:
            logger.warning(
                "Failed to write output file (output_path=%s error=%s)",
                args.output,
                exc,
            )
            stderr.write(f"Failed to write output file: {args.output}\n")
            return 2
        return 0

    stdout.write(text)
    return 0


def _write_file(text: str, output_path: Path) -> None:
    """Write generated text to an output file.

    Args:
        text: Generated output.
        output_path: Target file path.

    Raises:
        OSError: If directory creation or file writing fails.
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(text, encoding="utf-8")


def _write_table(result: PourResult, stdout: TextIO) -> None:
    """Write synthesized methods as a table.

    Args:
        result: Pour result to display.
        stdout: Standard output stream.
    """
    console = Console(file=stdout, force_terminal=False, color_system="truecolor")
    console.print(
        f"type {result.struct.name} struct{{}}", markup=False, highlight=False
    )
    table = Table(show_header=True, show_lines=True, expand=True)
    for column, ratio in TABLE_COLUMN_RATIOS.items():
        table.add_column(column, ratio=ratio, overflow="fold")
    for method in result.methods:
        params = ", ".join(
            f"{param.name} {param.type_ref.text}" for param in method.params
        )
        results = ", ".join(res.type_ref.text for res in method.results)
        table.add_row(
            Text(method.name), Text(params), Text(results), Text(render_method(method))
        )
    console.print(table)


def main() -> None:
    """Run stubpour CLI."""
    configure_logging()
    exit_code = run(sys.argv[1:], stdout=sys.stdout, stderr=sys.stderr)
    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
