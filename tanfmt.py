"""CLI for formatting tan source files."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterable

from scripts.tanfmt import Formatter, FormatterConfig, Lexer, Parser, render


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Format tan source files into their canonical indented layout."
    )
    parser.add_argument(
        "input",
        help="Path to a .tan file or a directory of .tan files.",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        default=None,
        help="Directory where formatted files should be written (defaults to stdout).",
    )
    parser.add_argument(
        "--indent-size",
        type=int,
        default=4,
        help="Spaces per nesting level (default: 4).",
    )
    parser.add_argument(
        "--layout",
        choices=["compat", "canonical"],
        default="compat",
        help="Delimiter layout (default: compat).",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=None,
        help="Abort when lists nest deeper than this (default: unlimited).",
    )
    parser.add_argument(
        "--compact",
        action="store_true",
        help="Print each top-level expression on a single line instead.",
    )
    return parser.parse_args(argv)


def collect_inputs(path: Path) -> list[Path]:
    if path.is_dir():
        files = sorted(p for p in path.glob("*.tan") if p.is_file())
        if not files:
            raise FileNotFoundError(f"No .tan files found in directory: {path}")
        return files
    if path.is_file():
        return [path]
    raise FileNotFoundError(f"Input path does not exist: {path}")


def format_source(text: str, config: FormatterConfig) -> str:
    tokens = Lexer(text, config={"enable_logger": config.get("enable_logger", True)}).tokens
    return Formatter(tokens, config=config).format()


def compact_source(text: str) -> str:
    tokens = Lexer(text).tokens
    exprs = Parser(tokens).exprs
    return "".join(render(expr) + "\n" for expr in exprs)


def generate(files: Iterable[Path], output_dir: Path | None, config: FormatterConfig, compact: bool) -> None:
    if output_dir is not None:
        output_dir.mkdir(parents=True, exist_ok=True)
    for source in files:
        text = source.read_text(encoding="utf-8")
        try:
            result = compact_source(text) if compact else format_source(text, config)
        except Exception as exc:
            raise RuntimeError(f"Failed to format {source}") from exc
        if output_dir is None:
            sys.stdout.write(result)
            continue
        destination = output_dir / source.name
        destination.write_text(result, encoding="utf-8")
        try:
            display_path = destination.relative_to(Path.cwd())
        except ValueError:
            display_path = destination
        print(f"Wrote {display_path}")


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    files = collect_inputs(Path(args.input))
    output_dir = Path(args.output_dir) if args.output_dir else None
    config: FormatterConfig = {
        "indent_size": args.indent_size,
        "layout": args.layout,
        "max_depth": args.max_depth,
    }
    generate(files, output_dir, config=config, compact=args.compact)


if __name__ == "__main__":
    main()
