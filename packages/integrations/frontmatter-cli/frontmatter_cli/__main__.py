"""Print the front matter and content of a document.

Usage::

    python -m frontmatter_cli page.slim
    python -m frontmatter_cli page.txt --syntax html
    python -m frontmatter_cli script.rb --comment "#" --part front-matter
    python -m frontmatter_cli page.erb --config frontmatter.yaml --output yaml

The comment convention is taken from ``--comment`` / ``--start-comment``
/ ``--end-comment`` or ``--syntax`` when given, otherwise detected from
the file extension (disable with ``--no-autodetect``).

The optional config file is a JSON or YAML document conforming to
:class:`~frontmatter_cli.config.ParserConfig`.

Exit status is ``0`` on success, ``1`` when the document or config
cannot be parsed, and ``2`` on usage errors.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, NoReturn

import yaml
from pydantic import ValidationError

from frontmatter_core import FrontMatterError, ParseResult, WrapperConfig

PARTS = ("all", "front-matter", "content")


def main() -> None:
    """Parse CLI arguments, parse the document, and print the result."""
    parser = argparse.ArgumentParser(
        prog="frontmatter_cli",
        description="Extract the front matter and content of a document.",
    )
    parser.add_argument("path", type=Path, help="Document to parse.")
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to a JSON or YAML configuration file.",
    )
    wrapper = parser.add_mutually_exclusive_group()
    wrapper.add_argument("--syntax", help="Convention tag, e.g. slim, html, scss.")
    wrapper.add_argument("--comment", help="Single-line comment prefix, e.g. '#'.")
    wrapper.add_argument("--start-comment", help="Multiline comment opening marker.")
    parser.add_argument(
        "--end-comment",
        help="Multiline comment closing marker (requires --start-comment).",
    )
    parser.add_argument(
        "--no-autodetect",
        action="store_true",
        help="Do not detect the convention from the file extension.",
    )
    parser.add_argument(
        "--output",
        choices=["json", "yaml"],
        help="Output format (default: from config, else json).",
    )
    parser.add_argument(
        "--part",
        default="all",
        choices=PARTS,
        help="What to print (default: all).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    from frontmatter_cli.config import ParserConfig, build_resolver, load_config
    from frontmatter_fs import parse_file

    try:
        # ------------------------------------------------------------------
        # Load config file
        # ------------------------------------------------------------------
        config = ParserConfig()
        if args.config is not None:
            if not args.config.is_file():
                _fail(f"config file not found: {args.config}")
            config = load_config(args.config)
        resolver = build_resolver(config)

        # ------------------------------------------------------------------
        # Parse
        # ------------------------------------------------------------------
        explicit = None
        if args.comment or args.start_comment or args.end_comment:
            explicit = WrapperConfig(
                comment=args.comment,
                start_comment=args.start_comment,
                end_comment=args.end_comment,
            )
        result = parse_file(
            args.path,
            explicit,
            syntax=args.syntax,
            autodetect=not args.no_autodetect,
            resolver=resolver,
            max_file_bytes=config.max_file_bytes,
        )
    except (
        FrontMatterError,
        ValidationError,
        json.JSONDecodeError,
        UnicodeDecodeError,
        yaml.YAMLError,
        OSError,
    ) as exc:
        _fail(str(exc))

    sys.stdout.write(render(result, part=args.part, output=args.output or config.output))


def render(result: ParseResult, *, part: str = "all", output: str = "json") -> str:
    """Format a parse result for printing.

    ``content`` is written verbatim; the other parts are serialized as
    JSON or YAML.
    """
    if part == "content":
        return result.content
    data: Any = result.front_matter
    if part == "all":
        data = {"front_matter": result.front_matter, "content": result.content}
    if output == "yaml":
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    return json.dumps(data, indent=2, ensure_ascii=False, default=str) + "\n"


def _fail(message: str) -> NoReturn:
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)


if __name__ == "__main__":
    main()
