"""Parse front matter with a custom comment convention.

This script shows how to extend the built-in convention table with a
syntax the library does not know about (ERB templates here) and parse a
document with it.

Requirements:
    pip install frontmatter-sdk

Usage:
    python examples/core/custom_conventions.py
"""

from frontmatter_core import DEFAULT_TABLE, DelimiterResolver, WrapperConfig, parse

TEMPLATE = """\
<%#
---
title: Welcome
layout: default
---
%>
<h1><%= title %></h1>
"""


def main() -> None:
    # ------------------------------------------------------------------
    # 1. Extend the built-in table with an "erb" convention
    # ------------------------------------------------------------------
    table = DEFAULT_TABLE.extend(
        conventions={"erb": WrapperConfig(start_comment="<%#", end_comment="%>")},
        extensions={"erb": "erb", "rhtml": "erb"},
    )
    resolver = DelimiterResolver(table)

    # ------------------------------------------------------------------
    # 2. Resolve the convention from the file extension and parse
    # ------------------------------------------------------------------
    syntax = resolver.resolve_by_extension(".erb")
    result = parse(TEMPLATE, syntax=syntax, resolver=resolver)

    print(f"Front matter: {result.front_matter}")
    print("Content:")
    print(result.content, end="")


if __name__ == "__main__":
    main()
