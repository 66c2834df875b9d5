"""Command line interface for front matter parsing.

Run ``python -m frontmatter_cli FILE`` to print a document's front
matter and content as JSON or YAML.  See :mod:`frontmatter_cli.__main__`
for the available options and :class:`~frontmatter_cli.config.ParserConfig`
for the config file schema.

Install::

    pip install frontmatter-sdk
"""

from frontmatter_cli.config import ParserConfig, WrapperSettings, build_resolver, load_config

__all__ = [
    "ParserConfig",
    "WrapperSettings",
    "build_resolver",
    "load_config",
]
