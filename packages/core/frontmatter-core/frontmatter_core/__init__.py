"""Core front matter parsing.

This package extracts the metadata block ("front matter") at the start
of a text document, including front matter hidden inside the host
format's comment syntax:

* :func:`parse` -- split a document into front matter and content.
* :class:`ParseResult` -- the ``(front_matter, content)`` pair.
* :class:`WrapperConfig` -- comment delimiters wrapping the front matter.
* :class:`Convention` -- built-in syntax tags (``slim``, ``html``, ...).
* :class:`DelimiterResolver` -- maps tags and file extensions to
  wrapper configs; :func:`resolve` and :func:`resolve_by_extension`
  use the built-in :data:`DEFAULT_RESOLVER`.
* :func:`decode_yaml` -- the default front matter decoder.
* :class:`FrontMatterError` -- base class for all library exceptions.

Install::

    pip install frontmatter-sdk
"""

from frontmatter_core.conventions import (
    DEFAULT_RESOLVER,
    DEFAULT_TABLE,
    Convention,
    ConventionTable,
    DelimiterResolver,
    resolve,
    resolve_by_extension,
)
from frontmatter_core.decoding import Decoder, decode_yaml
from frontmatter_core.exceptions import (
    DocumentTooLargeError,
    FrontMatterError,
    InvalidConfigError,
    MalformedFrontMatterError,
    UnknownConventionError,
)
from frontmatter_core.parsing import MARKER, ParseResult, parse
from frontmatter_core.wrapper import WrapperConfig, WrapperMode

__all__ = [
    "DEFAULT_RESOLVER",
    "DEFAULT_TABLE",
    "MARKER",
    "Convention",
    "ConventionTable",
    "Decoder",
    "DelimiterResolver",
    "DocumentTooLargeError",
    "FrontMatterError",
    "InvalidConfigError",
    "MalformedFrontMatterError",
    "ParseResult",
    "UnknownConventionError",
    "WrapperConfig",
    "WrapperMode",
    "decode_yaml",
    "parse",
    "resolve",
    "resolve_by_extension",
]
