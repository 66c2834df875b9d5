"""Parse front matter from documents on the local filesystem.

This module reads a document from disk and hands it to
:func:`frontmatter_core.parse`.  The comment convention is chosen in this
order:

1. An explicit :class:`~frontmatter_core.WrapperConfig` (*config*).
2. An explicit convention tag (*syntax*).
3. The file extension, when *autodetect* is true (the default).
4. No wrapper.

File I/O is synchronous; documents are read whole and are capped at
*max_file_bytes* so an unexpectedly large file fails fast instead of
being loaded into memory.
"""

from __future__ import annotations

import logging
from pathlib import Path

from frontmatter_core import (
    DEFAULT_RESOLVER,
    Convention,
    Decoder,
    DelimiterResolver,
    DocumentTooLargeError,
    InvalidConfigError,
    ParseResult,
    WrapperConfig,
    decode_yaml,
    parse,
)

_logger = logging.getLogger(__name__)

#: Default maximum file size in bytes (10 MB).
DEFAULT_MAX_FILE_BYTES: int = 10 * 1024 * 1024


def read_document(
    path: str | Path,
    *,
    encoding: str = "utf-8-sig",
    max_file_bytes: int = DEFAULT_MAX_FILE_BYTES,
) -> str:
    """Read the full text of a document.

    Args:
        path: File to read.
        encoding: Text encoding of the file.  The default accepts UTF-8
            with or without a byte order mark.
        max_file_bytes: Maximum allowed file size in bytes.

    Returns:
        The decoded file contents.

    Raises:
        FileNotFoundError: If *path* does not exist.
        IsADirectoryError: If *path* is a directory.
        DocumentTooLargeError: If the file exceeds *max_file_bytes*.
    """
    path = Path(path)
    if path.is_dir():
        raise IsADirectoryError(f"Expected a file, got a directory: {path}")
    size = path.stat().st_size
    if size > max_file_bytes:
        raise DocumentTooLargeError(
            f"{path} exceeds maximum size ({size} > {max_file_bytes} bytes)"
        )
    return path.read_text(encoding=encoding)


def parse_file(
    path: str | Path,
    config: WrapperConfig | None = None,
    *,
    syntax: Convention | str | None = None,
    autodetect: bool = True,
    resolver: DelimiterResolver = DEFAULT_RESOLVER,
    decoder: Decoder = decode_yaml,
    encoding: str = "utf-8-sig",
    max_file_bytes: int = DEFAULT_MAX_FILE_BYTES,
) -> ParseResult:
    """Read *path* and split it into front matter and content.

    Args:
        path: File to parse.
        config: Explicit comment delimiters.  Mutually exclusive with
            *syntax*.
        syntax: Explicit convention tag.
        autodetect: When neither *config* nor *syntax* is given, pick
            the convention from the file extension.  When false, the
            document is parsed without a wrapper.
        resolver: Resolves *syntax* and the file extension.
        decoder: Turns the captured front matter into a mapping.
        encoding: Text encoding of the file.  The default accepts UTF-8
            with or without a byte order mark.
        max_file_bytes: Maximum allowed file size in bytes.

    Returns:
        The :class:`~frontmatter_core.ParseResult` for the file.

    Raises:
        InvalidConfigError: If both *config* and *syntax* are given.
        UnknownConventionError: If *syntax* or the detected extension is
            unknown.
        DocumentTooLargeError: If the file exceeds *max_file_bytes*.
        MalformedFrontMatterError: If the front matter is not closed.

    Example::

        meta, body = parse_file("layouts/index.slim")
        print(meta["title"])
    """
    if config is not None and syntax is not None:
        raise InvalidConfigError("Pass either config or syntax, not both")
    path = Path(path)
    if config is None and syntax is None and autodetect:
        syntax = resolver.resolve_by_extension(path.suffix)
        _logger.debug("Using convention %r for %s", str(syntax), path)
    text = read_document(path, encoding=encoding, max_file_bytes=max_file_bytes)
    return parse(text, config, syntax=syntax, resolver=resolver, decoder=decoder)
