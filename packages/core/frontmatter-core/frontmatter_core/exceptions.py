"""Exception hierarchy for front matter parsing.

All exceptions raised by :mod:`frontmatter_core` (and by the file reader
and command line packages built on it) inherit from
:class:`FrontMatterError`, allowing callers to catch the entire family
with a single ``except`` clause.

* :class:`InvalidConfigError` -- conflicting or incomplete comment
  delimiters were supplied.
* :class:`UnknownConventionError` -- a convention tag or file extension
  is not in the resolver's table.
* :class:`MalformedFrontMatterError` -- an opening ``---`` marker was
  found but the block is never properly closed.
* :class:`DocumentTooLargeError` -- a file exceeds the reader's size cap.

Errors raised by the structured-data decoder (for the default decoder,
:class:`yaml.YAMLError`) are **not** wrapped; they propagate unchanged.
"""


class FrontMatterError(Exception):
    """Base exception for all front matter library errors."""


class InvalidConfigError(FrontMatterError, ValueError):
    """The comment delimiter combination is not valid.

    Raised when both ``comment`` and ``start_comment`` are given, when
    ``end_comment`` is given without ``start_comment``, or when an
    explicit wrapper and a named syntax are passed together.

    Example::

        try:
            WrapperConfig(comment="#", start_comment="/")
        except InvalidConfigError as exc:
            print(exc)
    """


class UnknownConventionError(FrontMatterError, LookupError):
    """A convention tag or file extension is not recognized.

    Raised by :meth:`DelimiterResolver.resolve
    <frontmatter_core.DelimiterResolver.resolve>` and
    :meth:`DelimiterResolver.resolve_by_extension
    <frontmatter_core.DelimiterResolver.resolve_by_extension>`.
    """


class MalformedFrontMatterError(FrontMatterError, ValueError):
    """The front matter block is opened but not properly closed.

    Also raised when the decoded front matter is not a mapping.
    """


class DocumentTooLargeError(FrontMatterError, ValueError):
    """A document on disk exceeds the configured maximum size."""
