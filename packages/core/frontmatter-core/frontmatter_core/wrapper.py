"""Comment wrapper configuration.

A :class:`WrapperConfig` describes how front matter is hidden inside a
host document's native comment syntax.  Exactly one of four shapes is
allowed:

===================  ====================================  ==================
Mode                 Fields set                            Example host
===================  ====================================  ==================
``NONE``             *(none)*                              Markdown
``LINE``             ``comment``                           CoffeeScript, Sass
``INDENTED_BLOCK``   ``start_comment``                     Slim, Haml
``DELIMITED_BLOCK``  ``start_comment``, ``end_comment``    HTML, Liquid
===================  ====================================  ==================

Any other combination raises :class:`~frontmatter_core.InvalidConfigError`
at construction time, so an invalid configuration never reaches the
parser.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from frontmatter_core.exceptions import InvalidConfigError


class WrapperMode(Enum):
    """How the front matter block is wrapped."""

    NONE = "none"
    LINE = "line"
    INDENTED_BLOCK = "indented_block"
    DELIMITED_BLOCK = "delimited_block"


@dataclass(frozen=True)
class WrapperConfig:
    """Immutable set of comment delimiters wrapping the front matter.

    Args:
        comment: Single-line comment prefix (e.g. ``"#"``).  Every line
            of the front matter block starts with it.
        start_comment: Opening marker of a multiline comment
            (e.g. ``"<!--"``).
        end_comment: Closing marker of a multiline comment
            (e.g. ``"-->"``).  When omitted, a *start_comment* block is
            closed by returning to the marker's indentation.

    Raises:
        InvalidConfigError: If *comment* and *start_comment* are both
            set, if *end_comment* is set without *start_comment*, or if
            any delimiter is an empty or blank string.

    Example::

        html = WrapperConfig(start_comment="<!--", end_comment="-->")
        result = parse(text, html)
    """

    comment: str | None = None
    start_comment: str | None = None
    end_comment: str | None = None

    def __post_init__(self) -> None:
        for field_name in ("comment", "start_comment", "end_comment"):
            value = getattr(self, field_name)
            if value is not None and (not isinstance(value, str) or not value.strip()):
                raise InvalidConfigError(f"{field_name} must be a non-blank string, got {value!r}")
        if self.comment is not None and self.start_comment is not None:
            raise InvalidConfigError(
                "comment and start_comment are mutually exclusive -- "
                "use comment for single-line comments or start_comment for multiline ones"
            )
        if self.end_comment is not None and self.start_comment is None:
            raise InvalidConfigError("end_comment requires start_comment")

    @property
    def mode(self) -> WrapperMode:
        """Return the wrapper shape implied by the fields that are set."""
        if self.comment is not None:
            return WrapperMode.LINE
        if self.start_comment is None:
            return WrapperMode.NONE
        if self.end_comment is None:
            return WrapperMode.INDENTED_BLOCK
        return WrapperMode.DELIMITED_BLOCK
