"""Front matter extraction engine.

:func:`parse` splits a document into its front matter mapping and its
remaining content.  The front matter is the block delimited by two
``---`` marker lines at the start of the document, optionally hidden
inside the host format's comment syntax (see
:class:`~frontmatter_core.WrapperConfig`)::

    <!--
    ---
    title: hello
    ---
    -->
    Content

The document is scanned once, line by line, by a small state machine::

    SEEK_OPEN_WRAPPER -> SEEK_OPEN_MARKER -> IN_FRONT_MATTER -> IN_WRAPPER -> DONE

``SEEK_OPEN_WRAPPER`` and ``IN_WRAPPER`` only apply to multiline comment
wrappers.  Line terminators are preserved, so the content is returned
byte-for-byte as it appears in the input.
"""

from __future__ import annotations

import logging
import re
from enum import Enum, auto
from typing import Any, NamedTuple

from frontmatter_core.conventions import DEFAULT_RESOLVER, Convention, DelimiterResolver
from frontmatter_core.decoding import Decoder, decode_yaml
from frontmatter_core.exceptions import InvalidConfigError, MalformedFrontMatterError
from frontmatter_core.wrapper import WrapperConfig, WrapperMode

_logger = logging.getLogger(__name__)

#: Trimmed text of a line that opens or closes the front matter block.
MARKER = "---"

_NO_WRAPPER = WrapperConfig()
_BLOCK_MODES = frozenset({WrapperMode.INDENTED_BLOCK, WrapperMode.DELIMITED_BLOCK})


class ParseResult(NamedTuple):
    """Outcome of :func:`parse`.

    Attributes:
        front_matter: Decoded metadata.  ``{}`` when the document has no
            front matter or an empty block.
        content: Everything after the front matter.  ``""`` when the
            front matter consumes the whole document.
    """

    front_matter: dict[str, Any]
    content: str


class _State(Enum):
    SEEK_OPEN_WRAPPER = auto()
    SEEK_OPEN_MARKER = auto()
    IN_FRONT_MATTER = auto()
    IN_WRAPPER = auto()
    DONE = auto()


def parse(
    text: str,
    config: WrapperConfig | None = None,
    *,
    syntax: Convention | str | None = None,
    resolver: DelimiterResolver = DEFAULT_RESOLVER,
    decoder: Decoder = decode_yaml,
) -> ParseResult:
    """Split *text* into front matter and content.

    Args:
        text: The full document.
        config: Comment delimiters wrapping the front matter.  Mutually
            exclusive with *syntax*.  Omit both for bare front matter.
        syntax: Convention tag resolved through *resolver*
            (e.g. ``"slim"``).
        resolver: Resolver used for *syntax*.
        decoder: Turns the captured block into a mapping.  Defaults to
            :func:`~frontmatter_core.decode_yaml`.

    Returns:
        A :class:`ParseResult`.  If the document does not open with a
        ``---`` marker (inside the wrapper, when one is configured) the
        result is ``({}, text)``.

    Raises:
        InvalidConfigError: If both *config* and *syntax* are given.
        UnknownConventionError: If *syntax* is not known to *resolver*.
        MalformedFrontMatterError: If the opening marker is never
            closed, or the comment wrapper closes before the block does
            or never closes after it.
        yaml.YAMLError: If the default decoder rejects the block.

    Example::

        meta, body = parse("---\\ntitle: hello\\n---\\nContent")
        assert meta == {"title": "hello"} and body == "Content"
    """
    if config is not None and syntax is not None:
        raise InvalidConfigError("Pass either config or syntax, not both")
    if syntax is not None:
        config = resolver.resolve(syntax)
    elif config is None:
        config = _NO_WRAPPER
    elif not isinstance(config, WrapperConfig):
        raise TypeError(f"config must be a WrapperConfig, got {type(config).__name__}")

    lines = _split_lines(text)
    scanned = _Scanner(config).scan(lines)
    if scanned is None:
        _logger.debug("No front matter found (%s wrapper)", config.mode.value)
        return ParseResult({}, text)

    region, content_start = scanned
    block = _dedent(region)
    front_matter = decoder(block) if block.strip() else {}
    _logger.debug(
        "Parsed front matter: %d key(s), content starts at line %d",
        len(front_matter),
        content_start + 1,
    )
    return ParseResult(front_matter, "".join(lines[content_start:]))


class _Scanner:
    """One left-to-right pass over a document's lines.

    A scanner is created per :func:`parse` call; the base indentation of
    an indented block is the only state it records.
    """

    def __init__(self, config: WrapperConfig) -> None:
        self._config = config
        self._mode = config.mode
        self._base_depth = 0
        self._prefix = (
            re.compile(r"[ \t]*" + re.escape(config.comment))
            if config.comment is not None
            else None
        )

    def scan(self, lines: list[str]) -> tuple[list[str], int] | None:
        """Locate the front matter block.

        Returns:
            ``(region, content_start)`` where *region* holds the unwrapped
            lines between the markers and *content_start* is the index of
            the first content line, or ``None`` when the document does
            not open with front matter.
        """
        state = _State.SEEK_OPEN_WRAPPER if self._mode in _BLOCK_MODES else _State.SEEK_OPEN_MARKER
        region: list[str] = []
        content_start = len(lines)

        for index, line in enumerate(lines):
            blank = not line.strip()

            if state is _State.SEEK_OPEN_WRAPPER:
                if blank:
                    continue
                if line.strip() != self._config.start_comment:
                    return None
                self._base_depth = _depth(line)
                state = _State.SEEK_OPEN_MARKER

            elif state is _State.SEEK_OPEN_MARKER:
                if blank:
                    continue
                inner = self._unwrap(line)
                if inner is None or not _is_marker(inner):
                    return None
                state = _State.IN_FRONT_MATTER

            elif state is _State.IN_FRONT_MATTER:
                if blank:
                    region.append(line)
                    continue
                inner = self._unwrap(line)
                if inner is None:
                    raise MalformedFrontMatterError(
                        f"Comment wrapper ends at line {index + 1} "
                        f"before the front matter is closed with {MARKER!r}"
                    )
                if not _is_marker(inner):
                    region.append(inner)
                elif self._mode in _BLOCK_MODES:
                    state = _State.IN_WRAPPER
                else:
                    content_start = index + 1
                    state = _State.DONE
                    break

            elif state is _State.IN_WRAPPER:
                if self._mode is WrapperMode.DELIMITED_BLOCK:
                    if line.strip() == self._config.end_comment:
                        content_start = index + 1
                        state = _State.DONE
                        break
                elif not blank and _depth(line) <= self._base_depth:
                    # Dedented line closes the comment and is itself content.
                    content_start = index
                    state = _State.DONE
                    break

        if state is _State.DONE:
            return region, content_start
        if state in (_State.SEEK_OPEN_WRAPPER, _State.SEEK_OPEN_MARKER):
            return None
        if state is _State.IN_FRONT_MATTER:
            raise MalformedFrontMatterError(
                f"Front matter opened with {MARKER!r} is never closed"
            )
        raise MalformedFrontMatterError(
            f"Comment opened with {self._config.start_comment!r} is never closed"
        )

    def _unwrap(self, line: str) -> str | None:
        """Return *line* without its comment wrapper, or ``None`` if it is outside it."""
        if self._prefix is not None:
            match = self._prefix.match(line)
            return line[match.end() :] if match else None
        if self._mode is WrapperMode.INDENTED_BLOCK:
            return line if _depth(line) > self._base_depth else None
        if self._mode is WrapperMode.DELIMITED_BLOCK and line.strip() == self._config.end_comment:
            return None
        return line


def _depth(line: str) -> int:
    return len(line) - len(line.lstrip(" \t"))


def _is_marker(line: str) -> bool:
    return line.strip() == MARKER


def _split_lines(text: str) -> list[str]:
    """Split *text* after each ``\\n``, keeping the terminators."""
    *lines, tail = text.split("\n")
    return [line + "\n" for line in lines] + ([tail] if tail else [])


def _dedent(region: list[str]) -> str:
    """Strip the margin shared by the non-blank lines of *region*.

    Whitespace-only lines lose at most that margin, so block scalars
    keep their blank lines unchanged relative to the text around them.
    """
    margin = min((_depth(line) for line in region if line.strip()), default=0)
    return "".join(line[min(margin, _depth(line)) :] for line in region)
