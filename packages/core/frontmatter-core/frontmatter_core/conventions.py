"""Named comment conventions and the delimiter resolver.

A *convention* is a closed-set tag naming a host document syntax (``slim``,
``html``, ``scss``, ...).  Each tag maps to exactly one
:class:`~frontmatter_core.WrapperConfig`, and each known file extension
maps to exactly one tag.

Both tables live in an immutable :class:`ConventionTable`, which is handed
to a :class:`DelimiterResolver` at construction.  :data:`DEFAULT_RESOLVER`
is built once at import time from :data:`DEFAULT_TABLE`; the module-level
:func:`resolve` and :func:`resolve_by_extension` delegate to it.

Example::

    from frontmatter_core import resolve, resolve_by_extension

    tag = resolve_by_extension("index.html".rsplit(".", 1)[-1])
    config = resolve(tag)  # WrapperConfig(start_comment="<!--", end_comment="-->")
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType

from frontmatter_core.exceptions import UnknownConventionError
from frontmatter_core.wrapper import WrapperConfig

_logger = logging.getLogger(__name__)


class Convention(str, Enum):
    """Built-in convention tags.

    Members compare equal to their string value, so ``"slim"`` and
    ``Convention.SLIM`` are interchangeable as lookup keys.
    """

    SLIM = "slim"
    COFFEE = "coffee"
    HTML = "html"
    HAML = "haml"
    LIQUID = "liquid"
    SASS = "sass"
    SCSS = "scss"
    MD = "md"

    def __str__(self) -> str:
        return self.value


class ConventionTable:
    """Immutable pair of lookup tables: tag -> wrapper, extension -> tag.

    Keys are normalized to lowercase; extensions are stored without a
    leading dot.  Every extension must point at a known tag.

    Args:
        conventions: Mapping of convention tag to its wrapper.
        extensions: Mapping of file extension to convention tag.

    Raises:
        UnknownConventionError: If an extension maps to a tag that is
            not in *conventions*.
    """

    def __init__(
        self,
        conventions: Mapping[str, WrapperConfig],
        extensions: Mapping[str, str],
    ) -> None:
        normalized = {_normalize_tag(tag): config for tag, config in conventions.items()}
        # Keep Convention members as values so callers get the enum back.
        tags: dict[str, str] = {}
        for tag in conventions:
            key = _normalize_tag(tag)
            tags[key] = Convention(key) if key in _BUILTIN_TAGS else key
        by_extension: dict[str, str] = {}
        for extension, tag in extensions.items():
            key = _normalize_tag(tag)
            if key not in normalized:
                raise UnknownConventionError(
                    f"Extension {extension!r} maps to unknown convention {tag!r}"
                )
            by_extension[_normalize_extension(extension)] = tags[key]
        self._conventions: Mapping[str, WrapperConfig] = MappingProxyType(normalized)
        self._extensions: Mapping[str, str] = MappingProxyType(by_extension)

    def __repr__(self) -> str:
        return (
            f"ConventionTable({len(self._conventions)} conventions, "
            f"{len(self._extensions)} extensions)"
        )

    @property
    def conventions(self) -> Mapping[str, WrapperConfig]:
        """Read-only view of tag -> wrapper."""
        return self._conventions

    @property
    def extensions(self) -> Mapping[str, str]:
        """Read-only view of extension -> tag."""
        return self._extensions

    def extend(
        self,
        conventions: Mapping[str, WrapperConfig] | None = None,
        extensions: Mapping[str, str] | None = None,
    ) -> ConventionTable:
        """Return a new table with extra (or overriding) entries.

        The receiver is left unchanged.
        """
        merged_conventions = {**self._conventions, **(conventions or {})}
        merged_extensions = {**self._extensions, **(extensions or {})}
        return ConventionTable(merged_conventions, merged_extensions)


class DelimiterResolver:
    """Resolve convention tags and file extensions to wrapper configs.

    The resolver is a pure lookup over the :class:`ConventionTable` it
    was built with.  It holds no mutable state and is safe to share
    between threads.

    Args:
        table: The conventions to resolve against.
    """

    def __init__(self, table: ConventionTable) -> None:
        self._table = table

    def __repr__(self) -> str:
        return f"DelimiterResolver({self._table!r})"

    @property
    def table(self) -> ConventionTable:
        return self._table

    def resolve(self, convention: Convention | str) -> WrapperConfig:
        """Return the wrapper configuration for *convention*.

        Args:
            convention: A :class:`Convention` member or its string value
                (case-insensitive).

        Returns:
            The :class:`~frontmatter_core.WrapperConfig` for the tag.

        Raises:
            UnknownConventionError: If the tag is not in the table.
        """
        if not isinstance(convention, str):
            raise UnknownConventionError(f"Unknown convention: {convention!r}")
        try:
            return self._table.conventions[_normalize_tag(convention)]
        except KeyError:
            raise UnknownConventionError(f"Unknown convention: {str(convention)!r}") from None

    def resolve_by_extension(self, extension: str) -> Convention | str:
        """Return the convention tag registered for a file extension.

        Args:
            extension: File extension, with or without the leading dot
                (case-insensitive), e.g. ``".HTML"`` or ``"scss"``.

        Returns:
            The convention tag.  Built-in tags are returned as
            :class:`Convention` members.

        Raises:
            UnknownConventionError: If no convention is registered for
                the extension.
        """
        if not isinstance(extension, str):
            raise UnknownConventionError(f"Unknown file extension: {extension!r}")
        key = _normalize_extension(extension)
        try:
            tag = self._table.extensions[key]
        except KeyError:
            raise UnknownConventionError(f"Unknown file extension: {extension!r}") from None
        _logger.debug("Detected convention %r for extension %r", str(tag), extension)
        return tag


def _normalize_tag(tag: str) -> str:
    return str(tag).strip().lower()


def _normalize_extension(extension: str) -> str:
    return extension.strip().lower().lstrip(".")


_BUILTIN_TAGS: frozenset[str] = frozenset(member.value for member in Convention)

#: Built-in conventions.  Automatic detection depends on this mapping,
#: so entries must stay stable.
DEFAULT_TABLE: ConventionTable = ConventionTable(
    conventions={
        Convention.SLIM: WrapperConfig(start_comment="/"),
        Convention.COFFEE: WrapperConfig(comment="#"),
        Convention.HTML: WrapperConfig(start_comment="<!--", end_comment="-->"),
        Convention.HAML: WrapperConfig(start_comment="-#"),
        Convention.LIQUID: WrapperConfig(
            start_comment="<% comment %>", end_comment="<% endcomment %>"
        ),
        Convention.SASS: WrapperConfig(comment="//"),
        Convention.SCSS: WrapperConfig(comment="//"),
        Convention.MD: WrapperConfig(),
    },
    extensions={member.value: member for member in Convention},
)

DEFAULT_RESOLVER: DelimiterResolver = DelimiterResolver(DEFAULT_TABLE)


def resolve(convention: Convention | str) -> WrapperConfig:
    """Resolve *convention* against :data:`DEFAULT_RESOLVER`."""
    return DEFAULT_RESOLVER.resolve(convention)


def resolve_by_extension(extension: str) -> Convention | str:
    """Resolve *extension* against :data:`DEFAULT_RESOLVER`."""
    return DEFAULT_RESOLVER.resolve_by_extension(extension)
