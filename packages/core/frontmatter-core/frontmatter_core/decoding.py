"""Structured-data decoders for captured front matter text."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import yaml

from frontmatter_core.exceptions import MalformedFrontMatterError

#: A decoder turns the captured front matter text into a mapping.
Decoder = Callable[[str], dict[str, Any]]


def decode_yaml(text: str) -> dict[str, Any]:
    """Decode front matter text as YAML.

    Uses :func:`yaml.safe_load`.  An empty document decodes to ``{}``.

    Args:
        text: The lines captured between the ``---`` markers.

    Returns:
        The decoded mapping.

    Raises:
        yaml.YAMLError: If *text* is not valid YAML.  Propagated as-is.
        MalformedFrontMatterError: If *text* is valid YAML but not a
            mapping (e.g. a bare scalar or a list).
    """
    data = yaml.safe_load(text)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise MalformedFrontMatterError(
            f"Front matter must be a mapping, got {type(data).__name__}"
        )
    return data
