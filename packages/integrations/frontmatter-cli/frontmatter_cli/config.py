"""Pydantic configuration models for the front matter CLI.

A config file lets users register comment conventions beyond the
built-in table and map extra file extensions to them.  It is a JSON or
YAML document (chosen by the ``.yaml``/``.yml`` suffix)::

    {
        "conventions": {
            "erb": {"start_comment": "<%#", "end_comment": "%>"},
            "py": {"comment": "#"}
        },
        "extensions": {
            "erb": "erb",
            "rhtml": "erb",
            "markdown": "md",
            "py": "py"
        },
        "max_file_bytes": 1048576,
        "output": "yaml"
    }

Custom conventions with a built-in name replace the built-in entry.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field

from frontmatter_core import DEFAULT_TABLE, ConventionTable, DelimiterResolver, WrapperConfig
from frontmatter_fs import DEFAULT_MAX_FILE_BYTES

_logger = logging.getLogger(__name__)


class WrapperSettings(BaseModel):
    """Comment delimiters for a single custom convention."""

    comment: str | None = Field(None, description="Single-line comment prefix")
    start_comment: str | None = Field(None, description="Multiline comment opening marker")
    end_comment: str | None = Field(
        None,
        description="Multiline comment closing marker; omit to close by indentation",
    )

    def to_wrapper_config(self) -> WrapperConfig:
        """Build the core :class:`~frontmatter_core.WrapperConfig`.

        Raises:
            InvalidConfigError: If the delimiter combination is invalid.
        """
        return WrapperConfig(
            comment=self.comment,
            start_comment=self.start_comment,
            end_comment=self.end_comment,
        )


class ParserConfig(BaseModel):
    """Top-level configuration for the front matter CLI.

    Attributes:
        conventions: Custom convention tags and their delimiters.
        extensions: Extra file extension -> convention tag mappings.
            Tags may be built-in or custom.
        max_file_bytes: Largest document the CLI will read.
        output: Default output format.
    """

    conventions: dict[str, WrapperSettings] = Field(
        default_factory=dict,
        description="Custom conventions keyed by tag",
    )
    extensions: dict[str, str] = Field(
        default_factory=dict,
        description="File extension to convention tag",
    )
    max_file_bytes: int = Field(DEFAULT_MAX_FILE_BYTES, gt=0, description="Maximum document size")
    output: Literal["json", "yaml"] = Field("json", description="Default output format")


def load_config(path: Path) -> ParserConfig:
    """Load a :class:`ParserConfig` from a JSON or YAML file.

    An empty file yields the default configuration.

    Raises:
        FileNotFoundError: If *path* does not exist.
        json.JSONDecodeError: If a JSON file is malformed.
        yaml.YAMLError: If a YAML file is malformed.
        pydantic.ValidationError: If the data does not match the schema.
    """
    raw = path.read_text(encoding="utf-8")
    if path.suffix in (".yaml", ".yml"):
        data = yaml.safe_load(raw)
    else:
        data = json.loads(raw) if raw.strip() else None
    return ParserConfig.model_validate(data or {})


def build_resolver(
    config: ParserConfig,
    base: ConventionTable = DEFAULT_TABLE,
) -> DelimiterResolver:
    """Build a resolver over *base* extended with the configured entries.

    Raises:
        InvalidConfigError: If a custom convention has an invalid
            delimiter combination.
        UnknownConventionError: If an extension maps to a tag that is
            neither built-in nor custom.
    """
    for name in sorted(config.conventions):
        if name.lower() in base.conventions:
            _logger.warning("Custom convention '%s' overrides the built-in one", name)
    table = base.extend(
        {name: settings.to_wrapper_config() for name, settings in config.conventions.items()},
        config.extensions,
    )
    return DelimiterResolver(table)
