from __future__ import annotations

from typing import TYPE_CHECKING

import yaml
from pydantic import Field, StrictStr, ValidationError

from chronicle.core.models.base import AppBaseModel
from chronicle.core.models.tag import TagType, default_tag_types
from chronicle.utils.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

logger = get_logger(__name__)

CONFIG_FILE_NAME = "config.yaml"

DEFAULT_EXCLUDE_WORDS = ["closed", "abandoned"]

CONFIG_HEADER = """\
# Chronicle Configuration
#
# Tag Types define the notation tags offered in the tag catalog.
# Each tag type has:
#   label:    The human-readable name shown in the catalog
#   template: The notation pattern inserted when selected
#
# Standard tag types are provided below.
# Add, remove, or modify entries to suit your game system.
#
# Tag Exclude Words are terms that, when found in the data section of a tag,
# close that tag and remove it from the active and notes tag lists.
# This is useful for filtering out completed or archived tags.
# Words are matched case-insensitively.

"""


class ConfigError(ValueError):
    """Raised when the tag configuration file cannot be read or is invalid."""


class TagConfig(AppBaseModel):
    """Tag catalog configuration read from config.yaml."""

    tag_types: list[TagType] = Field(default_factory=default_tag_types)
    tag_exclude_words: list[StrictStr] = Field(default_factory=lambda: list(DEFAULT_EXCLUDE_WORDS))


def write_default_config(path: Path) -> None:
    """Write a commented config file holding the default tag types."""
    cfg = TagConfig()
    body = yaml.safe_dump(cfg.model_dump(), sort_keys=False, allow_unicode=True)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(CONFIG_HEADER + body, encoding="utf-8")
    logger.info("Wrote default tag configuration to %s", path)


def load_tag_config(config_dir: Path) -> TagConfig:
    """Load config.yaml from config_dir, creating it with defaults if missing.

    Raises:
        ConfigError: if the file cannot be read, is not valid YAML, has no tag
            types, a tag type has a blank label or template, or the exclude
            words are not a list of strings.
    """
    path = config_dir / CONFIG_FILE_NAME
    if not path.exists():
        try:
            write_default_config(path)
        except OSError as err:
            raise ConfigError(f"failed to create default config: {err}") from err

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except OSError as err:
        raise ConfigError(f"failed to read config file: {err}") from err
    except yaml.YAMLError as err:
        raise ConfigError(f"failed to parse config file: {err}") from err

    if not isinstance(raw, dict):
        raise ConfigError("invalid configuration: expected a mapping at the top level")

    tag_types = raw.get("tag_types") or []
    if not tag_types:
        raise ConfigError("invalid configuration: tag_types cannot be empty")

    for i, entry in enumerate(tag_types):
        try:
            TagType.model_validate(entry)
        except ValidationError as err:
            fields = sorted({str(e["loc"][0]) for e in err.errors() if e["loc"]}) or ["entry"]
            raise ConfigError(
                f"invalid configuration: tag_types[{i}]: {', '.join(fields)} is required"
            ) from err

    try:
        return TagConfig(
            tag_types=tag_types,
            tag_exclude_words=raw.get("tag_exclude_words") or [],
        )
    except ValidationError as err:
        if any(e["loc"] and e["loc"][0] == "tag_exclude_words" for e in err.errors()):
            raise ConfigError(
                "invalid configuration: tag_exclude_words must be a list of words"
            ) from err
        raise ConfigError(f"invalid configuration: {err}") from err
