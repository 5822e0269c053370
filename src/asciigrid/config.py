"""Layout options loaded from YAML files."""

from __future__ import annotations

import dataclasses
import logging
from typing import Any

import yaml

from .exceptions import ConfigError
from .models import LayoutOptions

logger = logging.getLogger(__name__)


def load_options(path: str) -> LayoutOptions:
    """
    Load layout options from a YAML file.

    The file must contain a mapping of option names, for example::

        style: rounded
        max_column_width: 30
        wrap_words: true

    An empty file yields the default options.

    Raises:
        ConfigError: If the file cannot be read or parsed, or is not a mapping
        InvalidInputError: If an option name or value is invalid
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(path, e.strerror or str(e)) from e
    except yaml.YAMLError as e:
        raise ConfigError(path, f"invalid YAML: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(path, "file must contain a mapping")

    logger.debug("Loaded options from %s: %s", path, data)
    return LayoutOptions.from_dict(data)


def merge_options(base: LayoutOptions | None = None, **overrides: Any) -> LayoutOptions:
    """Return a copy of ``base`` with every non-None override applied."""
    base = base or LayoutOptions()
    changes = {name: value for name, value in overrides.items() if value is not None}
    return dataclasses.replace(base, **changes)
