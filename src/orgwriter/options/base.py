"""Base classes for renderer options.

This module defines the foundation classes for the option objects handed to
renderers. Options are frozen dataclasses; per-field ``metadata`` carries the
help text and importance used by the CLI and documentation.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Notes
    -----
    Subclasses define format-specific rendering options as frozen dataclass
    fields and validate them in ``__post_init__``.

    """

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Self:
        """Build options from a configuration mapping.

        Keys may use dashes or underscores, and a field's ``cli_name`` is
        accepted as an alias. Keys that do not name a field are logged and
        ignored so that one config file can serve several tools.

        Parameters
        ----------
        data : Mapping[str, Any]
            Configuration values, e.g. a section of a TOML file

        Returns
        -------
        Self
            Options instance; field validation runs as usual

        """
        aliases: dict[str, str] = {}
        for f in fields(cls):
            aliases[f.name] = f.name
            cli_name = f.metadata.get("cli_name")
            if cli_name:
                aliases.setdefault(cli_name.replace("-", "_"), f.name)
        values: dict[str, Any] = {}
        for key, value in data.items():
            name = aliases.get(str(key).replace("-", "_"))
            if name is not None:
                values[name] = value
            else:
                logger.warning("Ignoring unknown %s option: %s", cls.__name__, key)
        return cls(**values)

    def __post_init__(self) -> None:
        """Validate field values; subclasses extend this."""
        pass
