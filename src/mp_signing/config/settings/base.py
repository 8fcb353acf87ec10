"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import ClassVar


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings read by the loaders in this package.

    Subclasses set ``_prefix`` (``"WEBHOOK"`` maps ``secret`` to
    ``WEBHOOK_SECRET``) and override :meth:`_validate` to decode or range-check
    values, so a dataclass instance only exists once its values are usable.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Hook run after construction; raise a ``ConfigError`` to reject the values."""


__all__ = ["Settings"]
