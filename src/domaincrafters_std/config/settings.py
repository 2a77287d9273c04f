"""Settings for the ``dcstd`` CLI — flags and environment in one object.

Priority chain (highest to lowest):
  1. Init kwargs   — CLI flags passed by Click
  2. Env vars      — ``DCSTD_*`` prefix
  3. Code defaults — declared on the model
"""

from __future__ import annotations

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StdSettings(BaseSettings):
    """Frozen settings shared by every ``dcstd`` command.

    Attributes:
        json_output: Render results as JSON instead of text.
        quiet: Print only the essential value(s).
        verbose: Enable DEBUG logging for the library.
        log_json: Emit structured JSON log lines on stderr.
        max_generate: Upper bound for ``dcstd uuid new --count``.
    """

    model_config = SettingsConfigDict(frozen=True, env_prefix="DCSTD_")

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    max_generate: int = Field(default=1000, ge=1)

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> StdSettings:
        """Build settings from CLI flags.

        Flags left at their unset value (``None`` or ``False``) are dropped
        so they do not mask values coming from the environment.
        """
        overrides = {k: v for k, v in cli_flags.items() if v is not None and v is not False}
        return cls(**overrides)
