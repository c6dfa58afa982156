"""Unified settings — init kwargs and env vars in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — passed by the embedding application
  2. Env vars     — ``DLIT_*`` prefix, ``__`` for nested sections
                    (e.g. ``DLIT_LOGGING__VERBOSE=1``)
  3. Code defaults — baked into the section models
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings

from dlit.config.logging import configure_logging
from dlit.config.models import LoggingConfig


class DlitSettings(BaseSettings):
    """Settings for applications embedding dlit.

    The Literal type itself is not configurable; settings only cover the
    ambient concerns around it.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "DLIT_",
        "env_nested_delimiter": "__",
    }

    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def configure_logging(self) -> None:
        """Apply the [logging] section via :func:`configure_logging`."""
        configure_logging(verbose=self.logging.verbose, log_json=self.logging.log_json)
