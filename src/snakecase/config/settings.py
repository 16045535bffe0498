"""Environment-driven settings for snakecase.

Priority chain (highest to lowest):
  1. Init kwargs  — values passed by the embedding application
  2. Env vars     — ``SNAKECASE_*`` prefix
  3. Code defaults
"""

from __future__ import annotations

from pydantic_settings import BaseSettings


class SnakeCaseSettings(BaseSettings):
    """Logging switches, frozen after construction.

    Attributes:
        verbose: Emit DEBUG records (including rejected candidates) from
            the ``snakecase`` logger.
        log_json: Render log lines as JSON instead of console output.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "SNAKECASE_",
    }

    verbose: bool = False
    log_json: bool = False
