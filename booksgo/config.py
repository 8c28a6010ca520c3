"""Process configuration - read once from the environment at startup."""
from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict

FUNCTION_HOST_MARKER = "AWS_LAMBDA_FUNCTION_NAME"

DEFAULT_ROOT_PATH = "/"
DEFAULT_PORT = "8080"


class Settings(BaseModel):
    """Immutable startup settings."""

    model_config = ConfigDict(frozen=True)

    root_path: str = DEFAULT_ROOT_PATH
    port: int = int(DEFAULT_PORT)
    in_function_host: bool = False


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from environment variables.

    Empty ROOT_PATH/PORT values fall back to their defaults. Only the
    presence of the function-host marker matters, not its value.
    """
    env = os.environ if environ is None else environ

    return Settings(
        root_path=env.get("ROOT_PATH") or DEFAULT_ROOT_PATH,
        port=env.get("PORT") or DEFAULT_PORT,
        in_function_host=FUNCTION_HOST_MARKER in env,
    )
