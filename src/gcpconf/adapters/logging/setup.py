"""Start the lib_log_rich runtime from the ``[lib_log_rich]`` section.

Every module in :mod:`gcpconf` logs through ``logging.getLogger(__name__)``.
Once the runtime is up those records are routed into it, so resolver
decisions (credential source, universe domain, endpoint overrides) show up
alongside the CLI's own events.
"""

from __future__ import annotations

from typing import Any

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from gcpconf import __init__conf__

_SECTION = "lib_log_rich"


class LoggingConfigModel(BaseModel):
    """Typed view of ``[lib_log_rich]``.

    Only ``service`` and ``environment`` are named; every other key is kept
    as an extra and forwarded to RuntimeConfig unchanged.

    Example:
        >>> LoggingConfigModel().environment
        'prod'
        >>> LoggingConfigModel(console_level="DEBUG").passthrough()
        {'console_level': 'DEBUG'}
    """

    model_config = ConfigDict(extra="allow")

    service: str | None = None
    environment: str = "prod"

    def passthrough(self) -> dict[str, Any]:
        return self.model_dump(exclude={"service", "environment"}, exclude_none=True)

    def to_runtime_config(self) -> lib_log_rich.runtime.RuntimeConfig:
        return lib_log_rich.runtime.RuntimeConfig(
            service=self.service or __init__conf__.name,
            environment=self.environment,
            **self.passthrough(),
        )


def build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Return the RuntimeConfig described by ``config``.

    A missing or empty section yields lib_log_rich's defaults under the
    ``gcpconf`` service name.
    """
    section: Any = config.get(_SECTION, default=None) or {}
    return LoggingConfigModel.model_validate(section).to_runtime_config()


def init_logging(config: Config) -> None:
    """Start the runtime unless it is already running.

    ``.env`` is read first so ``LOG_*`` variables defined there win over the
    configuration files.
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LoggingConfigModel",
    "build_runtime_config",
    "init_logging",
]
