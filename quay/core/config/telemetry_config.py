"""
Telemetry Configuration.

Logging destination and verbosity for publishing sessions. Without a log
directory the engine logs to the console only.
"""

import argparse
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .types import LogLevel, ValidatedPath


class TelemetryConfig(BaseModel):
    """
    Validated manifest for logging.

    Attributes:
        log_dir: Directory for rotating log files (None = console only)
        log_level: Minimum level emitted by the engine logger
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    log_dir: Optional[ValidatedPath] = Field(default=None)
    log_level: LogLevel = Field(default="INFO")

    @classmethod
    def from_args(cls, args: argparse.Namespace, base: Optional[dict] = None) -> "TelemetryConfig":
        values = dict(base or {})
        if getattr(args, "log_dir", None) is not None:
            values["log_dir"] = args.log_dir
        if getattr(args, "log_level", None) is not None:
            values["log_level"] = args.log_level.upper()
        return cls(**values)
