"""
Telemetry and Reporting Package.

Centralizes session logging. Provides the Logger initializer used to attach
console and rotating file handlers, and the Reporter that formats publishing
baselines and outcomes.

Available Components:
    - Logger: Static utility for stream and file logging initialization.
    - Reporter: Session reporting engine.
    - LogStyle: Unified logging style constants.
"""

from .logger import Logger
from .reporter import LogStyle, Reporter, ReporterProtocol

__all__ = [
    "Logger",
    "Reporter",
    "ReporterProtocol",
    "LogStyle",
]
