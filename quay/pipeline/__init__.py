"""
Publishing Pipeline Package.

Phase functions backing the command-line operations.
"""

from .phases import (
    EXIT_FAILURE,
    EXIT_OK,
    run_init_phase,
    run_packages_phase,
    run_persistent_phase,
    run_static_phase,
    run_unpublish_phase,
)

__all__ = [
    "EXIT_OK",
    "EXIT_FAILURE",
    "run_init_phase",
    "run_static_phase",
    "run_packages_phase",
    "run_persistent_phase",
    "run_unpublish_phase",
]
