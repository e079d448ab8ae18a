"""Best-effort registry checks."""

from .checks import run_registry_checks

__all__ = ["run_registry_checks"]
