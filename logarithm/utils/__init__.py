"""Helper utilities for the logarithm package."""
from logarithm.utils.logging import get_pylogger

__all__ = ["get_pylogger"]
