# Copyright (c) 2024, Juanwu Lu.
# Released under the BSD 3-Clause License.
# Please see the LICENSE file that should have been included as part of this
# project source code.
from . import _metadata
from ._functions import (
    InvalidArgument,
    log_in_base,
    log_of_quotient,
    log_of_quotient_and_base_quotient,
    log_with_base_quotient,
    log_with_powered_base,
    log_with_powered_value,
)

__author__ = _metadata.author
__version__ = _metadata.version
__docformat__ = "google"
__doc__ = """
Logarithm: arbitrary-base logarithms with validated arguments
=============================================================
Stateless helpers computing logarithms in any base, with variants for
powered values, powered bases, and values or bases given as quotients.
"""
__all__ = [
    "InvalidArgument",
    "log_in_base",
    "log_of_quotient",
    "log_of_quotient_and_base_quotient",
    "log_with_base_quotient",
    "log_with_powered_base",
    "log_with_powered_value",
]
