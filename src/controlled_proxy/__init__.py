# Copyright 2020 The Controlled-Proxy Developers
# See COPYING for details.

"""
Wrap any object so that access to its members can be switched off at
runtime, without changing the object.
"""

__all__ = [
    "__version__",

    "CONTROLS",
    "FALLBACK",
    "ControlOptions",
    "ControlledProxy",
    "controlled_proxy",
    "controls_of",
    "fallback_of",
    "is_controlled_proxy",
    "set_control",
    "set_fallback",
    "target_of",
    "try_set",

    "controlled_logger",
    "report_disabled",

    "InvalidFallback",
    "MemberDisabled",
    "ReservedKey",
]

from ._version import (
    __version__,
)
from .proxy import (
    CONTROLS,
    FALLBACK,
    ControlOptions,
    ControlledProxy,
    controlled_proxy,
    controls_of,
    fallback_of,
    is_controlled_proxy,
    set_control,
    set_fallback,
    target_of,
    try_set,
)
from .logger import (
    controlled_logger,
    report_disabled,
)
from .error import (
    InvalidFallback,
    MemberDisabled,
    ReservedKey,
)
