# Copyright 2020 The Controlled-Proxy Developers
# See COPYING for details.

"""
Controlled proxies for ``logging.Logger`` objects.

This is the case controlled proxies were made for: hand a logger to code
that knows nothing about control flags, then silence or re-route individual
log levels while that code keeps running.
"""

from .proxy import controlled_proxy


LEVEL_METHODS = (
    "debug",
    "info",
    "warning",
    "error",
    "critical",
    "exception",
)


def report_disabled(level="warning"):
    """
    :param str level: the name of the logger method to report with

    :returns: a fallback handler which reports each use of a disabled member
        through the wrapped logger itself, as
        ``Accessed disabled member: <name>``.
    """
    if level not in LEVEL_METHODS:
        raise ValueError(
            "'level' must be one of {}, not {!r}".format(LEVEL_METHODS, level),
        )

    def report(target, member, proxy, *args, **kwargs):
        # report, call_fallback, disabled_member, then the caller
        getattr(target, level)(
            "Accessed disabled member: %s",
            member,
            stacklevel=4,
        )
    return report


def controlled_logger(logger, enabled=(), disabled=(), fallback=None):
    """
    Wrap ``logger`` so its level methods can be switched on and off.

    :param logging.Logger logger: The logger to wrap.  Anything with the
        methods named in ``enabled`` and ``disabled`` will do.

    :param enabled: names of methods which start enabled
    :param disabled: names of methods which start disabled

    :param fallback: the fallback handler, as for ``ControlledProxy``

    :raises ValueError: if a name is in both ``enabled`` and ``disabled``,
        or ``logger`` has no such method.

    :returns ControlledProxy: the wrapped logger
    """
    enabled = set(enabled)
    disabled = set(disabled)
    both = enabled & disabled
    if both:
        raise ValueError(
            "{} cannot be both enabled and disabled".format(sorted(both)),
        )
    controls = {}
    for name in enabled | disabled:
        if not callable(getattr(logger, name, None)):
            raise ValueError(
                "{!r} has no method {!r}".format(logger, name),
            )
        controls[name] = name in enabled
    return controlled_proxy(logger, controls, fallback)
