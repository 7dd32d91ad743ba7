# Copyright 2020 The Controlled-Proxy Developers
# See COPYING for details.

"""
Eliot fields and message types for changes of control state.
"""

from eliot import (
    Field,
    MessageType,
)


def _describe_key(key):
    """
    Attribute names are logged as-is; any other key (a mapping key, a
    unique token) is logged by its ``repr``.
    """
    if isinstance(key, str):
        return key
    return repr(key)


def _describe_callable(f):
    """
    Log a handler by its qualified name, or its ``repr`` when it has none.
    Text is already a description and is logged as-is.
    """
    if isinstance(f, str):
        return f
    return getattr(f, "__qualname__", None) or repr(f)


MEMBER = Field(
    u"member",
    _describe_key,
    u"The attribute name or item key of a controlled member.",
)

ENABLED = Field.for_types(
    u"enabled",
    [bool, None],
    u"The new control flag of a member (null when the member became uncontrolled).",
)

HANDLER = Field(
    u"fallback",
    _describe_callable,
    u"The name of the fallback handler.",
)

SET_CONTROL = MessageType(
    u"controlled-proxy:set-control",
    [MEMBER, ENABLED],
    u"The control flag of a member was changed.",
)

SET_FALLBACK = MessageType(
    u"controlled-proxy:set-fallback",
    [HANDLER],
    u"The fallback handler of a controlled proxy was replaced.",
)

WRITE_REFUSED = MessageType(
    u"controlled-proxy:write-refused",
    [MEMBER],
    u"A write to a disabled member was refused.",
)
