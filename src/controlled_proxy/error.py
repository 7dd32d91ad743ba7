# Copyright 2020 The Controlled-Proxy Developers
# See COPYING for details.

"""
Errors raised by controlled proxies.
"""

import attr


FALLBACK_NOT_CALLABLE = u"the fallback handler must be callable"


@attr.s(auto_exc=True)
class InvalidFallback(TypeError):
    """
    A value which is not callable was offered as the fallback handler of a
    controlled proxy.  The previous handler remains active.

    :ivar value: The rejected value.
    """

    value = attr.ib()

    def __str__(self):
        return FALLBACK_NOT_CALLABLE


@attr.s(auto_exc=True)
class MemberDisabled(TypeError):
    """
    A write was attempted to a member which is controlled and currently
    disabled.  The target was not modified.

    This is a ``TypeError`` so that a refused assignment reads like an
    assignment to a read-only attribute.

    :ivar key: The attribute name or item key that was written.
    """

    key = attr.ib()

    def __str__(self):
        return u"cannot set disabled member {!r}".format(self.key)


@attr.s(auto_exc=True)
class ReservedKey(TypeError):
    """
    An operation that is not supported was attempted on one of the reserved
    channels of a controlled proxy.

    :ivar key: The reserved token.
    :ivar operation unicode: What was attempted.
    """

    key = attr.ib()
    operation = attr.ib(validator=attr.validators.instance_of(str))

    def __str__(self):
        return u"cannot {} {!r} of a controlled proxy".format(
            self.operation,
            self.key,
        )
