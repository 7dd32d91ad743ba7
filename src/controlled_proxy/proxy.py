# Copyright 2020 The Controlled-Proxy Developers
# See COPYING for details.

"""
A wrapper whose members can be switched off at runtime.

A ``ControlledProxy`` directs every attribute and item access to the object
it wraps.  Members named in its *control map* are the exception: while a
member's flag is ``True`` it behaves exactly as on the wrapped object, while
its flag is ``False`` reads are answered by the *fallback handler* and writes
are refused.  Members absent from the control map are never touched.

The control map and the fallback handler are reached through the reserved
tokens ``CONTROLS`` and ``FALLBACK`` (``proxy[CONTROLS]``,
``proxy[FALLBACK] = handler``) or through the functions in this module.
Neither can collide with a member of the wrapped object.
"""

import operator
from types import MappingProxyType

import attr

from .error import (
    InvalidFallback,
    MemberDisabled,
    ReservedKey,
)
from .util.eliotutil import (
    SET_CONTROL,
    SET_FALLBACK,
    WRITE_REFUSED,
)


@attr.s(frozen=True, eq=False, repr=False)
class _ReservedToken(object):
    """
    A key which is only equal to itself.
    """
    name = attr.ib(validator=attr.validators.instance_of(str))

    def __repr__(self):
        return "<controlled_proxy.{}>".format(self.name)


CONTROLS = _ReservedToken(u"CONTROLS")
FALLBACK = _ReservedToken(u"FALLBACK")


def _ignore(*args, **kwargs):
    """
    The default fallback handler: disabled members are ``None`` and disabled
    methods do nothing.
    """
    return None


def _validate_fallback(inst, attribute, value):
    if not callable(value):
        raise InvalidFallback(value)


@attr.s(frozen=True)
class ControlOptions(object):
    """
    Per-proxy configuration.

    :ivar bool mutable_controls: If ``True`` the control map exposed through
        ``CONTROLS`` is the live ``dict`` and may be changed in place.  If
        ``False`` a read-only live view is exposed instead and flags can only
        be changed with ``set_control``.

    :ivar bool fallback_context: If ``True`` the fallback handler is called as
        ``fallback(target, key, proxy, *args, **kwargs)``.  If ``False`` it is
        called with the forwarded arguments only.
    """

    mutable_controls = attr.ib(
        default=True,
        validator=attr.validators.instance_of(bool),
    )
    fallback_context = attr.ib(
        default=True,
        validator=attr.validators.instance_of(bool),
    )


@attr.s
class _ControlState(object):
    """
    Everything a ``ControlledProxy`` knows besides its target.
    """

    target = attr.ib()
    controls = attr.ib(converter=dict)
    fallback = attr.ib(validator=_validate_fallback)
    options = attr.ib(validator=attr.validators.instance_of(ControlOptions))
    exposed_controls = attr.ib(init=False, repr=False)

    def __attrs_post_init__(self):
        if self.options.mutable_controls:
            self.exposed_controls = self.controls
        else:
            self.exposed_controls = MappingProxyType(self.controls)

    def flag(self, key):
        """
        :returns: the control flag of ``key``, or ``None`` if ``key`` is not
            controlled.
        """
        try:
            return self.controls.get(key)
        except TypeError:
            # unhashable, so it cannot be in the map
            return None

    def read(self, proxy, key, value):
        """
        Apply the read policy to ``value``, just resolved from the target.
        """
        flag = self.flag(key)
        if flag is None or flag:
            return value
        if callable(value):
            return self.substitute(proxy, key)
        return self.call_fallback(proxy, key, (), {})

    def substitute(self, proxy, key):
        """
        :returns: a callable which stands in for the disabled callable member
            ``key``.  The handler is looked up when it is called, not now.
        """
        def disabled_member(*args, **kwargs):
            return self.call_fallback(proxy, key, args, kwargs)
        return disabled_member

    def call_fallback(self, proxy, key, args, kwargs):
        if self.options.fallback_context:
            return self.fallback(self.target, key, proxy, *args, **kwargs)
        return self.fallback(*args, **kwargs)

    def write(self, key, value, assign):
        """
        Apply the write policy, using ``assign(target, key, value)`` to
        perform a permitted write.

        :raises MemberDisabled: if ``key`` is controlled and disabled.
        """
        flag = self.flag(key)
        if flag is not None and not flag:
            WRITE_REFUSED.log(member=key)
            raise MemberDisabled(key)
        assign(self.target, key, value)

    def replace_fallback(self, fallback):
        _validate_fallback(self, None, fallback)
        self.fallback = fallback
        SET_FALLBACK.log(fallback=fallback)

    def set_control(self, key, enabled):
        if enabled is None:
            self.controls.pop(key, None)
        elif isinstance(enabled, bool):
            self.controls[key] = enabled
        else:
            raise TypeError(
                "control flags must be True, False or None, not {!r}".format(
                    enabled,
                )
            )
        SET_CONTROL.log(member=key, enabled=enabled)


def _state(proxy):
    return object.__getattribute__(proxy, "_controlled_proxy_state")


class ControlledProxy(object):
    """
    Wrap ``target`` so that the members named in ``controls`` can be enabled
    and disabled while the wrapper is in use.

    Every attribute read, write and delete is forwarded to ``target``, as is
    every item read, write and delete.  Methods read through the proxy are
    bound to ``target``, never to the proxy.  ``isinstance`` sees the
    target's class.  Operators applied to the proxy itself (calling it,
    ``len``, ``next``, comparisons, ``with`` and so on) go to ``target``
    and are never gated.

    :param target: The object to wrap.  It is neither copied nor modified.

    :param controls: A mapping of attribute name or item key to ``bool``.
        ``True`` enables the member, ``False`` disables it.  The mapping is
        copied; use ``proxy[CONTROLS]`` to change the proxy's own.

    :param fallback: Called in place of disabled members, see
        ``ControlOptions.fallback_context`` for its signature.  By default
        disabled members read as ``None``.

    :param ControlOptions options: Per-proxy configuration.
    """

    __slots__ = ("_controlled_proxy_state",)

    def __init__(self, target, controls=None, fallback=None, options=None):
        state = _ControlState(
            target=target,
            controls={} if controls is None else controls,
            fallback=_ignore if fallback is None else fallback,
            options=ControlOptions() if options is None else options,
        )
        object.__setattr__(self, "_controlled_proxy_state", state)

    def __getattribute__(self, name):
        state = _state(self)
        return state.read(self, name, getattr(state.target, name))

    def __setattr__(self, name, value):
        _state(self).write(name, value, setattr)

    def __delattr__(self, name):
        delattr(_state(self).target, name)

    def __getitem__(self, key):
        state = _state(self)
        if key is CONTROLS:
            return state.exposed_controls
        if key is FALLBACK:
            return state.fallback
        return state.read(self, key, state.target[key])

    def __setitem__(self, key, value):
        state = _state(self)
        if key is FALLBACK:
            state.replace_fallback(value)
        elif key is CONTROLS:
            raise ReservedKey(key, u"replace")
        else:
            state.write(key, value, operator.setitem)

    def __delitem__(self, key):
        if key is CONTROLS or key is FALLBACK:
            raise ReservedKey(key, u"delete")
        del _state(self).target[key]

    def __repr__(self):
        return "<ControlledProxy for {!r}>".format(_state(self).target)

    def __str__(self):
        return str(_state(self).target)

    def __dir__(self):
        return dir(_state(self).target)

    def __len__(self):
        return len(_state(self).target)

    def __iter__(self):
        return iter(_state(self).target)

    def __contains__(self, item):
        return item in _state(self).target

    def __bool__(self):
        return bool(_state(self).target)

    def __eq__(self, other):
        return _state(self).target == _unwrap(other)

    def __ne__(self, other):
        return not self == other

    def __lt__(self, other):
        return _state(self).target < _unwrap(other)

    def __le__(self, other):
        return _state(self).target <= _unwrap(other)

    def __gt__(self, other):
        return _state(self).target > _unwrap(other)

    def __ge__(self, other):
        return _state(self).target >= _unwrap(other)

    def __hash__(self):
        return hash(_state(self).target)

    def __format__(self, format_spec):
        return format(_state(self).target, format_spec)

    def __call__(self, *args, **kwargs):
        return _state(self).target(*args, **kwargs)

    def __next__(self):
        return next(_state(self).target)

    def __reversed__(self):
        return reversed(_state(self).target)

    def __enter__(self):
        return _state(self).target.__enter__()

    def __exit__(self, exc_type, exc_value, traceback):
        return _state(self).target.__exit__(exc_type, exc_value, traceback)


def _unwrap(obj):
    if is_controlled_proxy(obj):
        return _state(obj).target
    return obj


def controlled_proxy(target, controls=None, fallback=None, **options):
    """
    :param target: the object to wrap

    :param dict controls: initial control flags

    :param fallback: initial fallback handler

    :param options: keyword arguments for :py:`ControlOptions`

    :returns ControlledProxy: a proxy for ``target``
    """
    return ControlledProxy(
        target,
        controls=controls,
        fallback=fallback,
        options=ControlOptions(**options),
    )


def is_controlled_proxy(obj):
    """
    :returns bool: whether ``obj`` is a ``ControlledProxy``.  The check looks
        at the real type, so it is not fooled by the forwarded ``__class__``.
    """
    return issubclass(type(obj), ControlledProxy)


def _checked_state(proxy):
    if not is_controlled_proxy(proxy):
        raise TypeError(
            "expected a ControlledProxy, got {!r}".format(type(proxy)),
        )
    return _state(proxy)


def target_of(proxy):
    """
    :returns: the object wrapped by ``proxy``.
    """
    return _checked_state(proxy).target


def controls_of(proxy):
    """
    :returns: the live control map of ``proxy``, the same object as
        ``proxy[CONTROLS]``.
    """
    return _checked_state(proxy).exposed_controls


def fallback_of(proxy):
    """
    :returns: the current fallback handler of ``proxy``.
    """
    return _checked_state(proxy).fallback


def set_fallback(proxy, fallback):
    """
    Replace the fallback handler of ``proxy``.

    :raises InvalidFallback: if ``fallback`` is not callable.  The previous
        handler stays active.
    """
    _checked_state(proxy).replace_fallback(fallback)


def set_control(proxy, key, enabled):
    """
    Change the control flag of one member.  This works whether or not the
    proxy exposes a mutable control map.

    :param key: an attribute name or item key

    :param enabled: ``True`` or ``False``, or ``None`` to stop controlling
        ``key`` altogether.
    """
    _checked_state(proxy).set_control(key, enabled)


def try_set(proxy, key, value, item=False):
    """
    Write ``value`` to the member ``key`` of ``proxy`` without raising when
    the member is disabled.

    :param bool item: Write ``proxy[key]`` rather than an attribute.  Keys
        which are not strings are always written as items.

    :returns bool: ``True`` if the write happened, ``False`` if it was
        refused.
    """
    _checked_state(proxy)
    if item or not isinstance(key, str):
        assign = operator.setitem
    else:
        assign = setattr
    try:
        assign(proxy, key, value)
    except MemberDisabled:
        return False
    return True
