"""
Tools aimed at the interaction between tests and Eliot.
"""

__all__ = [
    "RUN_TEST",
    "EliotLoggedRunTest",
    "eliot_logged_test",
]

from functools import (
    wraps,
    partial,
)

import attr

from eliot import (
    ActionType,
    Field,
)
from eliot.testing import capture_logging
from eliot.twisted import DeferredContext

from twisted.internet.defer import (
    maybeDeferred,
)

_NAME = Field.for_types(
    u"name",
    [str],
    u"The id of the test.",
)

RUN_TEST = ActionType(
    u"controlled-proxy:run-test",
    [_NAME],
    [],
    u"A test is run.",
)


def eliot_logged_test(f):
    """
    Decorate a test method so that it runs inside a ``RUN_TEST`` action.

    Messages the test logs are captured in a ``MemoryLogger`` (available as
    ``eliot_logger``) and validated.  When the test is cleaned up they are
    written on to whatever the default logger was when the test started.
    """
    @wraps(f)
    def run_in_action(self, *a, **kw):
        # imported late to get the default logger current at test time
        from eliot._output import _DEFAULT_LOGGER as default_logger

        @capture_logging(None)
        def run(self, logger):
            self.eliot_logger = logger

            def republish():
                for msg, serializer in zip(logger.messages, logger.serializers):
                    default_logger.write(msg, serializer)

            # must be registered before capture_logging's own cleanup runs
            self.addCleanup(republish)

            # An Action writes to the logger that was the default when it
            # was built, so it is built only once ``logger`` is installed.
            with RUN_TEST(name=self.id()).context():
                return DeferredContext(
                    maybeDeferred(f, self, *a, **kw),
                ).addActionFinish()

        return run(self)

    return run_in_action


@attr.s
class EliotLoggedRunTest(object):
    """
    A *RunTest* which runs the *RunTest* built by another factory inside an
    Eliot action.

    :ivar case: The test case to run.
    :ivar handlers: Passed on to the wrapped *RunTest*.
    :ivar last_resort: Passed on to the wrapped *RunTest*.
    """
    _run_tests_with_factory = attr.ib()
    case = attr.ib()
    handlers = attr.ib(default=None)
    last_resort = attr.ib(default=None)

    @classmethod
    def make_factory(cls, delegated_run_test_factory):
        return partial(cls, delegated_run_test_factory)

    @property
    def eliot_logger(self):
        return self.case.eliot_logger

    @eliot_logger.setter
    def eliot_logger(self, value):
        self.case.eliot_logger = value

    def addCleanup(self, *a, **kw):
        return self.case.addCleanup(*a, **kw)

    def id(self):
        return self.case.id()

    @eliot_logged_test
    def run(self, result=None):
        return self._run_tests_with_factory(
            self.case,
            self.handlers,
            self.last_resort,
        ).run(result)
