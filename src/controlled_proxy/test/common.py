__all__ = [
    "SyncTestCase",
]

from testtools import (
    TestCase,
)
from testtools.twistedsupport import (
    SynchronousDeferredRunTest,
)

from .eliotutil import (
    EliotLoggedRunTest,
)


class SyncTestCase(TestCase):
    """
    A ``TestCase`` whose tests each run in their own Eliot action and may
    return an already-fired ``Deferred``.
    """
    run_tests_with = EliotLoggedRunTest.make_factory(
        SynchronousDeferredRunTest,
    )
