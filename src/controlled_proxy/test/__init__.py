# Copyright 2020 The Controlled-Proxy Developers
# See COPYING for details.

"""
The unit test package for controlled-proxy.

This also does some test-only related setup.  The expectation is that this
code will never be loaded under real usage.
"""

from sys import (
    stderr,
)


def _configure_hypothesis():
    from os import environ

    from hypothesis import (
        HealthCheck,
        settings,
    )

    # profile names are global to Hypothesis; keep the "controlled-proxy-"
    # prefix on any added here.
    settings.register_profile(
        "controlled-proxy-fast",
        max_examples=1,
        suppress_health_check=[
            HealthCheck.too_slow,
        ],
        deadline=60*10*1000,  # milliseconds
    )

    settings.register_profile(
        "controlled-proxy-ci",
        # CI machines vary too much for timing based checks to be useful.
        suppress_health_check=[
            HealthCheck.too_slow,
        ],
        deadline=60*10*1000,  # milliseconds
    )

    profile_name = environ.get("CONTROLLED_PROXY_HYPOTHESIS_PROFILE", "default")
    print("Loading Hypothesis profile {}".format(profile_name), file=stderr)
    settings.load_profile(profile_name)
_configure_hypothesis()

from eliot import to_file
to_file(open("eliot.log", "w", encoding="utf8"))
