"""Skip guards for live tests.

Live tests talk to public SMART sandboxes. They need no credentials but do
need network access, so they only run when SMART_EMR_LIVE is set:

  export SMART_EMR_LIVE=1
  pytest tests/live -v -m live
"""

from __future__ import annotations

import os

import pytest


def _skip_unless(env_var: str, reason: str | None = None):
    """Return a pytest.mark.skipif that skips when env_var is not set."""
    msg = reason or f"Set {env_var} to run this test"
    return pytest.mark.skipif(not os.environ.get(env_var), reason=msg)


skip_no_network = _skip_unless("SMART_EMR_LIVE", "Set SMART_EMR_LIVE=1 to run live sandbox tests")
