"""Test support for driving PROXYCTL against an instance.

`CommandHarness` runs CLI command strings and re-fetches REST resources to
verify their effect. Use it with an `Instance` (in-memory or process-backed)
started around the test.
"""

from .harness import CommandHarness, CommandRejected, FetchFailed, HarnessError

__all__ = ["CommandHarness", "CommandRejected", "FetchFailed", "HarnessError"]
