"""Contract tests.

Purpose
- Define the behavior of a port once and run it against every
  implementation, keeping them interchangeable.

Guidelines
- Parametrize implementations via fixtures.
- Assert only the public contract, not internals.
"""
