"""Functional tests.

Purpose
- Drive CLI commands through the command-and-verify harness and assert on
  the resource state the instance reports afterwards.

Guidelines
- Treat the CLI as a black box; never assert on what a command printed.
- One flow per test.
"""
