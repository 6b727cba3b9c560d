"""End-to-end tests.

Purpose
- Invoke the installed ``proxyctl`` command through Click's CliRunner and
  check exit codes, terminal output and log files.

Guidelines
- Run inside ``runner.isolated_filesystem()`` so log files stay per test.
- Pass ``--no-flight-recorder`` unless the test is about the flight recorder.
"""
