"""PROXYCTL test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- integration/  : Real interactions with external systems (subprocesses, a live instance).
- functional/   : User-visible flows driven through the command-and-verify harness.
- contract/     : Shared behavior enforced across implementations of a port.
- e2e/          : Full CLI invocations through Click's CliRunner.
- fixtures/     : Fixture plugins loaded from the root conftest.
- helpers/      : Shared utilities (no tests here).

General guidance
- Keep unit fast and deterministic (no real I/O); prefer fakes and
  ``httpx.MockTransport`` over patching at boundaries.
- Integration tests that need a live instance are skipped unless
  PROXYCTL_IT_START and PROXYCTL_IT_STOP are set.
- Functional asserts state fetched back from the instance, not what a command printed.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
- Markers: unit, integration, functional, contract, e2e, property, slow
"""
