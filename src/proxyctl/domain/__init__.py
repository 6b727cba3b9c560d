"""Domain layer for PROXYCTL.

Pure values and rules about the resources the control API exposes: the
structured view of a fetched resource and the arithmetic on log-priority
sequences. No I/O happens here.
"""
