"""
Test suites package.

`testsuites` stays importable so page objects and the UI framework can be
shared with test projects targeting a running Theia or Che instance.
"""
