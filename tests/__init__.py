"""Test suite for errtrace.

Test structure:
- unit/: isolated tests with fake call sites and mocked structlog
- integration/: real frame inspection and real log output
"""
