"""Test package for the resume AI client.

Structure:
    - unit/: Controller components, models and formatting with in-memory doubles
    - integration/: Gateway and controller against an in-process fake backend

The fake backend (tests/fake_backend.py) reproduces the REST contract of the
real service, so no external services are required.
Leverages pytest with pytest-check for soft assertions.
"""
