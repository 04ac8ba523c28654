"""Integration tests for components working together as a system.

Coverage:
    - ResumeApiClient against the fake backend over httpx.ASGITransport
    - Transport failures through httpx.MockTransport
    - Full upload -> ask -> reset workflow through ResumeChatController

No external services required.
"""
