"""Unit tests for individual components in isolation.

Coverage:
    - models/: Pydantic validation and wire aliases
    - client/config: Configuration validation
    - controller/: Session store, conversation log, query pipeline,
      suggestion cache and the controller facade
    - ui/formatting: Markdown rendering

Uses the StubGateway double from conftest instead of HTTP.
"""
