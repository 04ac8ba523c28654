"""Resume AI client - chat with a backend about an uploaded resume.

Combines httpx for backend calls, NiceGUI for the browser interface, and
Pydantic for configuration and data validation.

Components:
    - client: HTTP gateway to the resume backend
    - controller: Session, conversation and query state
    - ui: Web interface for upload and chat
    - models: Domain models and wire schemas
"""

__version__ = "0.1.0"
