"""NiceGUI interface - thin visualization layer for the resume chat.

Responsibilities:
    - Resume upload view with processing indicator
    - Chat message display with markdown rendering
    - Suggested questions sidebar
    - "New Resume" reset

Contains no business logic. Every action goes through
ResumeChatController; the page re-renders on its change notifications.
"""
