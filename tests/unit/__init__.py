"""Unit tests for individual components in isolation.

Coverage:
    - models/: Pydantic validation and serialization
    - client/config: Environment-driven configuration
    - client/api_client: Shared-instance handling and facade functions
    - ui/formatting: Text helpers for the chat page
"""
