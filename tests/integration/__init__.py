"""Integration tests for the API client working against a backend.

Coverage:
    - Every endpoint's method, path and payload
    - Parsed bodies returned unchanged
    - Status, transport and validation errors reaching the caller

The backend is an in-memory FastAPI app mounted via httpx.ASGITransport;
scripted failures use httpx.MockTransport.
"""
