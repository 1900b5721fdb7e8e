"""Integration tests for the HTTP application.

Coverage:
    - POST /ask validation, success and failure mapping
    - Health check, method handling and CORS headers

Uses the real FastAPI app with the answer provider dependency overridden.
"""
