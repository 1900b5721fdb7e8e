"""Test package for Ask PDF.

Structure:
    - unit/: Intake, configuration, providers and page state in isolation
    - integration/: The FastAPI app through httpx ASGITransport

No external service is contacted: the remote provider runs against
httpx.MockTransport and the API runs with a stub provider.
Leverages pytest with pytest-check for soft assertions.
"""
