"""Ask PDF - ask natural-language questions about uploaded PDF documents.

Combines FastAPI for HTTP, NiceGUI for the pages, httpx for the outbound
service calls, and Pydantic for data validation. Text extraction and
question answering are done by external services.

Components:
    - api: HTTP endpoints
    - intake: PDF filtering and per-page file selection
    - providers: Remote and simulated answer strategies
    - ui: Question page and chat page
    - models: State and wire schemas
"""

__version__ = "0.1.0"
