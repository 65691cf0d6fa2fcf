"""
App assembly entry point.

Re-exports the FastAPI `app` from `organicchain.api.main` so that
`uvicorn app:app` works from the repository root.
"""

from organicchain.api.main import app  # noqa: F401
