"""
Match tracker API package.

The FastAPI application lives in ``matches_api.app`` (``create_app`` is the
uvicorn factory); importing this package does not build it.
"""
