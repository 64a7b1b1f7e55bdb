"""
Use cases orchestrating the store and its persistence.

Routers (FastAPI endpoints) should call the store handed to them via
``app.state`` instead of manipulating the JSON file directly.
"""
