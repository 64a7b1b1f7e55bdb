"""
Persistence adapters.

``match_store`` owns the live in-memory state; ``json_storage`` knows how a
store snapshot is laid out on disk. Routers should go through the store rather
than touching the JSON file.
"""
