"""Domain layer (pure logic).

- Keep card-battle and deck rules here.
- Avoid I/O: no DB sessions, no HTTP/FastAPI.
- Prefer deterministic functions.
"""
