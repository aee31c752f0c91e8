"""
Integration tests: SQL repositories on aiosqlite, deadlock retry, HTTP API.

Run only these:
    pytest tests/integration/
    pytest -m sql
"""
