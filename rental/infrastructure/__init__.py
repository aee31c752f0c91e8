"""
Infrastructure layer - concrete adapters for the application ports.

Layout:
- db/: SQLAlchemy tables, engine, repositories and deadlock retry
- gateways/: notification HTTP client and QR encoder
- in_memory/: in-memory repositories for local runs and tests
- messaging/: background notification dispatcher
- circuit_breaker.py: pybreaker factory for outbound calls
"""
