"""Pure domain utilities: session codec, transaction ids, suffix rules.

These modules are free of FastAPI/HTTP concerns so they can be unit-tested
and reused by both the server and the smoke runner.
"""
__all__ = ["sessions", "transactions", "rules"]
