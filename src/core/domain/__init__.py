"""Domain models and values.

Pure, strict data structures (Pydantic v2). The domain does not know about the
CLI or about HTTP transports.
"""
