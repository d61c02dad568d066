"""A versioned key-value store and the CBOR record tables kept in it."""

__version__ = "0.1.0"