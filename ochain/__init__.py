"""Configuration and versioned record storage for the OChain game network."""

__version__ = "0.1.0"