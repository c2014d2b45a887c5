"""Supply-chain integration backend."""

__version__ = "0.1.0"
