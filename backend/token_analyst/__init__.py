"""Token Scalp Analyst: price analysis and scalping signals for DEX tokens."""

__version__ = "1.0.0"
