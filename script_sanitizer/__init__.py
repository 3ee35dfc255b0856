"""Rewrite moderation-risky terms in generated short-video scripts."""

__version__ = "0.1.0"
