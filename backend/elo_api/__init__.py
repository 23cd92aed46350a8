"""
Elo API Application Package.

Aggregates League of Legends solo queue ranks for the accounts registered
under a channel identifier and renders them as a single chat line.
"""

__version__ = "1.0.0"
