"""FinSight backend: account signup and cookie sessions."""

__version__ = "0.1.0"
