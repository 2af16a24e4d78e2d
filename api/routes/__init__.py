"""API route modules."""
from api.routes import quiz

__all__ = ["quiz"]
