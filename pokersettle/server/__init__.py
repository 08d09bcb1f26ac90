"""
PokerSettle Server - FastAPI JSON service over the settlement core
"""

from pokersettle.server.app import app, create_app

__all__ = ["app", "create_app"]
