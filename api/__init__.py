"""
api - FastAPI proxy for Roblox game passes.

Provides JSON endpoints for:
- Game passes of a game that are currently for sale, with prices
- Price and sale status of a single game pass
- Service info and health
"""

__version__ = "1.0.0"
