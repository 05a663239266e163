"""Routers module - FastAPI route handlers"""

from . import config, diff, session

__all__ = ["config", "diff", "session"]
