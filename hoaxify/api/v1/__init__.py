"""
API v1 package.

Contains versioned routes mounted under /api/1.0.
"""

from hoaxify.api.v1.routes import router

__all__ = ["router"]
