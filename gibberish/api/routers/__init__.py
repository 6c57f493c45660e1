"""
API Routers Package
Exposes all route modules for the gibberish service
"""

from . import gibberish_router

__all__ = [
    "gibberish_router",
]
