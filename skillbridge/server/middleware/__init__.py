"""
Middleware modules for the SkillBridge server.

This package contains custom middleware for request/response logging
and timing.
"""

from .request_timing import RequestTimingMiddleware

__all__ = ["RequestTimingMiddleware"]
