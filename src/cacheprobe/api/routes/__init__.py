# src/cacheprobe/api/routes/__init__.py
"""API routes."""

from .probe import router as probe_router

__all__ = ["probe_router"]
