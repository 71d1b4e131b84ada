"""
Backend package initializer.

Exposes the source tree (backend/src) as a Python package so the build script
and tests can import modules via the ``backend.src`` namespace.
"""

__all__ = ["src"]
