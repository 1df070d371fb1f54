"""HTTP presentation layer for yield estimates."""

from carry.server.app import create_app

__all__ = ["create_app"]
