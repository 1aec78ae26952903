"""Transports exposing a ToolServer to remote agents."""

from toolhost.transport.http import create_app, serve

__all__ = ["create_app", "serve"]
