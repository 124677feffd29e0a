"""Realtime matchmaking and chat relay over Socket.IO."""

from .server import chat_hub, create_socket_app, sio  # noqa: F401
