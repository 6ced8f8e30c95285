from ._server_connection import ServerConnection

__all__ = ["ServerConnection"]
