from .http import register_http_routes

__all__ = ["register_http_routes"]
