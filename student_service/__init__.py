"""Student records service.

This package exposes the HTTP controllers, services, repositories and
models used by the FastAPI application. Individual modules contain the
concrete implementations and documentation.
"""

__version__ = "1.0.0"
