"""
Application package initializer.

Contains the application factory and its submodules: ``core``
(configuration, logging, database, client cookie and media handling),
``schemas`` (pydantic payloads), ``services`` (the in-memory concert
store and the SQLite backed entity services) and ``api`` (versioned
routers).
"""

from .main import app, create_app  # noqa: F401
