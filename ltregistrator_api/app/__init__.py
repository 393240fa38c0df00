"""
Application package for the LTRegistrator API.

``main`` builds the FastAPI app; ``api`` holds the route tables and
endpoint handlers; ``services`` the SQLite data access; ``schemas`` the
transfer objects and ``models`` the domain records, converted into each
other by ``mapping``.  ``core`` contains configuration, logging,
database bootstrap, security and the shared error kinds.
"""

from .main import app  # noqa: F401
