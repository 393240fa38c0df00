"""
Data-access layer.

Each service wraps the SQLite storage for one resource and reports
failures with the exceptions in ``core.exceptions``.  Services are
plain objects constructed with a database path, so the application
factory (or a test) decides which storage they use.
"""
