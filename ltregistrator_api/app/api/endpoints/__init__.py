"""
Endpoint modules.

Each module describes its routes in a ``ROUTES`` table and exposes the
resulting ``router``.  The routers are aggregated in ``api/router.py``.
"""
