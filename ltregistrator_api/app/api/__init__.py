"""
HTTP layer: route tables, request validation and the endpoint
handlers that call the data-access services.
"""
