"""
Service layer for the API.

Services hold the operations behind each endpoint.  They work on the
store they are given and raise ``ValueError`` subclasses which the
endpoint modules translate into HTTP responses.
"""
