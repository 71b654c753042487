"""Bridge layer between the arc19 core and its external collaborators.

Modules
-------
address
    Algorand checksummed address text form for 32-byte reserve values.
http
    Shared ``requests`` session factory (timeouts, optional retries).
indexer
    ``Indexer`` Protocol plus a REST client for the Algorand indexer v2 API:
    current asset params and paginated asset-config transaction search.
"""
