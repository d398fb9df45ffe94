"""Backend for the bilingual (English/Tamil) TLS content site.

The package is split the usual way: ``domain`` holds plain entities and
exceptions, ``infrastructure`` the database, storage and security adapters,
``application`` the use cases and ``interfaces`` the HTTP layer.
"""
