"""
Service layer abstraction.

Each service encapsulates the queries for one catalog collection.
Handlers never touch the in‑memory collections directly, so the
static fixtures could be swapped for another data source without
changing the API layer.
"""
