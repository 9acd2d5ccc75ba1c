"""
Service layer abstraction.

The car store encapsulates all state of the service.  Handlers talk to
it through a small CRUD interface, so the in‑memory mapping used here
could be swapped for a database without changing the API layer.
"""
