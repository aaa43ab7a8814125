"""
Service layer.

Each service encapsulates the business rules for one domain and talks
to the store through the ``Database`` handle it is constructed with.
API handlers obtain services through the dependency functions in
``api.deps`` and never touch SQL themselves.
"""
