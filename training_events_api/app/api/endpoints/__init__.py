"""
Endpoint modules.

Each module defines an ``APIRouter`` for one domain; ``api.router``
includes them all.
"""
