"""
Endpoint modules.

Each module defines an APIRouter for one concern.  The routers are
aggregated in ``router.py`` at the package level.
"""
