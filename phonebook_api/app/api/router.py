"""
Top-level router.

Aggregates the probe and contact routers.  Paths are served without a
version prefix because existing clients call ``/contacts`` directly.
"""

from fastapi import APIRouter

from .endpoints import contacts, status

router = APIRouter()

router.include_router(status.router, tags=["status"])
router.include_router(contacts.router, prefix="/contacts", tags=["contacts"])
