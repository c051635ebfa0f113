"""
Liveness probe.

``GET /`` confirms the service is up and reports which database file
it is serving from.
"""

import os

from fastapi import APIRouter, Request

from phonebook_api.app.core.config import settings
from phonebook_api.app.schemas.contact import ServiceInfo

router = APIRouter()


@router.get("/", response_model=ServiceInfo)
async def service_info(request: Request) -> ServiceInfo:
    """Return the service name and the database file name."""
    return ServiceInfo(
        ok=True,
        service=settings.service_name,
        db=os.path.basename(request.app.state.db_path),
    )
