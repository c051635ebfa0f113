"""
Shared FastAPI dependencies.

``get_contact_service`` hands endpoints the ``ContactService`` created
at startup.  ``read_json_object`` parses the request body leniently: a
missing, malformed or non-object body yields an empty dict, so it fails
field validation like any other incomplete payload.
"""

import json
from typing import Any, Dict

from fastapi import Request

from phonebook_api.app.services.contact_service import ContactService


def get_contact_service(request: Request) -> ContactService:
    """Return the ``ContactService`` created by the application lifespan."""
    return request.app.state.contact_service


async def read_json_object(request: Request) -> Dict[str, Any]:
    """Parse the body as a JSON object, or return ``{}`` if it is not one."""
    body = await request.body()
    if not body:
        return {}
    try:
        payload = json.loads(body)
    except ValueError:
        return {}
    return payload if isinstance(payload, dict) else {}
