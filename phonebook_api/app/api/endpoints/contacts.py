"""
Contact endpoints.

These routes expose CRUD operations on contacts.  Request bodies are
read leniently (see ``read_json_object``) and validated with
``ContactWrite``; validation failures are reported as HTTP 400 rather
than FastAPI's default 422 so clients get one fixed message for a
missing name or phone.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from pydantic import ValidationError

from phonebook_api.app.api.deps import get_contact_service, read_json_object
from phonebook_api.app.schemas.contact import ContactRead, ContactWrite
from phonebook_api.app.services.contact_service import ContactService

router = APIRouter()

REQUIRED_FIELDS_MESSAGE = "Name and phone are required."
NOT_FOUND_MESSAGE = "Contact not found."


def _parse_contact(payload: Dict[str, Any]) -> ContactWrite:
    try:
        return ContactWrite.model_validate(payload)
    except ValidationError as exc:
        fields = {error["loc"][0] for error in exc.errors() if error["loc"]}
        if fields & {"name", "phone"}:
            detail = REQUIRED_FIELDS_MESSAGE
        else:
            detail = "Email must be a string."
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


@router.get("", response_model=List[ContactRead])
async def list_contacts(service: ContactService = Depends(get_contact_service)) -> List[ContactRead]:
    """Return all contacts sorted by name."""
    return await service.list_contacts()


@router.get("/{contact_id}", response_model=ContactRead)
async def get_contact(
    contact_id: str,
    service: ContactService = Depends(get_contact_service),
) -> ContactRead:
    """Retrieve a single contact by ID, or 404."""
    contact = await service.get_contact(contact_id)
    if contact is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_MESSAGE)
    return contact


@router.post("", response_model=ContactRead, status_code=status.HTTP_201_CREATED)
async def create_contact(
    payload: Dict[str, Any] = Depends(read_json_object),
    service: ContactService = Depends(get_contact_service),
) -> ContactRead:
    """Create a contact; ``name`` and ``phone`` are required."""
    return await service.create_contact(_parse_contact(payload))


@router.put("/{contact_id}", response_model=ContactRead)
async def update_contact(
    contact_id: str,
    payload: Dict[str, Any] = Depends(read_json_object),
    service: ContactService = Depends(get_contact_service),
) -> ContactRead:
    """Replace name, phone and email of an existing contact.

    The body is validated before the lookup, so an invalid body for an
    unknown ID yields 400, not 404.
    """
    data = _parse_contact(payload)
    contact = await service.update_contact(contact_id, data)
    if contact is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_MESSAGE)
    return contact


@router.delete("/{contact_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_contact(
    contact_id: str,
    service: ContactService = Depends(get_contact_service),
) -> Response:
    """Delete a contact; 204 with an empty body, or 404."""
    deleted = await service.delete_contact(contact_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_MESSAGE)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
