"""
Person record routes - server-rendered list, create, edit and delete pages.
Every data access goes through the people service; no direct database access.
"""

import logging
from typing import Any, Dict, List, Optional
from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import RedirectResponse

from services.people_service import PeopleService, get_people_service
from utils.templates import templates
from utils.validation import validate_person_form

router = APIRouter()
logger = logging.getLogger(__name__)

DB_UNAVAILABLE_MESSAGE = "Database is not connected. Please start the database and try again."
PERSON_NOT_FOUND = "Person not found"

FORM_FIELDS = ("name", "age", "gender", "mobileNumber")


async def read_submitted_fields(request: Request) -> Dict[str, Any]:
    """Submitted person fields from a urlencoded, multipart or JSON body"""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            body = await request.json()
        except ValueError:
            return {}
        submitted = body if isinstance(body, dict) else {}
    else:
        submitted = await request.form()
    return {
        field: submitted.get(field)
        for field in FORM_FIELDS
        if isinstance(submitted.get(field), (str, int, float))
    }


def render_form(
    request: Request,
    template_name: str,
    person: Optional[Dict[str, Any]],
    errors: Optional[List[str]],
    status_code: int = 200
):
    return templates.TemplateResponse(
        request,
        template_name,
        {"person": person, "errors": errors},
        status_code=status_code
    )


def redirect_to_list() -> RedirectResponse:
    return RedirectResponse(url="/person", status_code=303)


async def require_store(people: PeopleService):
    """Fail fast with 503 when the store cannot be reached"""
    if not await people.is_available():
        raise HTTPException(status_code=503, detail=DB_UNAVAILABLE_MESSAGE)


@router.get("")
async def list_people(
    request: Request,
    people: PeopleService = Depends(get_people_service)
):
    """Table of all people, newest first"""
    if not await people.is_available():
        return templates.TemplateResponse(request, "db_unavailable.html", {}, status_code=503)

    try:
        result = await people.list_all()
        if not result.success:
            raise HTTPException(status_code=500, detail=f"Error fetching people: {result.error}")

        return templates.TemplateResponse(request, "list.html", {"people": result.data})

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to list people: {e}")
        raise HTTPException(status_code=500, detail=f"Error fetching people: {str(e)}")


@router.get("/new")
async def new_person_form(request: Request):
    """Empty creation form"""
    return render_form(request, "create.html", person=None, errors=None)


@router.post("")
async def create_person(
    request: Request,
    people: PeopleService = Depends(get_people_service)
):
    """Validate the submitted fields and create a person"""
    submitted = await read_submitted_fields(request)

    if not await people.is_available():
        return render_form(request, "create.html", submitted, [DB_UNAVAILABLE_MESSAGE], status_code=503)

    fields, errors = validate_person_form(submitted)
    if errors:
        return render_form(request, "create.html", submitted, errors)

    try:
        result = await people.insert(fields)
        if not result.success:
            return render_form(
                request, "create.html", submitted,
                [f"Error creating person: {result.error}"], status_code=500
            )

        return redirect_to_list()

    except Exception as e:
        logger.error(f"Failed to create person: {e}")
        return render_form(
            request, "create.html", submitted,
            [f"Error creating person: {str(e)}"], status_code=500
        )


@router.get("/{person_id}/edit")
async def edit_person_form(
    person_id: str,
    request: Request,
    people: PeopleService = Depends(get_people_service)
):
    """Edit form pre-filled with the stored values"""
    await require_store(people)

    try:
        result = await people.get_by_id(person_id)
        if result.not_found:
            raise HTTPException(status_code=404, detail=PERSON_NOT_FOUND)
        if not result.success:
            raise HTTPException(status_code=500, detail=f"Error fetching person: {result.error}")

        return render_form(request, "edit.html", result.data[0].to_form_values(), errors=None)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to fetch person {person_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Error fetching person: {str(e)}")


@router.put("/{person_id}")
async def update_person(
    person_id: str,
    request: Request,
    people: PeopleService = Depends(get_people_service)
):
    """Validate the submitted fields and update the person"""
    await require_store(people)
    submitted = await read_submitted_fields(request)

    try:
        fields, errors = validate_person_form(submitted)
        if errors:
            current = await people.get_by_id(person_id)
            if current.not_found:
                raise HTTPException(status_code=404, detail=PERSON_NOT_FOUND)
            if not current.success:
                raise HTTPException(status_code=500, detail=f"Error updating person: {current.error}")

            # Stored values overlaid with what the user just typed
            person = {**current.data[0].to_form_values(), **submitted}
            return render_form(request, "edit.html", person, errors)

        result = await people.update_by_id(person_id, fields)
        if result.not_found:
            raise HTTPException(status_code=404, detail=PERSON_NOT_FOUND)
        if not result.success:
            raise HTTPException(status_code=500, detail=f"Error updating person: {result.error}")

        return redirect_to_list()

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to update person {person_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Error updating person: {str(e)}")


@router.get("/{person_id}/delete")
async def delete_person_confirmation(
    person_id: str,
    request: Request,
    people: PeopleService = Depends(get_people_service)
):
    """Ask for confirmation before deleting"""
    await require_store(people)

    try:
        result = await people.get_by_id(person_id)
        if result.not_found:
            raise HTTPException(status_code=404, detail=PERSON_NOT_FOUND)
        if not result.success:
            raise HTTPException(status_code=500, detail=f"Error fetching person: {result.error}")

        return templates.TemplateResponse(request, "delete.html", {"person": result.data[0]})

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to fetch person {person_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Error fetching person: {str(e)}")


@router.delete("/{person_id}")
async def delete_person(
    person_id: str,
    people: PeopleService = Depends(get_people_service)
):
    """Delete the person and go back to the list"""
    await require_store(people)

    try:
        result = await people.delete_by_id(person_id)
        if result.not_found:
            raise HTTPException(status_code=404, detail=PERSON_NOT_FOUND)
        if not result.success:
            raise HTTPException(status_code=500, detail=f"Error deleting person: {result.error}")

        return redirect_to_list()

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to delete person {person_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Error deleting person: {str(e)}")
