"""
Exercise Tracker - Request Body Dependencies
==============================================

What:  Reads POST bodies sent either as HTML form data or as JSON and
       loads them into the request schemas. JSON scalars are cast to text
       there, so only a malformed JSON document is rejected (400).
Who:   Used as Depends() by the users router.

Content types:
    application/x-www-form-urlencoded, multipart/form-data → form fields
    application/json                                        → top-level object
    anything else / empty body                              → no fields
"""

from typing import Any, Dict

from fastapi import Depends, Request

from exercise_tracker.exceptions import ValidationError
from exercise_tracker.schemas.exercise import ExerciseCreate
from exercise_tracker.schemas.user import UserCreate

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def read_body(request: Request) -> Dict[str, Any]:
    """Return the body's fields as a dict, whichever encoding the client used."""
    content_type = request.headers.get("content-type", "").lower()

    if content_type.startswith("application/json"):
        try:
            data = await request.json()
        except ValueError:
            raise ValidationError("Request body is not valid JSON")
        return data if isinstance(data, dict) else {}

    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        # Uploaded files are not part of any request schema
        return {key: value for key, value in form.items() if isinstance(value, str)}

    return {}


async def user_body(data: Dict[str, Any] = Depends(read_body)) -> UserCreate:
    return UserCreate.model_validate(data)


async def exercise_body(data: Dict[str, Any] = Depends(read_body)) -> ExerciseCreate:
    return ExerciseCreate.model_validate(data)
