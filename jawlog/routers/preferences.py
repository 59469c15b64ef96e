"""
Preference router.

GET    /preferences/{type}            — the user's labels for one list field
GET    /preferences/{type}/defaults   — suggested labels
POST   /preferences/{type}            — add a label
DELETE /preferences/{type}/{id}       — remove a label
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from jawlog.core.context import UserContext, get_user_context
from jawlog.db.base import get_db
from jawlog.models.preference import DefaultPreference, PreferenceType, UserPreference
from jawlog.schemas.preferences import DefaultPreferenceOut, PreferenceCreate, PreferenceOut
from jawlog.services.preferences import (
    add_preference,
    list_default_preferences,
    list_preferences,
    remove_preference,
)

router = APIRouter(prefix="/preferences", tags=["preferences"])


def _ev(v) -> str:
    """Extract bare string value from a str-enum or plain str."""
    return v.value if hasattr(v, "value") else str(v)


def _pref_out(p: UserPreference) -> PreferenceOut:
    return PreferenceOut(
        id=p.id,
        preference_type=_ev(p.preference_type),
        preference_value=p.preference_value,
        is_default=p.is_default,
    )


def _default_out(p: DefaultPreference) -> DefaultPreferenceOut:
    return DefaultPreferenceOut(
        id=p.id,
        preference_type=_ev(p.preference_type),
        preference_value=p.preference_value,
    )


@router.get("/{preference_type}", response_model=list[PreferenceOut], summary="List the user's labels")
def get_preferences(
    preference_type: PreferenceType,
    ctx: UserContext = Depends(get_user_context),
    db: Session = Depends(get_db),
):
    return [_pref_out(p) for p in list_preferences(db, ctx, preference_type)]


@router.get(
    "/{preference_type}/defaults",
    response_model=list[DefaultPreferenceOut],
    summary="List suggested labels",
)
def get_default_preferences(preference_type: PreferenceType, db: Session = Depends(get_db)):
    return [_default_out(p) for p in list_default_preferences(db, preference_type)]


@router.post(
    "/{preference_type}",
    response_model=PreferenceOut,
    status_code=status.HTTP_201_CREATED,
    summary="Add a label",
    responses={200: {"description": "Label already existed; existing row returned."}},
)
def create_preference(
    preference_type: PreferenceType,
    payload: PreferenceCreate,
    response: Response,
    ctx: UserContext = Depends(get_user_context),
    db: Session = Depends(get_db),
):
    pref, created = add_preference(
        db, ctx, preference_type, payload.preference_value, is_default=payload.is_default
    )
    if not created:
        response.status_code = status.HTTP_200_OK
    return _pref_out(pref)


@router.delete(
    "/{preference_type}/{preference_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove a label",
    responses={404: {"description": "No such label for this user."}},
)
def delete_preference(
    preference_type: PreferenceType,
    preference_id: int,
    ctx: UserContext = Depends(get_user_context),
    db: Session = Depends(get_db),
):
    remove_preference(db, ctx, preference_type, preference_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
