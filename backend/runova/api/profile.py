from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from runova.api.deps import CurrentUser, get_current_user
from runova.core.config import settings
from runova.core.errors import NotFound, StorageError, ValidationError
from runova.db import get_db
from runova.models.profile import Profile
from runova.schemas.profile import ProfileCreate, ProfileRead, ProfileUpdate


router = APIRouter(prefix="/profile", tags=["profile"])


def _save(db: Session, row: Profile) -> Profile:
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise StorageError("Failed to save profile") from e
    db.refresh(row)
    return row


@router.get("/", response_model=ProfileRead)
def get_profile(user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    row = db.get(Profile, user.id)
    if not row:
        raise NotFound("Profile not set")
    return row


@router.post("/", response_model=ProfileRead)
def create_profile(
    payload: ProfileCreate,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Onboarding. Calling it again just updates the stored name/unit."""
    row = db.get(Profile, user.id)
    if not row:
        if not user.email:
            raise ValidationError("Token has no email claim", field="email")
        row = Profile(
            id=user.id,
            email=user.email,
            full_name=payload.full_name,
            distance_unit=(payload.distance_unit.value if payload.distance_unit else settings.default_distance_unit),
        )
        db.add(row)
    else:
        row.full_name = payload.full_name
        if payload.distance_unit:
            row.distance_unit = payload.distance_unit.value
    return _save(db, row)


@router.put("/", response_model=ProfileRead)
def update_profile(
    payload: ProfileUpdate,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    row = db.get(Profile, user.id)
    if not row:
        raise NotFound("Profile not set")

    update_data = payload.model_dump(exclude_unset=True)
    if "full_name" in update_data:
        row.full_name = update_data["full_name"]
    if update_data.get("distance_unit") is not None:
        row.distance_unit = update_data["distance_unit"].value
    return _save(db, row)
