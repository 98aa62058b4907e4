"""
User administration endpoints.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.schemas.auth import UserResponse
from app.schemas.common import DeleteResponse
from app.services import user_service

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("", response_model=List[UserResponse])
def list_users(db: Session = Depends(get_db)):
    """List every user. No pagination."""
    return [UserResponse.model_validate(user) for user in user_service.get_all_users(db)]


@router.get("/{user_id}", response_model=Optional[UserResponse])
def get_user(user_id: int, db: Session = Depends(get_db)):
    """Return the user, or null if it does not exist."""
    user = user_service.get_user_by_id(db, user_id)
    return UserResponse.model_validate(user) if user else None


@router.delete("/{user_id}", response_model=DeleteResponse)
def delete_user(user_id: int, db: Session = Depends(get_db)):
    """
    Delete a user with its profile, postings and applications.
    
    Deleting a missing user is not an error; the response says whether anything was removed.
    """
    return DeleteResponse(deleted=user_service.delete_user(db, user_id))
