from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.schemas.auth import RegisterRequest, LoginRequest, UserResponse
from app.services import user_service

router = APIRouter(prefix="/auth", tags=["Auth"])


# ✅ USER REGISTRATION
@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=UserResponse)
def register(data: RegisterRequest, db: Session = Depends(get_db)):
    user = user_service.register_user(db, data)
    return UserResponse.model_validate(user)


# ✅ CREDENTIAL CHECK (no session is created; the caller keeps the user record)
@router.post("/login", response_model=UserResponse)
def login(data: LoginRequest, db: Session = Depends(get_db)):
    user = user_service.login_user(db, data)
    return UserResponse.model_validate(user)
