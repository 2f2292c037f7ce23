from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from fittrack.db import get_db
from fittrack.models import User
from fittrack.schemas.user import UserRegister, UserLogin, UserRead, LoginResponse
from fittrack.security import create_access_token
from fittrack.deps.auth import get_current_user
from fittrack.services.account import AccountService

router = APIRouter(prefix="/auth", tags=["auth"])

@router.post("/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register(payload: UserRegister, db: Session = Depends(get_db)):
    return AccountService(db).register(
        username=payload.username,
        email=payload.email,
        password=payload.password,
        first_name=payload.first_name,
        last_name=payload.last_name,
    )

@router.post("/login", response_model=LoginResponse)
def login(payload: UserLogin, db: Session = Depends(get_db)):
    user = AccountService(db).authenticate(email=payload.email, password=payload.password)
    token = create_access_token(sub=str(user.id))
    return {"access_token": token, "token_type": "bearer", "user": user}

@router.get("/me", response_model=UserRead)
def me(current_user: User = Depends(get_current_user)):
    return current_user
