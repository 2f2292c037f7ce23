from __future__ import annotations
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from fittrack.db import get_db
from fittrack.schemas.user import PasswordChange, ProfileUpdate, UserRead
from fittrack.deps.auth import require_self
from fittrack.services.account import AccountService

router = APIRouter(prefix="/users", tags=["users"])

@router.get("/{user_id}", response_model=UserRead, dependencies=[Depends(require_self)])
def get_user(user_id: int, db: Session = Depends(get_db)):
    return AccountService(db).get_user(user_id)

@router.put("/{user_id}", response_model=UserRead, dependencies=[Depends(require_self)])
def update_profile(user_id: int, payload: ProfileUpdate, db: Session = Depends(get_db)):
    # Full overwrite: fields left out of the body are cleared
    return AccountService(db).update_profile(user_id, payload.model_dump())

@router.put("/{user_id}/password", status_code=status.HTTP_204_NO_CONTENT,
            dependencies=[Depends(require_self)])
def change_password(user_id: int, payload: PasswordChange, db: Session = Depends(get_db)):
    AccountService(db).change_password(
        user_id,
        current_password=payload.current_password,
        new_password=payload.new_password,
    )

@router.delete("/{user_id}", response_model=UserRead, dependencies=[Depends(require_self)])
def deactivate(user_id: int, db: Session = Depends(get_db)):
    # Accounts are never removed, only switched off
    return AccountService(db).deactivate(user_id)
