from typing import Annotated
from pydantic import BaseModel, EmailStr, Field, StringConstraints, field_validator
from datetime import datetime

UsernameStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=3, max_length=50)]
NameStr = Annotated[str, StringConstraints(strip_whitespace=True, max_length=100)]
PasswordStr = Annotated[str, Field(min_length=12, max_length=128)]


def _password_policy(v: str) -> str:
    # OWASP-ish: require lower, upper, digit, special
    if not any(c.islower() for c in v):
        raise ValueError("password must include a lowercase letter")
    if not any(c.isupper() for c in v):
        raise ValueError("password must include an uppercase letter")
    if not any(c.isdigit() for c in v):
        raise ValueError("password must include a digit")
    if not any(not c.isalnum() for c in v):
        raise ValueError("password must include a special character")
    return v


class UserRegister(BaseModel):
    username: UsernameStr
    email: EmailStr = Field(max_length=255)
    # no regex here: Pydantic v2 core regex doesn't support look-arounds
    password: PasswordStr
    first_name: NameStr | None = None
    last_name: NameStr | None = None

    @field_validator("password")
    @classmethod
    def password_policy(cls, v: str) -> str:
        return _password_policy(v)

class UserLogin(BaseModel):
    email: EmailStr
    password: Annotated[str, Field(min_length=1, max_length=256)]

class UserRead(BaseModel):
    id: int
    username: str
    email: str
    first_name: str | None = None
    last_name: str | None = None
    profile_image: str | None = None
    is_active: bool
    created_at: datetime | None = None
    last_login: datetime | None = None

    model_config = {"from_attributes": True}

class LoginResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserRead

class ProfileUpdate(BaseModel):
    # Every field is written; omitted ones are stored as null
    first_name: NameStr | None = None
    last_name: NameStr | None = None
    profile_image: Annotated[str, Field(max_length=500)] | None = None

class PasswordChange(BaseModel):
    current_password: Annotated[str, Field(min_length=1, max_length=256)]
    new_password: PasswordStr

    @field_validator("new_password")
    @classmethod
    def password_policy(cls, v: str) -> str:
        return _password_policy(v)
