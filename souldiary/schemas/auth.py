from pydantic import BaseModel, ConfigDict, Field, field_validator

# bcrypt 는 72 "바이트"까지만 해시한다 (한글 한 글자 = 3바이트)
BCRYPT_MAX_BYTES = 72


def _check_bcrypt_length(v: str) -> str:
    if len(v.encode("utf-8")) > BCRYPT_MAX_BYTES:
        raise ValueError(f"Password must be at most {BCRYPT_MAX_BYTES} bytes in UTF-8")
    return v


class TokenIdentity(BaseModel):
    """토큰에서 복원한 요청자 식별 정보"""

    model_config = ConfigDict(extra="ignore")

    user_id: str = Field(..., min_length=1)
    name: str


class SignupRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    user_id: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=1)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, v: str) -> str:
        return _check_bcrypt_length(v)


class LoginRequest(BaseModel):
    user_id: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class ChangePasswordRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    current_password: str = Field(..., min_length=1, alias="currentPassword")
    new_password: str = Field(..., min_length=1, alias="newPassword")

    @field_validator("new_password")
    @classmethod
    def new_password_fits_bcrypt(cls, v: str) -> str:
        return _check_bcrypt_length(v)


class LoginResult(BaseModel):
    token: str
    user: TokenIdentity
