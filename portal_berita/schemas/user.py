"""Pydantic schemas for `User` domain objects."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidationInfo, field_validator

from portal_berita.core.security import password_errors
from portal_berita.models.enums import Membership, Role


# Admin tidak bisa mendaftar sendiri
REGISTER_ROLES = {Role.PENULIS.value, Role.PEMBACA.value}
LOGIN_ROLES = {role.value for role in Role}
MEMBERSHIPS = {membership.value for membership in Membership}


def _normalize_email(v: str) -> str:
	if len(v) > 255:
		raise ValueError("Email maksimal 255 karakter")
	return v.strip().lower()


def _check_password(v: str) -> str:
	errors = password_errors(v)
	if errors:
		raise ValueError("; ".join(errors))
	return v


class RegisterRequest(BaseModel):
	username: str = Field(..., min_length=1, max_length=255)
	name: str = Field(..., min_length=1, max_length=255)
	email: EmailStr
	password: str
	password_confirmation: str
	role: str
	membership: str

	@field_validator("email")
	@classmethod
	def validate_email(cls, v: str) -> str:
		return _normalize_email(v)

	@field_validator("password")
	@classmethod
	def validate_password(cls, v: str) -> str:
		return _check_password(v)

	@field_validator("password_confirmation")
	@classmethod
	def validate_confirmation(cls, v: str, info: ValidationInfo) -> str:
		password = info.data.get("password")
		if password is not None and v != password:
			raise ValueError("Konfirmasi password tidak cocok")
		return v

	@field_validator("role")
	@classmethod
	def validate_role(cls, v: str) -> str:
		if v not in REGISTER_ROLES:
			raise ValueError(f"Role must be one of {sorted(REGISTER_ROLES)}")
		return v

	@field_validator("membership")
	@classmethod
	def validate_membership(cls, v: str) -> str:
		if v not in MEMBERSHIPS:
			raise ValueError(f"Membership must be one of {sorted(MEMBERSHIPS)}")
		return v

	model_config = ConfigDict(json_schema_extra={
		"example": {
			"username": "johndoe",
			"name": "John Doe",
			"email": "john@example.com",
			"password": "P@ssW0rd3",
			"password_confirmation": "P@ssW0rd3",
			"role": "pembaca",
			"membership": "free",
		}
	})


class LoginRequest(BaseModel):
	email: EmailStr
	password: str = Field(..., min_length=1)
	role: str

	@field_validator("email")
	@classmethod
	def validate_email(cls, v: str) -> str:
		return _normalize_email(v)

	@field_validator("role")
	@classmethod
	def validate_role(cls, v: str) -> str:
		if v not in LOGIN_ROLES:
			raise ValueError(f"Role must be one of {sorted(LOGIN_ROLES)}")
		return v

	model_config = ConfigDict(json_schema_extra={
		"example": {
			"email": "john@example.com",
			"password": "P@ssW0rd3",
			"role": "pembaca",
		}
	})


class LoginResponse(BaseModel):
	message: str = "Login berhasil"
	access_token: str
	token_type: str = "Bearer"
	role: str
	membership: str


class UserResponse(BaseModel):
	"""Proyeksi publik user. Password tidak pernah ikut dikirim."""
	id_user: int
	username: str
	name: str
	email: str
	role: str
	membership: str

	model_config = ConfigDict(from_attributes=True)


class PenulisSummary(BaseModel):
	id_user: int
	username: str
	name: str
	email: str
	role: str

	model_config = ConfigDict(from_attributes=True)


class RegisterResponse(BaseModel):
	success: bool = True
	message: str = "User berhasil didaftarkan"
	data: UserResponse


class UserUpdate(BaseModel):
	username: Optional[str] = Field(None, min_length=1, max_length=255)
	name: Optional[str] = Field(None, min_length=1, max_length=255)
	email: Optional[EmailStr] = None
	old_password: Optional[str] = None
	new_password: Optional[str] = None

	@field_validator("email")
	@classmethod
	def validate_email(cls, v: Optional[str]) -> Optional[str]:
		if v is None:
			return v
		return _normalize_email(v)

	@field_validator("new_password")
	@classmethod
	def validate_new_password(cls, v: Optional[str]) -> Optional[str]:
		if v is None:
			return v
		return _check_password(v)

	@field_validator("old_password")
	@classmethod
	def validate_old_password(cls, v: Optional[str]) -> Optional[str]:
		if v is not None and not v:
			raise ValueError("Password lama tidak boleh kosong")
		return v

	model_config = ConfigDict(json_schema_extra={
		"example": {
			"name": "John D.",
			"old_password": "P@ssW0rd3",
			"new_password": "N3w@Passw0rd",
		}
	})


class MessageResponse(BaseModel):
	success: bool = True
	message: str
