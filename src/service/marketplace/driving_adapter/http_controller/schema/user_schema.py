from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, SecretStr


class RegisterRequest(BaseModel):
    username: str
    email: EmailStr
    password: SecretStr
    full_name: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'username': 'alice',
                'email': 'alice@example.com',
                'password': 'password123',
                'full_name': 'Alice Johnson',
            }
        }
    )


class LoginRequest(BaseModel):
    email: str
    password: SecretStr

    model_config = ConfigDict(
        json_schema_extra={'example': {'email': 'alice@example.com', 'password': 'password123'}}
    )


class ProfileUpdateRequest(BaseModel):
    full_name: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    profile_image_url: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'full_name': 'Alice Johnson',
                'phone': '+1-555-0101',
                'address': '123 Green Street',
            }
        }
    )


class UserResponse(BaseModel):
    id: int
    username: str
    email: str
    full_name: str = ''
    phone: str = ''
    address: str = ''
    profile_image_url: str = ''
    created_at: Optional[datetime] = None


class AuthResponse(BaseModel):
    model_config = {
        'json_schema_extra': {
            'example': {
                'message': 'Login successful',
                'token': 'eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...',
                'user': {'id': 1, 'username': 'alice', 'email': 'alice@example.com'},
            }
        },
    }

    message: str
    token: str
    user: UserResponse


class ProfileImageUpdateResponse(BaseModel):
    message: str
    profile_image_url: Optional[str] = None
