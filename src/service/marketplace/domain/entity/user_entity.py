from datetime import datetime
from typing import Optional

import attrs
from pydantic import SecretStr

from src.platform.exception.exceptions import AuthenticationError, ValidationError
from src.service.marketplace.app.interface.i_password_hasher import IPasswordHasher


MIN_PASSWORD_LENGTH = 6


@attrs.define
class UserEntity:
    username: str = ''
    email: str = ''
    hashed_password: str = attrs.field(default='', repr=False)  # Hide from repr for security
    full_name: str = ''
    phone: str = ''
    address: str = ''
    profile_image_url: str = ''
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    @classmethod
    def register(
        cls,
        *,
        username: str,
        email: str,
        plain_password: str,
        password_hasher: IPasswordHasher,
        full_name: Optional[str] = None,
    ) -> 'UserEntity':
        if not username or not username.strip() or not email or not plain_password:
            raise ValidationError('Username, email, and password are required')
        if len(plain_password) < MIN_PASSWORD_LENGTH:
            raise ValidationError('Password must be at least 6 characters long')

        user = cls(
            username=username.strip(),
            email=email.strip().lower(),
            full_name=full_name or '',
        )
        user.set_password(plain_password, password_hasher)
        return user

    def set_password(self, plain_password: str, password_hasher: IPasswordHasher) -> None:
        """Set password using provided password hasher"""
        if not isinstance(password_hasher, IPasswordHasher):
            raise TypeError('password_hasher must implement IPasswordHasher interface')

        # Use SecretStr to protect sensitive password data
        self.hashed_password = password_hasher.hash_password(
            plain_password=SecretStr(plain_password)
        )

    def update_profile(
        self,
        *,
        full_name: Optional[str] = None,
        phone: Optional[str] = None,
        address: Optional[str] = None,
        profile_image_url: Optional[str] = None,
    ) -> 'UserEntity':
        # Omitted fields are cleared, matching a full PUT of the profile form
        return attrs.evolve(
            self,
            full_name=full_name or '',
            phone=phone or '',
            address=address or '',
            profile_image_url=profile_image_url or '',
        )

    @staticmethod
    def validate_user_exists(user_entity: Optional['UserEntity']) -> 'UserEntity':
        if not user_entity:
            raise AuthenticationError('Invalid credentials')
        return user_entity
