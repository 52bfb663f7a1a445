"""
JWT issuing and verification for the HTTP layer
"""

from datetime import datetime, timedelta, timezone
from typing import Dict, Optional

import jwt

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import AuthenticationError
from src.service.marketplace.domain.entity.user_entity import UserEntity


class JwtAuth:
    def __init__(self) -> None:
        self.secret = settings.SECRET_KEY.get_secret_value()
        self.algorithm = settings.ALGORITHM
        self.token_expire_hours = settings.ACCESS_TOKEN_EXPIRE_HOURS

    def create_jwt_token(self, user_entity: UserEntity) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            'sub': str(user_entity.id),
            'exp': now + timedelta(hours=self.token_expire_hours),
            'iat': now,
            'user_id': user_entity.id,
            'username': user_entity.username,
            'email': user_entity.email,
        }

        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def decode_jwt_token(self, token: str) -> Dict:
        try:
            return jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.PyJWTError:
            raise AuthenticationError('Invalid token') from None

    def get_current_user_info_from_jwt(self, token: Optional[str]) -> UserEntity:
        if not token:
            raise AuthenticationError('Access token required')

        payload = self.decode_jwt_token(token)

        user_id = payload.get('user_id')
        username = payload.get('username')
        email = payload.get('email')
        if not isinstance(user_id, int) or not username or not email:
            raise AuthenticationError('Invalid token')

        # Rebuild UserEntity from JWT payload (no DB query)
        return UserEntity(id=user_id, username=username, email=email)
