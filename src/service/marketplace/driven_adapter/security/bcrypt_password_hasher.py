import bcrypt
from pydantic import SecretStr

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_password_hasher import IPasswordHasher


class BcryptPasswordHasher(IPasswordHasher):
    """Concrete bcrypt implementation of IPasswordHasher"""

    def __init__(self, *, rounds: int = settings.BCRYPT_ROUNDS) -> None:
        self.rounds = rounds

    @Logger.io
    def hash_password(self, *, plain_password: SecretStr) -> str:
        password_bytes = plain_password.get_secret_value().encode('utf-8')
        hashed = bcrypt.hashpw(password_bytes, bcrypt.gensalt(rounds=self.rounds))
        return hashed.decode('utf-8')

    @Logger.io
    def verify_password(self, *, plain_password: SecretStr, hashed_password: str) -> bool:
        if not hashed_password:
            return False
        password_bytes = plain_password.get_secret_value().encode('utf-8')
        return bcrypt.checkpw(password_bytes, hashed_password.encode('utf-8'))
