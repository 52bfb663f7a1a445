from abc import ABC, abstractmethod

from src.service.marketplace.domain.entity.user_entity import UserEntity


class IUserCommandRepo(ABC):
    """User Command Repository - handles write operations inside a unit of work"""

    @abstractmethod
    async def create(self, *, user_entity: UserEntity) -> UserEntity:
        """Raises DomainError when the username or email is taken"""
        pass

    @abstractmethod
    async def update_profile(self, *, user_entity: UserEntity) -> UserEntity:
        pass
