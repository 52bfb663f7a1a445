"""
Unit of Work Pattern - one database session and transaction per business operation

Architecture:
- UoW owns the session lifecycle
- UoW owns commit/rollback, leaving the block without commit rolls back
- Command repositories are bound to the UoW session so every write shares one transaction
- Use cases coordinate several repositories through the UoW
"""

from __future__ import annotations

import abc
from contextlib import AsyncExitStack
from typing import TYPE_CHECKING, Any, AsyncContextManager, Callable

from sqlalchemy.ext.asyncio import AsyncSession


if TYPE_CHECKING:
    from src.service.marketplace.app.interface.i_cart_command_repo import ICartCommandRepo
    from src.service.marketplace.app.interface.i_favorite_command_repo import (
        IFavoriteCommandRepo,
    )
    from src.service.marketplace.app.interface.i_product_command_repo import (
        IProductCommandRepo,
    )
    from src.service.marketplace.app.interface.i_product_view_command_repo import (
        IProductViewCommandRepo,
    )
    from src.service.marketplace.app.interface.i_purchase_command_repo import (
        IPurchaseCommandRepo,
    )
    from src.service.marketplace.app.interface.i_user_command_repo import IUserCommandRepo


class AbstractUnitOfWork(abc.ABC):
    """
    Abstract Unit of Work for the marketplace

    Responsibilities:
    - Manage database session lifecycle
    - Coordinate one transaction across multiple repositories
    - Provide commit/rollback interface

    Usage:
        async with uow:
            product = await uow.product_command_repo.set_status_if_available(...)
            await uow.purchase_command_repo.append(...)
            await uow.commit()
    """

    product_command_repo: IProductCommandRepo
    cart_command_repo: ICartCommandRepo
    purchase_command_repo: IPurchaseCommandRepo
    favorite_command_repo: IFavoriteCommandRepo
    product_view_command_repo: IProductViewCommandRepo
    user_command_repo: IUserCommandRepo

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(self, *args: Any) -> None:
        # No-op after commit, discards pending writes otherwise
        await self.rollback()

    async def commit(self) -> None:
        await self._commit()

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """
    SQLAlchemy implementation of Unit of Work

    A fresh session is opened on enter and closed on exit, so one instance
    maps to exactly one transaction. The DI container hands out a new
    instance per request (providers.Factory).
    """

    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory
        self._exit_stack: AsyncExitStack | None = None
        self.session: AsyncSession | None = None

    async def __aenter__(self) -> AbstractUnitOfWork:
        from src.service.marketplace.driven_adapter.repo.cart_command_repo_impl import (
            CartCommandRepoImpl,
        )
        from src.service.marketplace.driven_adapter.repo.favorite_command_repo_impl import (
            FavoriteCommandRepoImpl,
        )
        from src.service.marketplace.driven_adapter.repo.product_command_repo_impl import (
            ProductCommandRepoImpl,
        )
        from src.service.marketplace.driven_adapter.repo.product_view_command_repo_impl import (
            ProductViewCommandRepoImpl,
        )
        from src.service.marketplace.driven_adapter.repo.purchase_command_repo_impl import (
            PurchaseCommandRepoImpl,
        )
        from src.service.marketplace.driven_adapter.repo.user_command_repo_impl import (
            UserCommandRepoImpl,
        )

        self._exit_stack = AsyncExitStack()
        self.session = await self._exit_stack.enter_async_context(self.session_factory())

        # Repositories share the UoW session
        self.product_command_repo = ProductCommandRepoImpl(self.session)
        self.cart_command_repo = CartCommandRepoImpl(self.session)
        self.purchase_command_repo = PurchaseCommandRepoImpl(self.session)
        self.favorite_command_repo = FavoriteCommandRepoImpl(self.session)
        self.product_view_command_repo = ProductViewCommandRepoImpl(self.session)
        self.user_command_repo = UserCommandRepoImpl(self.session)

        return await super().__aenter__()

    async def __aexit__(self, *args: Any) -> None:
        try:
            await super().__aexit__(*args)
        finally:
            if self._exit_stack is not None:
                await self._exit_stack.aclose()
            self._exit_stack = None
            self.session = None

    async def _commit(self) -> None:
        if self.session is None:
            raise RuntimeError('Unit of work used outside "async with"')
        await self.session.commit()

    async def rollback(self) -> None:
        if self.session is not None:
            await self.session.rollback()
