"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.database.orm_db_setting import Database
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.service.marketplace.driven_adapter.repo.cart_query_repo_impl import CartQueryRepoImpl
from src.service.marketplace.driven_adapter.repo.category_repo_impl import CategoryRepoImpl
from src.service.marketplace.driven_adapter.repo.favorite_query_repo_impl import (
    FavoriteQueryRepoImpl,
)
from src.service.marketplace.driven_adapter.repo.product_query_repo_impl import (
    ProductQueryRepoImpl,
)
from src.service.marketplace.driven_adapter.repo.purchase_query_repo_impl import (
    PurchaseQueryRepoImpl,
)
from src.service.marketplace.driven_adapter.repo.user_query_repo_impl import UserQueryRepoImpl
from src.service.marketplace.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)
from src.service.marketplace.driven_adapter.storage.local_image_store import LocalImageStore
from src.service.marketplace.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


class Container(containers.DeclarativeContainer):
    # Database (engine is created lazily by AsyncEngineManager)
    database = providers.Singleton(Database)

    # Unit of Work: one per request, owns the checkout transaction
    unit_of_work = providers.Factory(
        SqlAlchemyUnitOfWork, session_factory=database.provided.session
    )

    # Query repositories (stateless - open a session per call)
    user_query_repo = providers.Singleton(
        UserQueryRepoImpl, session_factory=database.provided.session
    )
    category_repo = providers.Singleton(
        CategoryRepoImpl, session_factory=database.provided.session
    )
    product_query_repo = providers.Singleton(
        ProductQueryRepoImpl, session_factory=database.provided.session
    )
    cart_query_repo = providers.Singleton(
        CartQueryRepoImpl, session_factory=database.provided.session
    )
    favorite_query_repo = providers.Singleton(
        FavoriteQueryRepoImpl, session_factory=database.provided.session
    )
    purchase_query_repo = providers.Singleton(
        PurchaseQueryRepoImpl, session_factory=database.provided.session
    )

    # Auth services
    jwt_auth = providers.Singleton(JwtAuth)
    password_hasher = providers.Singleton(BcryptPasswordHasher)

    # Listing and profile pictures
    image_store = providers.Singleton(LocalImageStore)


container = Container()


def cleanup() -> None:
    container.reset_singletons()
