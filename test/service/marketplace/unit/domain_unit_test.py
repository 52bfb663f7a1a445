from decimal import Decimal

import pytest

from src.platform.exception.exceptions import (
    AuthenticationError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from src.service.marketplace.domain.entity.product_entity import ProductEntity, normalize_price
from src.service.marketplace.domain.entity.user_entity import UserEntity
from src.service.marketplace.domain.enum.product_status import ProductCondition, ProductStatus
from src.service.marketplace.domain.value_object.checkout_failure import (
    CheckoutFailure,
    CheckoutFailureReason,
)
from src.service.marketplace.domain.value_object.checkout_result import CheckoutResult
from src.service.marketplace.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)
from src.service.marketplace.driving_adapter.http_controller.auth.current_user import (
    extract_token,
)
from src.service.marketplace.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


@pytest.mark.unit
class TestProductEntity:
    @pytest.mark.parametrize(
        'raw,expected',
        [('10', Decimal('10.00')), (10.005, Decimal('10.01')), ('0.01', Decimal('0.01'))],
    )
    def test_price_is_quantized_to_cents(self, raw, expected):
        assert normalize_price(raw) == expected

    @pytest.mark.parametrize('raw', [None, True, 0, '-3', 'NaN', 'Infinity', 'ten'])
    def test_price_must_be_a_positive_number(self, raw):
        with pytest.raises(ValidationError):
            normalize_price(raw)

    def test_create_defaults(self):
        product = ProductEntity.create(owner_id=1, title='Kettle', price='8')

        assert product.status == ProductStatus.AVAILABLE
        assert product.condition == ProductCondition.GOOD
        assert product.description == ''
        assert product.is_available

    def test_revise_keeps_image_and_condition_when_omitted(self):
        product = ProductEntity.create(
            owner_id=1,
            title='Kettle',
            price='8',
            image_url='https://img/kettle.png',
            condition=ProductCondition.FAIR,
        )

        revised = product.revise(title='Steel kettle', price='9')

        assert revised.image_url == 'https://img/kettle.png'
        assert revised.condition == ProductCondition.FAIR
        assert revised.price == Decimal('9.00')

    def test_validate_collectable(self):
        product = ProductEntity(id=1, owner_id=1, title='Kettle', price=Decimal('8'))

        assert ProductEntity.validate_collectable(product, user_id=2, destination='cart') is product
        with pytest.raises(DomainError, match='Cannot add your own product to favorites'):
            ProductEntity.validate_collectable(product, user_id=1, destination='favorites')
        with pytest.raises(NotFoundError):
            ProductEntity.validate_collectable(None, user_id=2, destination='cart')

    def test_sold_product_is_not_deletable(self):
        product = ProductEntity(
            id=1, owner_id=1, title='Kettle', price=Decimal('8'), status=ProductStatus.SOLD
        )

        with pytest.raises(ConflictError):
            product.validate_deletable()


@pytest.mark.unit
class TestCheckoutResult:
    def test_failure_messages_follow_reason(self):
        result = CheckoutResult(
            failures=[
                CheckoutFailure(3, CheckoutFailureReason.PRODUCT_NOT_FOUND),
                CheckoutFailure(4, CheckoutFailureReason.SELF_PURCHASE_FORBIDDEN),
            ]
        )

        assert not result.succeeded
        assert result.failure_messages == [
            'Product 3 not found',
            'Cannot purchase your own product 4',
        ]

    def test_empty_result_succeeds(self):
        assert CheckoutResult().succeeded


@pytest.mark.unit
class TestUserEntity:
    @pytest.fixture
    def hasher(self) -> BcryptPasswordHasher:
        return BcryptPasswordHasher(rounds=4)

    def test_register_hashes_password_and_lowercases_email(self, hasher):
        user = UserEntity.register(
            username=' alice ',
            email='Alice@Example.com',
            plain_password='password123',
            password_hasher=hasher,
        )

        assert user.username == 'alice'
        assert user.email == 'alice@example.com'
        assert user.hashed_password != 'password123'
        assert 'password123' not in repr(user)

    def test_short_password_rejected(self, hasher):
        with pytest.raises(ValidationError, match='at least 6 characters'):
            UserEntity.register(
                username='alice', email='a@b.com', plain_password='12345', password_hasher=hasher
            )

    def test_missing_fields_rejected(self, hasher):
        with pytest.raises(ValidationError, match='Username, email, and password are required'):
            UserEntity.register(
                username='', email='a@b.com', plain_password='password123', password_hasher=hasher
            )

    def test_unknown_user_is_invalid_credentials(self):
        with pytest.raises(AuthenticationError, match='Invalid credentials'):
            UserEntity.validate_user_exists(None)


@pytest.mark.unit
class TestJwtAuth:
    def test_round_trip(self):
        jwt_auth = JwtAuth()
        token = jwt_auth.create_jwt_token(UserEntity(id=7, username='bob', email='bob@x.com'))

        user = jwt_auth.get_current_user_info_from_jwt(token)

        assert (user.id, user.username, user.email) == (7, 'bob', 'bob@x.com')

    def test_missing_token(self):
        with pytest.raises(AuthenticationError, match='Access token required'):
            JwtAuth().get_current_user_info_from_jwt(None)

    def test_tampered_token(self):
        token = JwtAuth().create_jwt_token(UserEntity(id=7, username='bob', email='bob@x.com'))

        with pytest.raises(AuthenticationError, match='Invalid token'):
            JwtAuth().get_current_user_info_from_jwt(token[:-2] + 'xx')

    def test_bearer_header_wins_over_cookie(self):
        assert extract_token('Bearer abc', 'cookie') == 'abc'
        assert extract_token(None, 'cookie') == 'cookie'
        assert extract_token('Basic abc', None) is None
