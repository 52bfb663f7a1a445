import pytest

from src.platform.logging.loguru_io import Logger
from src.platform.logging.loguru_io_config import access_log_level
from src.platform.logging.loguru_io_utils import (
    mask_sensitive,
    normalize_args_kwargs,
    should_mask_keyword,
    truncate_content,
)


@pytest.mark.unit
class TestLoguruIoUtils:
    def test_mask_sensitive_hides_password_in_repr(self):
        masked = mask_sensitive("UserEntity(username='bob', password='hunter22')")

        assert 'hunter22' not in masked
        assert "password='********'" in masked

    def test_mask_sensitive_returns_untouched_data(self):
        data = {'product_id': 3}

        assert mask_sensitive(data) is data

    def test_should_mask_keyword(self):
        assert should_mask_keyword('token', 'abc') == '********'
        assert should_mask_keyword('product_id', 3) == 3

    def test_truncate_content(self):
        assert truncate_content('x' * 10, limit=20) == 'x' * 10
        assert truncate_content('x' * 30, limit=20).endswith('<truncated 10 chars>')

    def test_normalize_args_kwargs_drops_unknown_kwargs(self):
        def handler(product_id: int, *, buyer_id: int) -> None: ...

        args, kwargs = normalize_args_kwargs(handler, 1, buyer_id=2, request='extra')

        assert args == (1,)
        assert kwargs == {'buyer_id': 2}


@pytest.mark.unit
class TestLoggerIo:
    def test_sync_return_value_passes_through(self):
        @Logger.io
        def add(a: int, b: int) -> int:
            return a + b

        assert add(2, 3) == 5

    async def test_async_exception_is_reraised(self):
        @Logger.io
        async def fail() -> None:
            raise ValueError('boom')

        with pytest.raises(ValueError, match='boom'):
            await fail()

    async def test_reraise_false_returns_none(self):
        @Logger.io(reraise=False)
        async def fail() -> None:
            raise ValueError('boom')

        assert await fail() is None


@pytest.mark.unit
@pytest.mark.parametrize(
    'message,expected',
    [
        ('127.0.0.1:50000 - "POST /api/buy-now HTTP/1.1" 200', 'SUCCESS'),
        ('127.0.0.1:50000 - "POST /api/buy-now HTTP/1.1" 409', 'ERROR'),
        ('127.0.0.1:50000 - "GET /api/products HTTP/1.1" 500', 'CRITICAL'),
        ('127.0.0.1:50000 - "GET / HTTP/1.1" 307', 'WARNING'),
        ('Application startup complete.', None),
    ],
)
def test_access_log_level(message: str, expected: str | None):
    assert access_log_level(message) == expected
