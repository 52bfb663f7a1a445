"""
Logger.io: argument/return/exception logging for use cases, repos and controllers

    @Logger.io
    async def buy_now(self, *, buyer_id: int, product_id: int) -> CheckoutResult: ...

    @Logger.io(truncate_content=True)   # long listings
    @Logger.io(reraise=False)           # swallow and return None

At DEBUG every call logs its masked arguments and its return value with the
wall time spent inside. Exceptions are logged once, at the innermost
decorated frame, then re-raised. CustomBaseError subclasses are expected
outcomes (404, 409, ...) and log without a traceback.
"""

from functools import wraps
from inspect import iscoroutinefunction
from time import perf_counter
import types
from typing import TYPE_CHECKING, Any, Callable, ParamSpec, TypeVar, cast, overload


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import CustomBaseError
from src.platform.logging.loguru_io_config import (
    ExtraField,
    call_depth_var,
    custom_logger,
)
from src.platform.logging.loguru_io_utils import (
    build_call_target_func_path,
    get_chain_start_time,
    mask_sensitive,
    normalize_args_kwargs,
    reset_call_depth,
    should_mask_keyword,
    truncate_content,
)

_F = TypeVar('_F', bound=Callable[..., Any])

# Frames between the log call and the decorated function's caller
_CALLER_DEPTH = 2


class LoguruIO:
    def __init__(
        self, custom_logger: 'LoguruLogger', *, reraise: bool = True, truncate_content: bool = False
    ) -> None:
        self._custom_logger = custom_logger
        self.reraise = reraise
        self.truncate_content = truncate_content
        self.extra: dict[str, Any] = {}

    def _bound(self, depth: int = _CALLER_DEPTH) -> 'LoguruLogger':
        return self._custom_logger.bind(**self.extra).opt(depth=depth)

    def on_enter(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> float:
        call_depth_var.set(call_depth_var.get() + 1)
        self.extra[ExtraField.CHAIN_START_TIME] = get_chain_start_time()
        if settings.DEBUG:
            self._bound().debug(
                f'args: {self.render(args)}, kwargs: {self.render(kwargs)}'
            )
        return perf_counter()

    def on_return(self, return_value: Any, started_at: float) -> None:
        if settings.DEBUG:
            elapsed_ms = (perf_counter() - started_at) * 1000
            self._bound().debug(f'return ({elapsed_ms:.1f}ms): {self.render(return_value)}')

    def on_error(self, e: Exception) -> None:
        # Outer decorated layers see the same exception object
        if getattr(e, '_has_logged', False):
            return
        try:
            e._has_logged = True  # type: ignore[attr-defined]
        except AttributeError:
            pass
        if isinstance(e, CustomBaseError):
            self._bound(_CALLER_DEPTH + 1).error(f'{type(e).__name__}({e.status_code}): {e}')
        else:
            self._bound(_CALLER_DEPTH + 1).exception(f'{type(e).__name__}: {e}')

    def render(self, data: Any) -> Any:
        if isinstance(data, dict):
            rendered: Any = {
                key: self.render(should_mask_keyword(key, value)) for key, value in data.items()
            }
        elif isinstance(data, list | tuple):
            rendered = type(data)(self.render(item) for item in data)
        else:
            rendered = mask_sensitive(data)
        return truncate_content(rendered) if self.truncate_content else rendered

    def _hide_from_traceback(self, func: Callable[..., Any]) -> Callable[..., Any]:
        func.__code__ = func.__code__.replace(  # type: ignore[attr-defined]
            co_filename=cast(types.FunctionType, self._custom_logger.catch).__code__.co_filename
        )
        return func

    def __call__(self, func: _F) -> _F:
        self.extra[ExtraField.CALL_TARGET] = build_call_target_func_path(func)

        if iscoroutinefunction(func):

            @wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                try:
                    started_at = self.on_enter(args, kwargs)
                    args, kwargs = normalize_args_kwargs(func, *args, **kwargs)
                    return_value = await func(*args, **kwargs)
                    self.on_return(return_value, started_at)
                    return return_value
                except Exception as e:
                    self.on_error(e)
                    if self.reraise:
                        raise
                    return None
                finally:
                    reset_call_depth()

            return cast(_F, self._hide_from_traceback(async_wrapper))

        @wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                started_at = self.on_enter(args, kwargs)
                args, kwargs = normalize_args_kwargs(func, *args, **kwargs)
                return_value = func(*args, **kwargs)
                self.on_return(return_value, started_at)
                return return_value
            except Exception as e:
                self.on_error(e)
                if self.reraise:
                    raise
                return None
            finally:
                reset_call_depth()

        return cast(_F, self._hide_from_traceback(sync_wrapper))


_P = ParamSpec('_P')
_T = TypeVar('_T')


class Logger:
    base = custom_logger

    @overload
    @staticmethod
    def io(func: Callable[_P, _T]) -> Callable[_P, _T]: ...

    @overload
    @staticmethod
    def io(func: None = ..., *, reraise: bool = ..., truncate_content: bool = ...) -> LoguruIO: ...

    @staticmethod
    def io(
        func: Callable[_P, _T] | None = None, *, reraise: bool = True, truncate_content: bool = True
    ) -> Callable[_P, _T] | LoguruIO:
        decorator = LoguruIO(
            custom_logger=custom_logger, reraise=reraise, truncate_content=truncate_content
        )
        return decorator(func) if func else decorator
