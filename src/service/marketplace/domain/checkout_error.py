"""Checkout failures surfaced to HTTP callers"""

from src.platform.exception.exceptions import ConflictError, ForbiddenError, NotFoundError


class ProductNotFoundError(NotFoundError):
    pass


class ProductUnavailableError(ConflictError):
    pass


class SelfPurchaseForbiddenError(ForbiddenError):
    pass
