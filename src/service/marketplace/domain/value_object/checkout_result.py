import attrs

from src.service.marketplace.domain.entity.product_entity import ProductEntity
from src.service.marketplace.domain.entity.purchase_entity import PurchaseEntity
from src.service.marketplace.domain.value_object.checkout_failure import CheckoutFailure


@attrs.frozen
class CheckoutResult:
    """
    Outcome of a checkout

    Exactly one side is populated: either every requested product was sold
    (purchases, with the matching sold_products) or nothing changed and
    failures lists each rejected product.
    """

    purchases: list[PurchaseEntity] = attrs.field(factory=list)
    sold_products: list[ProductEntity] = attrs.field(factory=list)
    failures: list[CheckoutFailure] = attrs.field(factory=list)

    @property
    def succeeded(self) -> bool:
        return not self.failures

    @property
    def failure_messages(self) -> list[str]:
        return [failure.message for failure in self.failures]
