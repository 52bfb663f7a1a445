from enum import StrEnum


class PaymentMethod(StrEnum):
    """Recorded on buy-now as a label only, no gateway is called"""

    CREDIT_CARD = 'credit_card'
    DEBIT_CARD = 'debit_card'
    PAYPAL = 'paypal'
    CASH_ON_DELIVERY = 'cash_on_delivery'
