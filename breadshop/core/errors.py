"""Domain errors for the Bread Shop.

Recoverable conditions (missing account, missing order, insufficient
funds) are reported through OutboundEventsPort and never raised.
The exceptions here cover the remaining cases: broken id uniqueness
and operations the shop does not support.
"""


class DuplicateKeyError(ValueError):
    """An id was reused where ids must be unique."""


class DuplicateAccountError(DuplicateKeyError):
    """An account with this id already exists in the repository."""

    def __init__(self, account_id: int):
        self.account_id = account_id
        super().__init__(f"Account {account_id} already exists")


class DuplicateOrderError(DuplicateKeyError):
    """An order with this id is already open on the account."""

    def __init__(self, order_id: int):
        self.order_id = order_id
        super().__init__(f"Order {order_id} already exists")


class UnsupportedOperationError(NotImplementedError):
    """The requested shop operation is not supported.

    Raised on every call, for every input. Kept distinct from the
    duplicate-key errors so callers can match on it separately.
    """

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Operation '{operation}' is not supported")
