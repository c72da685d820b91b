"""Validation failures raised by the services.

Every failure carries a short title and a user-facing detail message, the
same pair a cashier sees in the dashboard notification. A failed operation
never leaves partial changes behind.
"""


class BakeryError(Exception):
    title = "Error"

    def __init__(self, detail: str, title: str | None = None):
        super().__init__(detail)
        self.detail = detail
        if title is not None:
            self.title = title


class MissingFieldsError(BakeryError):
    title = "Missing Information"


class OutOfStockError(BakeryError):
    title = "Out of Stock"


class InsufficientStockError(BakeryError):
    title = "Insufficient Stock"


class EmptyCartError(BakeryError):
    title = "Empty Cart"


class NotFoundError(BakeryError):
    title = "Not Found"


class ConflictError(BakeryError):
    title = "Conflict"


class InvalidQuantityError(BakeryError):
    title = "Invalid Quantity"
