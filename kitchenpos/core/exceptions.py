"""Domain errors raised by the services.

Each error kind maps to one HTTP status in ``kitchenpos.main``.
"""


class KitchenPosError(Exception):
    """Base class for business-rule failures."""

    status_code = 500

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class InvalidArgumentError(KitchenPosError, ValueError):
    """Malformed or missing input, or a rule violated by a value."""

    status_code = 400


class NotFoundError(KitchenPosError, LookupError):
    """A referenced entity does not exist."""

    status_code = 404


class IllegalStateError(KitchenPosError, RuntimeError):
    """The operation is not valid for the entity's current state."""

    status_code = 409
