class RentalError(Exception):
    """Base class for errors raised by the rental workflow and catalog services."""

    code = "RENTAL_ERROR"
    status_code = 400


class ReferenceNotFound(RentalError, ValueError):
    """A referenced customer or movie does not exist."""

    code = "REFERENCE_NOT_FOUND"
    status_code = 400

    def __init__(self, entity_kind, entity_id):
        self.entity_kind = entity_kind
        self.entity_id = entity_id
        super().__init__(f"Invalid {entity_kind}_id = {entity_id}")


class InvalidState(RentalError, ValueError):
    """Business rule violation (out of stock, return already processed)."""

    code = "INVALID_STATE"
    status_code = 400

    def __init__(self, reason):
        self.reason = reason
        super().__init__(reason)


class NotFound(RentalError, ValueError):
    code = "RESOURCE_NOT_FOUND"
    status_code = 404

    def __init__(self, entity_kind):
        self.entity_kind = entity_kind
        super().__init__(f"{entity_kind.capitalize()} not found.")


class TransactionFailure(RentalError):
    """
    The unit of work could not be committed. Everything has been rolled back
    before this is raised; the original store error is chained as __cause__.
    """

    code = "TRANSACTION_FAILED"
    status_code = 500

    def __init__(self, message="Something went wrong!"):
        super().__init__(message)
