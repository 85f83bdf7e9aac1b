# inventory_tracker/services/exceptions.py


class ServiceError(Exception):
    """Base class for service-layer errors."""

    code = "service_error"

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(detail)


class DomainValidationError(ServiceError):
    """Malformed domain input."""

    code = "validation_error"


class ResourceNotFoundError(ServiceError):
    """Referenced product, type or staff member does not exist."""

    code = "not_found"


class ConflictError(ServiceError):
    """State conflict in the operation."""

    code = "conflict"


class EmptyResultError(ServiceError):
    """A well-formed request matched no eligible items."""

    code = "empty_range"


class RangeBoundaryNotFoundError(ResourceNotFoundError):
    """An outbound boundary id is unknown or belongs to another category."""

    code = "range_boundary_not_found"

    def __init__(self, detail: str, product_id: str):
        self.product_id = product_id
        super().__init__(detail)


class RangeAlreadyRetiredError(RangeBoundaryNotFoundError, EmptyResultError):
    """An outbound boundary exists in the category but is already out of stock."""

    code = "already_retired"


class TypeMismatchError(ConflictError):
    """The two boundaries of an outbound range resolve to different product types."""

    code = "type_mismatch"

    def __init__(self, start_type_name: str, end_type_name: str):
        self.start_type_name = start_type_name
        self.end_type_name = end_type_name
        super().__init__(
            f"Start and end product types differ (start: {start_type_name}, end: {end_type_name})"
        )


class DuplicateProductError(ConflictError):
    """Inbound product id already exists or repeats within the batch."""

    code = "duplicate_product"

    def __init__(self, detail: str, product_ids: list[str]):
        self.product_ids = product_ids
        super().__init__(detail)


class DocumentSequenceExhaustedError(ConflictError):
    """No four-digit document sequence left for the day."""

    code = "sequence_exhausted"


class EmptyRangeError(EmptyResultError):
    """The resolved outbound range contains no in-stock items of the resolved type."""

    code = "empty_range"


class StorageError(ServiceError):
    """Connection, constraint or serialization failure in the store."""

    code = "storage_error"

    def __init__(self, detail: str, *, retryable: bool = False):
        self.retryable = retryable
        super().__init__(detail)
