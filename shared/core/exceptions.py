from typing import Optional

from shared.utils.app_status_code import AppStatusCode


class InventoryError(Exception):
    """Base for every failure the inventory service reports to callers."""

    http_status = 400
    status_code = AppStatusCode.OPERATION_ERROR
    default_message = "Operation failed"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(InventoryError):
    status_code = AppStatusCode.INVALID_INPUT
    default_message = "Invalid input"

    def __init__(self, message: Optional[str] = None, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class NotFound(InventoryError):
    http_status = 404
    status_code = AppStatusCode.RECORD_NOT_FOUND
    default_message = "Material not found"


class InsufficientQuantity(InventoryError):
    status_code = AppStatusCode.INSUFFICIENT_QUANTITY
    default_message = "Insufficient quantity"

    def __init__(self, available: int, requested: int):
        super().__init__()
        self.available = available
        self.requested = requested


class LocationMismatch(InventoryError):
    status_code = AppStatusCode.LOCATION_MISMATCH

    def __init__(self, current_rack: str, current_bin: str):
        super().__init__(
            "Material is not in the specified location. "
            f"Current location: Rack {current_rack}, Bin {current_bin}"
        )
        self.current_rack = current_rack
        self.current_bin = current_bin


class StoreUnavailable(InventoryError):
    http_status = 500
    status_code = AppStatusCode.STORE_UNAVAILABLE
    default_message = "Inventory store is unavailable"
