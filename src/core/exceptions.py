"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Not found errors (404)
    CATEGORY_NOT_FOUND = "CATEGORY_NOT_FOUND"
    PRODUCT_NOT_FOUND = "PRODUCT_NOT_FOUND"
    ORDER_NOT_FOUND = "ORDER_NOT_FOUND"
    COUPON_NOT_FOUND = "COUPON_NOT_FOUND"

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_JSON = "INVALID_JSON"
    TABLE_NOT_FOUND = "TABLE_NOT_FOUND"

    # Rate limiting (429)
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"
    STORAGE_ERROR = "STORAGE_ERROR"
    PROFILE_RACE_UNRESOLVED = "PROFILE_RACE_UNRESOLVED"


class StoreErrorCode(StrEnum):
    """SQLSTATE codes the services branch on."""

    UNIQUE_VIOLATION = "23505"
    UNDEFINED_TABLE = "42P01"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class ConfigurationError(AppException):
    """A backend credential required by the request is not configured."""

    def __init__(self, message: str = "Server configuration error") -> None:
        super().__init__(
            error_code=ErrorCode.CONFIGURATION_ERROR,
            message=message,
            status_code=500,
        )


class ValidationError(AppException):
    """Client input is missing or malformed."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(
            error_code=ErrorCode.VALIDATION_ERROR,
            message=message,
            status_code=400,
            details={"field": field} if field else None,
        )


class BackendError(AppException):
    """The database or object storage rejected an operation.

    ``store_code`` holds the SQLSTATE reported by the database driver (or
    ``None`` for storage and connection failures) so callers can branch on
    it without parsing ``message``.
    """

    def __init__(
        self,
        message: str,
        store_code: str | None = None,
        details: Any | None = None,
        error_code: ErrorCode = ErrorCode.DATABASE_ERROR,
    ) -> None:
        self.store_code = store_code
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=500,
            details=details,
        )

    @property
    def is_unique_violation(self) -> bool:
        return self.store_code == StoreErrorCode.UNIQUE_VIOLATION

    @property
    def is_undefined_table(self) -> bool:
        return self.store_code == StoreErrorCode.UNDEFINED_TABLE


class StorageError(BackendError):
    """Object storage request failed."""

    def __init__(self, message: str, details: Any | None = None) -> None:
        super().__init__(
            message=message,
            details=details,
            error_code=ErrorCode.STORAGE_ERROR,
        )


class ProfileRaceUnresolvedError(BackendError):
    """A concurrent insert won the race but its row is not readable yet."""

    def __init__(self, profile_id: str) -> None:
        super().__init__(
            message="Profile was created concurrently but could not be read back",
            details={"profile_id": profile_id},
            error_code=ErrorCode.PROFILE_RACE_UNRESOLVED,
        )


class CategoryNotFoundError(AppException):
    """Category not found."""

    def __init__(self, category_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.CATEGORY_NOT_FOUND,
            message=f"Category not found: {category_id}",
            status_code=404,
            details={"category_id": category_id},
        )


class ProductNotFoundError(AppException):
    """Product not found."""

    def __init__(self, product_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.PRODUCT_NOT_FOUND,
            message=f"Product not found: {product_id}",
            status_code=404,
            details={"product_id": product_id},
        )


class OrderNotFoundError(AppException):
    """Order not found."""

    def __init__(self, order_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.ORDER_NOT_FOUND,
            message=f"Order not found: {order_id}",
            status_code=404,
            details={"order_id": order_id},
        )


class CouponNotFoundError(AppException):
    """Coupon not found."""

    def __init__(self, coupon_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.COUPON_NOT_FOUND,
            message=f"Coupon not found: {coupon_id}",
            status_code=404,
            details={"coupon_id": coupon_id},
        )


class CouponTableMissingError(AppException):
    """The coupons table has not been created in the database."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.TABLE_NOT_FOUND,
            message="Coupons table does not exist. Please create it first.",
            status_code=400,
        )
