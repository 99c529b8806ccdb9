"""Dependency injection factories for the route handlers."""

from fastapi import Depends, Request

from core.config import settings
from core.exceptions import ConfigurationError
from domain.services.category_service import CategoryService
from domain.services.coupon_service import CouponService
from domain.services.order_service import OrderService
from domain.services.product_service import ProductService
from domain.services.profile_service import ProfileService
from domain.services.upload_service import UploadService
from infrastructure.backend import Backend


def get_backend(request: Request) -> Backend:
    """Return the Backend built by the application lifespan."""
    backend: Backend | None = getattr(request.app.state, "backend", None)
    if backend is None:
        raise ConfigurationError("Server backend is not initialized")
    return backend


def get_profile_service(backend: Backend = Depends(get_backend)) -> ProfileService:
    """Get Profile service instance."""
    return ProfileService(backend.uow_factory())


def get_category_service(backend: Backend = Depends(get_backend)) -> CategoryService:
    """Get Category service instance."""
    return CategoryService(backend.uow_factory())


def get_product_service(backend: Backend = Depends(get_backend)) -> ProductService:
    """Get Product service instance."""
    return ProductService(backend.uow_factory())


def get_order_service(backend: Backend = Depends(get_backend)) -> OrderService:
    """Get Order service instance."""
    return OrderService(backend.uow_factory())


def get_coupon_service(backend: Backend = Depends(get_backend)) -> CouponService:
    """Get Coupon service instance."""
    return CouponService(backend.uow_factory())


def get_upload_service(backend: Backend = Depends(get_backend)) -> UploadService:
    """Get Upload service instance."""
    return UploadService(
        backend.storage,
        bucket=settings.storage_bucket,
        allowed_types=settings.upload_allowed_types_list,
        max_bytes=settings.upload_max_bytes,
    )
