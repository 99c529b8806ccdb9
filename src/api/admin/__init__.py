"""Admin panel router configuration."""

from fastapi import APIRouter

from api.admin.categories import router as categories_router
from api.admin.coupons import router as coupons_router
from api.admin.orders import router as orders_router
from api.admin.products import router as products_router
from api.admin.upload import router as upload_router

router = APIRouter(prefix="/admin")
router.include_router(categories_router)
router.include_router(products_router)
router.include_router(orders_router)
router.include_router(coupons_router)
router.include_router(upload_router)
