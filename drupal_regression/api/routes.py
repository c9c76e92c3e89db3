from fastapi import APIRouter
from drupal_regression.api.routes_health import router as health_router
from drupal_regression.api.routes_regression import router as regression_router

router = APIRouter()
router.include_router(health_router, tags=["health"])
router.include_router(regression_router, tags=["regression"])
