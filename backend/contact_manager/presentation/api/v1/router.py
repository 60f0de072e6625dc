"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from contact_manager.presentation.api.v1.endpoints.health import router as health_router
from contact_manager.presentation.api.v1.endpoints.contacts import router as contacts_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(contacts_router)
