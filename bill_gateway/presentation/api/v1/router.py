from fastapi import APIRouter

from .bill import bill_router
from .sign import sign_router
from .health import health_router

router = APIRouter()

router.include_router(health_router, tags=["Health"])
router.include_router(bill_router, tags=["Bills"])
router.include_router(sign_router, tags=["Signatures"])
