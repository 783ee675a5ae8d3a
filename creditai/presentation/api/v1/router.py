from fastapi import APIRouter

from .health import health_router
from .score import score_router
from .dashboard import dashboard_router
from .borrowers import borrowers_router
from .models import models_router
from .fairness import fairness_router
from .chat import chat_router

router = APIRouter()

router.include_router(health_router, tags=["Health"])
router.include_router(score_router, tags=["Scoring"])
router.include_router(dashboard_router, tags=["Dashboard"])
router.include_router(borrowers_router, tags=["Borrowers"])
router.include_router(models_router, tags=["Model Performance"])
router.include_router(fairness_router, tags=["Fairness"])
router.include_router(chat_router, tags=["Assistant"])
