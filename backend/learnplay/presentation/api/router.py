"""Top-level API router — aggregates all endpoint routers.

Routes are mounted at the root so the browser client's existing URLs
(``/chat``, ``/upload``, ``/teach``) keep working.
"""

from fastapi import APIRouter

from learnplay.presentation.api.endpoints.health import router as health_router
from learnplay.presentation.api.endpoints.chat import router as chat_router
from learnplay.presentation.api.endpoints.documents import router as documents_router
from learnplay.presentation.api.endpoints.quiz import router as quiz_router

router = APIRouter()
router.include_router(health_router)
router.include_router(chat_router)
router.include_router(documents_router)
router.include_router(quiz_router)
