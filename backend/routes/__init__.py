"""FastAPI API endpoints under /api.

Endpoint groups: health, luma (chat, transform, thought), users (demo user,
progress, challenge completion), integrations (Twine state, LMS/Twine
snippets). Handlers reach the store and engine through the dependencies in
deps.py; nothing here holds state of its own.
"""

from fastapi import APIRouter

from .integrations import router as integrations_router
from .luma import router as luma_router
from .settings import router as settings_router
from .users import router as users_router

router = APIRouter()
router.include_router(settings_router)
router.include_router(luma_router)
router.include_router(users_router)
router.include_router(integrations_router)
