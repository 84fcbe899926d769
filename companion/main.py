import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.config import settings
from .content.loader import get_content
from .api.deps import get_store
from .api.routes.chat import router as chat_router
from .api.routes.misc import router as misc_router

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Student Wellness Companion", version=settings.API_VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def on_startup():
    # fail fast on broken content files
    content = get_content()
    logger.info("content loaded: %d crisis phrases, %d quick prompts", len(content.crisis_keywords), len(content.quick_prompts))

@app.on_event("shutdown")
def on_shutdown():
    store = app.dependency_overrides.get(get_store, get_store)()
    store.close_all()

app.include_router(misc_router)
app.include_router(chat_router)
