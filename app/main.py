import logging
from fastapi import FastAPI
from app.api.routes_analyze import router as analyze_router
from app.api.routes_rewrite import router as rewrite_router
from app.core.config import LOG_LEVEL
from app.middleware.limits import BodySizeLimitMiddleware
from app.services.lexicon import LEXICON_VERSION

logging.basicConfig(level=LOG_LEVEL)

app = FastAPI(title="WorkplaceMessageGuard")

app.add_middleware(BodySizeLimitMiddleware)

@app.get("/health")
def health():
    return {"status": "ok", "lexicon": LEXICON_VERSION}

app.include_router(analyze_router)
app.include_router(rewrite_router)
