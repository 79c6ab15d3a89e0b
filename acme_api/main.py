from urllib.parse import urlparse

from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware
from starlette.middleware.gzip import GZipMiddleware

from acme_api.api.exception_handlers import register_exception_handlers
from acme_api.api.v1.router import api_router
from acme_api.core.config import settings

app = FastAPI(
    title="Acme API",
    description="Acme API Documentation",
    version="1.0.0",
)

app.add_middleware(GZipMiddleware, minimum_size=1000)

if settings.frontend_url:
    parsed = urlparse(settings.frontend_url)
    origin = f"{parsed.scheme}://{parsed.netloc}"
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[origin],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

register_exception_handlers(app)
app.include_router(api_router, prefix=settings.global_prefix)


@app.get("/health")
def health():
    return {"status": "ok"}
