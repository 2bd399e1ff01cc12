import os
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from .core.config import settings
from .core.logging import setup_logging
from .fs.root import ensure_storage_root
from .routers.fotos import router as fotos_router

tags_metadata = [
    {
        "name": "fotos",
        "description": (
            "Endpoints to save, list, fetch and delete photos.\n\n"
            "- Save a base64 (data-URI) PNG with a JSON body.\n"
            "- List every stored photo, newest first.\n"
            "- Fetch the raw file under /fotos/{filename}."
        ),
    }
]


class PublicFiles(StaticFiles):
    """Static files that answer 404, not 500, when the directory is absent."""

    async def check_config(self) -> None:
        if self.directory is not None and not os.path.isdir(self.directory):
            return
        await super().check_config()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger = setup_logging(settings)
    # Fails startup if the directory cannot be created
    root = ensure_storage_root()
    logger.info("Photos stored in: %s", root)
    yield


app = FastAPI(
    title="PhotoStore",
    description=(
        "How to Use:\n\n"
        "1) Save a photo: POST /api/guardar-foto with `{\"imagen\": \"data:image/png;base64,...\"}`.\n"
        "2) List photos: GET /api/fotos.\n"
        "3) View: open the returned `url` (GET /fotos/{filename}).\n"
        "4) Delete: DELETE /api/fotos/{filename}.\n\n"
        "Notes: files are stored as-is in a single directory; no image validation is performed."
    ),
    openapi_tags=tags_metadata,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

@app.middleware("http")
async def limit_body_size(request: Request, call_next):
    length = request.headers.get("content-length")
    if length is not None and length.isdigit() and int(length) > settings.max_body_bytes:
        return JSONResponse(
            status_code=413,
            content={"success": False, "error": "request entity too large"},
        )
    return await call_next(request)


# Added after the body limit so it wraps it and 413s carry CORS headers
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_error(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_error(request: Request, exc: RequestValidationError):
    messages = [err.get("msg", "") for err in exc.errors()]
    return JSONResponse(
        status_code=400,
        content={"success": False, "error": "; ".join(m for m in messages if m) or "invalid_request"},
    )


app.include_router(fotos_router)
# Registered last so the API and /fotos routes take precedence
app.mount(
    "/",
    PublicFiles(directory=settings.public_dir, html=True, check_dir=False),
    name="public",
)
