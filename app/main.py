import logging
from contextlib import asynccontextmanager
from pathlib import Path

import sentry_sdk
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.middleware.gzip import GZipMiddleware
from starlette.middleware.sessions import SessionMiddleware

# 1. Load .env and configure logging
load_dotenv()

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger(__name__)

from app.core.config import settings
from app.core.errors import AuthRequired, PortalError
from app.core.limiter import limiter
from app.core.templates import templates
from app.core.utils import get_client_ip
from app.db.crud.colleges import list_colleges, seed_colleges
from app.db.session import SessionLocal
from app.db.store import DocumentStore
from app.routes import auth, colleges, news, pages
from app.services.college_matcher import init_matcher
from app.services.worker import SweepWorker

# Security Headers Middleware
class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["X-XSS-Protection"] = "1; mode=block"
        if settings.is_production:
            response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
        response.headers["Content-Security-Policy"] = "default-src 'self'; img-src 'self' data: https:; style-src 'self' 'unsafe-inline'; script-src 'self' 'unsafe-inline';"
        return response

# Initialize Sentry (if DSN provided)
if settings.SENTRY_DSN:
    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        environment=settings.ENVIRONMENT,
        traces_sample_rate=0.2,
    )

BASE_DIR = Path(__file__).resolve().parent

# 2. Lifespan: tables, seed data, matcher, maintenance worker
@asynccontextmanager
async def lifespan(app: FastAPI):
    worker = None
    db = SessionLocal()
    try:
        logger.info("Creating database tables...")
        DocumentStore(db).create_collections()
        seed_colleges(db)
        init_matcher(list_colleges(db))
        logger.info("Database ready!")
    except Exception as e:
        logger.error(f"CRITICAL DATABASE ERROR: {e}")
        raise
    finally:
        db.close()

    if settings.SWEEP_INTERVAL_SECONDS > 0:
        worker = SweepWorker(interval=settings.SWEEP_INTERVAL_SECONDS)
        worker.start()

    yield

    logger.info("Shutting down...")
    if worker:
        worker.stop()

# 3. App
app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# 4. Exception Handlers
def is_api(request: Request) -> bool:
    return request.url.path.startswith("/api/")

def log_failure(request: Request, status_code: int, message: str):
    user_id = getattr(request.state, "user_id", None)
    logger.warning(
        f"{request.method} {request.url.path} -> {status_code} "
        f"(ip={get_client_ip(request)}, user={user_id}): {message}"
    )

def error_body(message: str, detail=None) -> dict:
    body = {"success": False, "message": message}
    if detail is not None and not settings.is_production:
        body["error"] = detail
    return body

@app.exception_handler(PortalError)
async def portal_error_handler(request: Request, exc: PortalError):
    log_failure(request, exc.status_code, exc.detail or exc.message)

    if is_api(request):
        return JSONResponse(error_body(exc.message, exc.detail), status_code=exc.status_code)

    if isinstance(exc, AuthRequired):
        return RedirectResponse("/login", status_code=302)

    template = "404.html" if exc.status_code == 404 else "500.html"
    return templates.TemplateResponse(
        request, template, {"title": exc.message, "message": exc.message}, status_code=exc.status_code
    )

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    log_failure(request, 400, str(exc.errors()))
    return JSONResponse(error_body("Invalid request data", jsonable_errors(exc)), status_code=400)

def jsonable_errors(exc: RequestValidationError) -> list:
    return [{"loc": list(e.get("loc", ())), "msg": e.get("msg")} for e in exc.errors()]

@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if is_api(request):
        return JSONResponse(error_body(str(exc.detail)), status_code=exc.status_code)
    if exc.status_code == 404:
        return templates.TemplateResponse(request, "404.html", {"title": "Page Not Found"}, status_code=404)
    return templates.TemplateResponse(
        request, "500.html", {"title": "Error", "message": str(exc.detail)}, status_code=exc.status_code
    )

@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path} (ip={get_client_ip(request)})")
    message = "Something went wrong. Please try again."
    if is_api(request):
        return JSONResponse(error_body(message, str(exc)), status_code=500)
    return templates.TemplateResponse(
        request,
        "500.html",
        {"title": "Server Error", "message": message if settings.is_production else str(exc)},
        status_code=500,
    )

# 5. Middlewares
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(SlowAPIMiddleware)
app.add_middleware(GZipMiddleware, minimum_size=1000)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS.split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(
    SessionMiddleware,
    secret_key=settings.SESSION_SECRET_KEY,
    session_cookie=settings.SESSION_COOKIE,
    same_site="lax",
    https_only=settings.is_production,
    max_age=settings.SESSION_MAX_AGE_HOURS * 3600
)

# 6. Static files
static_dir = BASE_DIR / "static"
if static_dir.exists():
    app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")

# 7. Routers
app.include_router(auth.router)
app.include_router(colleges.router)
app.include_router(news.router)
app.include_router(pages.router)

@app.get("/health")
def health():
    return {"status": "ok", "environment": settings.ENVIRONMENT}
