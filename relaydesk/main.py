from __future__ import annotations

import time
import logging
from pathlib import Path

from fastapi import FastAPI, Request, HTTPException
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import HTMLResponse
from markupsafe import escape
from starlette.responses import JSONResponse
from starlette.templating import Jinja2Templates

from relaydesk.core.config import settings
from relaydesk.ui.components import skeleton

# Import models to populate SQLAlchemy metadata (needed for create_all)
import relaydesk.db.models  # noqa: F401

from relaydesk.modules.orgs.router import router as orgs_router, api_router as orgs_api_router
from relaydesk.modules.admin.router import router as admin_router
from relaydesk.modules.payment.router import router as payment_router


logger = logging.getLogger("relaydesk")


def _is_hx(request: Request) -> bool:
    return (request.headers.get("hx-request") or "").lower() == "true"


templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent / "templates"))

# UI helpers available in templates
templates.env.globals["skeleton"] = skeleton
templates.env.globals["app_name"] = settings.APP_NAME

app = FastAPI(title=settings.APP_NAME)
app.state.templates = templates

# CORS (Access-Control-Allow-*) - configurable
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins(),
    allow_methods=["*"],
    allow_headers=["*"],
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
)

# Compression for HTML/JSON
app.add_middleware(GZipMiddleware, minimum_size=800)


@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    start = time.perf_counter()
    resp = await call_next(request)
    resp.headers["X-Process-Time-ms"] = f"{(time.perf_counter() - start) * 1000:.2f}"
    return resp


@app.middleware("http")
async def add_security_headers(request: Request, call_next):
    resp = await call_next(request)
    resp.headers["X-Content-Type-Options"] = "nosniff"
    resp.headers["X-Frame-Options"] = "SAMEORIGIN"
    resp.headers["Referrer-Policy"] = "same-origin"
    return resp


@app.exception_handler(HTTPException)
async def http_exc_handler(request: Request, exc: HTTPException):
    # HTMX: return small inline alert to avoid swapping a full page into a component
    if _is_hx(request):
        resp = HTMLResponse(
            f'<div class="rounded-md bg-red-900 px-3 py-2 text-sm">Error ({exc.status_code}): {escape(exc.detail)}</div>',
            status_code=exc.status_code,
        )
        resp.headers["HX-Retarget"] = "#errors"
        resp.headers["HX-Reswap"] = "innerHTML"
        return resp

    return await http_exception_handler(request, exc)


@app.exception_handler(Exception)
async def unhandled_exc_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception", exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


# Routers
app.include_router(orgs_router)
app.include_router(orgs_api_router)
app.include_router(admin_router)
app.include_router(payment_router)


@app.get("/health", response_class=JSONResponse)
def health():
    return {"status": "ok", "app": settings.APP_NAME}
