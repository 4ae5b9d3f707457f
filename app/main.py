"""
FastAPI Main Application - Gemini Chat
Entry point for the chat front-end: page, static assets and the /api/chat endpoint.
"""

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from app.api import chat
from app.config import settings
from app.errors import ChatError
from app.utils.app_logger import logger
from app.utils.markdown import markdown_to_html

BASE_DIR = Path(__file__).resolve().parent

WELCOME_MESSAGE = """## Welcome to Gemini Chat
Ask me anything. Replies support **bold**, *italic*, `code`, [links](https://ai.google.dev) and more."""


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifecycle manager for the FastAPI application.
    Handles startup and shutdown events.
    """
    try:
        settings.validate_config()
    except ValueError as e:
        logger.config_validation_failed(str(e))
        raise

    logger.app_started()
    if not settings.HAS_API_KEY:
        logger.warning("GEMINI_API_KEY not set, chat requests will fail")

    yield

    logger.info("Shutting down application")


# Initialize FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Minimal chat front-end for Google Gemini",
    lifespan=lifespan,
    debug=settings.DEBUG,
)

# Mount static files
app.mount("/static", StaticFiles(directory=BASE_DIR / "static"), name="static")

# Initialize templates
templates = Jinja2Templates(directory=BASE_DIR / "templates")
templates.env.filters["markdown"] = markdown_to_html

# Include API routers
app.include_router(chat.router, prefix="/api", tags=["chat"])


# ===== Root Routes =====


@app.get("/", response_class=HTMLResponse)
async def root(request: Request):
    """Chat page"""
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "app_name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "api_url": settings.API_URL,
            "max_history": settings.MAX_HISTORY_ENTRIES,
            "welcome_message": {"role": "model", "text": WELCOME_MESSAGE},
        },
    )


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "app": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "environment": settings.DEPLOYMENT_ENV,
    }


@app.get("/config")
async def config_info():
    """Configuration info endpoint (for debugging)"""
    return settings.get_deployment_info()


# ===== Error Handlers =====


@app.exception_handler(ChatError)
async def chat_error_handler(request: Request, exc: ChatError):
    """Return chat errors in the shape the page expects"""
    return JSONResponse(
        {"error": True, "message": exc.message}, status_code=exc.status_code
    )


@app.exception_handler(404)
async def not_found_handler(request: Request, exc):
    """Handle 404 errors"""
    if request.url.path.startswith("/api/"):
        return JSONResponse(
            {"error": True, "message": "Not found"}, status_code=404
        )

    return templates.TemplateResponse(
        request,
        "base.html",
        {
            "app_name": settings.APP_NAME,
            "error_message": "Page not found",
            "status_code": 404,
        },
        status_code=404,
    )


@app.exception_handler(500)
async def internal_error_handler(request: Request, exc):
    """Handle 500 errors"""
    logger.error(f"Unhandled error: {exc}", path=request.url.path)

    if request.url.path.startswith("/api/"):
        return JSONResponse(
            {"error": True, "message": "Internal server error"}, status_code=500
        )

    return templates.TemplateResponse(
        request,
        "base.html",
        {
            "app_name": settings.APP_NAME,
            "error_message": "Internal server error",
            "status_code": 500,
        },
        status_code=500,
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8080,
        reload=settings.DEBUG,
    )
