"""
FastAPI application entrypoint.
Run with: uvicorn beyondchats.main:app --reload --port 8000 (from backend/)

All routes are mounted under settings.api_prefix (default /api):
  - PDF:      POST /pdf/upload, GET /pdf/list, POST /pdf/process, GET /pdf/{id}, DELETE /pdf/{id}
  - Chat:     POST /chat, POST /chat/create, GET /chat/list, GET|DELETE /chat/{id}, GET /chat/{id}/messages
  - Quiz:     POST /quiz/generate, POST /quiz/attempt, GET /quiz/recent, GET /quiz/{id}, GET /quiz/{id}/results
  - Progress: GET /progress

Errors are returned as {"error": "<message>"}.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from beyondchats import __version__
from beyondchats.config import settings
from beyondchats.api.chat import router as chat_router
from beyondchats.api.pdf import router as pdf_router
from beyondchats.api.progress import router as progress_router
from beyondchats.api.quiz import router as quiz_router

logger = logging.getLogger(__name__)

app = FastAPI(
    title="BeyondChats API",
    description="Upload PDFs, chat about them, generate and take auto-graded quizzes.",
    version=__version__,
)

_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=_origins if _origins else ["http://localhost:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(pdf_router, prefix=settings.api_prefix)
app.include_router(chat_router, prefix=settings.api_prefix)
app.include_router(quiz_router, prefix=settings.api_prefix)
app.include_router(progress_router, prefix=settings.api_prefix)


@app.exception_handler(StarletteHTTPException)
def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=getattr(exc, "headers", None))


@app.exception_handler(RequestValidationError)
def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies are a 400 like every other input error."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        loc = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        message = f"{loc}: {first.get('msg')}" if loc else str(first.get("msg"))
    else:
        message = "Invalid request"
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


@app.exception_handler(Exception)
def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


@app.on_event("startup")
def startup():
    """Configure logging, report which LLM provider is active, create the upload dir and tables."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    provider = (settings.llm_provider or "openai").strip().lower()
    key = (settings.gemini_api_key if provider == "gemini" else settings.openai_api_key) or ""
    if key.strip():
        logger.info("%s: API key loaded. Real API will be used (model=%s).", provider, settings.active_llm_model)
    else:
        logger.warning("%s: No API key. Set it in backend/.env for real answers (using mock).", provider)
    settings.upload_path.mkdir(parents=True, exist_ok=True)
    from beyondchats.database import init_db
    init_db()


@app.get("/", response_class=HTMLResponse)
def root():
    """Root: minimal page so the app 'loads' in browser; links to API docs."""
    return """
    <!DOCTYPE html>
    <html>
    <head><meta charset="utf-8"><title>BeyondChats API</title></head>
    <body style="font-family: system-ui; max-width: 600px; margin: 2rem auto; padding: 1rem;">
    <h1>BeyondChats API</h1>
    <p>This is the <strong>API server</strong>. It returns JSON, not the web app.</p>
    <ul>
    <li><a href="/docs">OpenAPI docs (Swagger)</a></li>
    <li><a href="/redoc">ReDoc</a></li>
    <li>Health: <a href="/health">/health</a></li>
    </ul>
    </body>
    </html>
    """


@app.get("/health")
def health():
    """Health check (JSON)."""
    return {"status": "ok", "message": "BeyondChats API"}
