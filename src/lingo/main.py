from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from lingo import models
from lingo.config import ALLOWED_ORIGINS, ENVIRONMENT, FRONTEND_DIST, HOST, PORT
from lingo.database import engine
from lingo.routers import router as api_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables on startup"""
    # Only creates when tables do not exist
    models.Base.metadata.create_all(bind=engine)
    print("✅ Database ready")

    yield

    print("🔌 Shutting down...")


app = FastAPI(
    title="Lingo - interleaved translations",
    description="FastAPI for translating texts and looking up word meanings",
    version="1.0.0",
    lifespan=lifespan,
)

# Security headers for production only
if ENVIRONMENT == "production":
    from starlette.middleware.base import BaseHTTPMiddleware

    class SecurityHeadersMiddleware(BaseHTTPMiddleware):
        async def dispatch(self, request, call_next):
            response = await call_next(request)
            response.headers["X-Content-Type-Options"] = "nosniff"
            response.headers["X-Frame-Options"] = "DENY"
            response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
            return response

    app.add_middleware(SecurityHeadersMiddleware)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Root endpoint
@app.get("/")
async def root():
    return {
        "message": "API for lingo",
        "version": "1.0.0",
        "docs": "/docs",
        "endpoints": {
            "translations": "/api/translations",
            "new_translation": "/api/newtranslation",
            "definitions": "/api/definitions/{word}",
        },
    }


# Health check endpoint
@app.get("/health")
async def health_check():
    return {"status": "healthy", "service": "API for lingo"}


# Include routers
app.include_router(
    api_router,
    prefix="/api",
    responses={404: {"description": "Not found"}},
)

# Prebuilt frontend, served last so it never shadows the API
if FRONTEND_DIST and Path(FRONTEND_DIST).is_dir():
    app.mount("/app", StaticFiles(directory=FRONTEND_DIST, html=True), name="frontend")


def run():
    import uvicorn

    print(f"🚀 Starting server on {HOST}:{PORT}")
    uvicorn.run("lingo.main:app", host=HOST, port=PORT)


if __name__ == "__main__":
    run()
