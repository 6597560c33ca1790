"""
FastAPI Application
==================
Serves the 99 Bottles lyrics page.

Run with:
    uvicorn bottles.web_api.main:app --reload
"""
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from bottles import __version__
from bottles.web_api.config import settings
from bottles.web_api.routers import health, lyrics

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "X-XSS-Protection": "1; mode=block",
}

# Create application
app = FastAPI(
    title="99 Bottles API",
    description="Lyrics of 99 Bottles of Beer on the Wall, with sing-along markup",
    version=__version__,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def add_security_headers(request: Request, call_next):
    response = await call_next(request)
    for name, value in SECURITY_HEADERS.items():
        response.headers[name] = value
    return response


# Include routers
app.include_router(health.router, tags=["Health"])
app.include_router(lyrics.router, tags=["Lyrics"])


# For running directly: python -m bottles.web_api.main
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
