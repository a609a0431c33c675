from fastapi import FastAPI
from contextlib import asynccontextmanager
from scrapview.api.routes import router
from scrapview.core.config import settings
from scrapview.services.session import session
from scrapview.services.inspect import active_rules, configured_rules

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.
    Start every process with no current chain.
    """
    # Startup
    print("Initializing Scrape Chain Inspector...")
    session.reset()
    mode = "mock" if settings.USE_MOCK else settings.SCRAPE_ENDPOINT
    if configured_rules() is None:
        print(f"UNKNOWN CLASSIFIER_RULES={settings.CLASSIFIER_RULES!r}, using full rule set")
    print(f"Scrape source: {mode}, classifier rules: {active_rules().value}")

    yield

    # Shutdown
    print("Shutting down Scrape Chain Inspector...")

app = FastAPI(
    title="Scrape Chain Inspector",
    description="API for classifying the redirect and og:url attempt chains returned by a scrape endpoint",
    version="1.0.0",
    lifespan=lifespan
)

# Include API routes
app.include_router(router)

@app.get("/")
async def root():
    """Root endpoint with basic info"""
    return {
        "service": "Scrape Chain Inspector",
        "version": "1.0.0",
        "endpoints": {
            "inspect": "POST /inspect",
            "current": "GET /inspect/current",
            "attempt_html": "GET /inspect/current/attempts/{index}/html",
            "health": "GET /health"
        }
    }
