"""
Urbanscope — FastAPI Entry Point

Start with:  uvicorn app:app --reload
"""

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse

load_dotenv()

from api.routes import router  # noqa: E402  (config reads env at import)
from modules.errors import UrbanscopeError  # noqa: E402

logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(name)s — %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Urbanscope API",
    description="Urban planning analysis — infrastructure, population and transport for a map region",
    version="0.1.0",
)


@app.exception_handler(UrbanscopeError)
async def urbanscope_error_handler(request: Request, exc: UrbanscopeError):
    logger.warning("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=exc.status_code, content={"detail": str(exc)})


@app.get("/")
def root(request: Request):
    """Quick check that the server is up. Links use the same host/port you used to connect."""
    base = str(request.base_url).rstrip("/")
    return {
        "message": "Urbanscope API is running",
        "docs_simple": f"{base}/docs-simple",
        "health": f"{base}/api/v1/health",
    }


@app.get("/docs-simple", response_class=HTMLResponse)
def docs_simple():
    """Lightweight API docs — no external CDN, works when /docs is stuck."""
    return """
<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <title>Urbanscope API</title>
  <style>
    body { font-family: system-ui; max-width: 640px; margin: 2rem auto; padding: 0 1rem; }
    .endpoint { margin: 1.5rem 0; padding: 1rem; border: 1px solid #eee; border-radius: 8px; }
    .method { font-weight: bold; color: #0a0; }
    code { background: #f0f0f0; padding: 2px 6px; }
  </style>
</head>
<body>
  <h1>Urbanscope API</h1>

  <div class="endpoint">
    <span class="method">GET</span> <code>/api/v1/health</code>
    <p>Check server is up.</p>
  </div>

  <div class="endpoint">
    <span class="method">POST</span> <code>/api/v1/analyze-region</code>
    <p>Body: <code>{"bounds": [[52.50, 13.38], [52.52, 13.41]]}</code></p>
    <p>Area, amenity counts, infrastructure score, population and transport metrics.</p>
  </div>

  <div class="endpoint">
    <span class="method">POST</span> <code>/api/v1/geosearch</code>
    <p>Body: <code>{"query": "Berlin Mitte"}</code></p>
    <p>Up to 5 matches as <code>{x, y, label}</code>.</p>
  </div>

  <p>Raw OpenAPI schema: <a href="/openapi.json" target="_blank">/openapi.json</a></p>
</body>
</html>
"""


app.include_router(router, prefix="/api/v1")
