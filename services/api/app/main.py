"""FastAPI application factory / entrypoint.

This service backs the OPFTS website. It exposes HTTP endpoints for:
- the project catalog (`/api/projects`)
- the team roster (`/api/team`)
- health checks (`/health`)

and serves the static site from `public/` at `/`.

Operational notes:
- Middleware order (outermost first): security headers, CORS, access log.
- The static mount is registered last so API routes always win; anything it
  cannot find falls through to the JSON 404 handler in `errors.py`.
- Run with `uvicorn services.api.app.main:app` or the `opfts-api` script.
"""

from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from .errors import register_exception_handlers
from .middleware import AccessLogMiddleware, SecurityHeadersMiddleware
from .routes import router
from .schemas import HealthOut
from .settings import Settings, get_settings

HEALTH_MESSAGE = "OPFTS Backend is running"


def utc_timestamp():
    """Current UTC time as ISO-8601 with millisecond precision and a `Z` suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the API application.

    Args:
        settings: Explicit configuration (tests); defaults to `get_settings()`.

    Returns:
        FastAPI: Fully wired application.
    """
    settings = settings or get_settings()
    static_dir = settings.static_dir

    app = FastAPI(title="OPFTS Backend", version="1.0.0")

    # add_middleware wraps, so the last one added runs first
    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(SecurityHeadersMiddleware)

    register_exception_handlers(app)

    app.include_router(router)

    # GET routes also answer HEAD, as browsers and uptime probes expect
    @app.api_route("/health", methods=["GET", "HEAD"], response_model=HealthOut)
    def health():
        """Health check endpoint.

        Used by container orchestrators and uptime checks to confirm the
        process is up and serving requests.

        Returns:
            dict: `{"status": "OK", "message": ..., "timestamp": "<ISO-8601>"}`.
        """
        return {"status": "OK", "message": HEALTH_MESSAGE, "timestamp": utc_timestamp()}

    @app.api_route("/", methods=["GET", "HEAD"], include_in_schema=False)
    def index():
        """Serve the site's landing page (`index.html` from the static directory)."""
        return FileResponse(static_dir / "index.html")

    app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")

    return app


app = create_app()
