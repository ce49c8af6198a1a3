"""HTTP middleware for the API service.

- `SecurityHeadersMiddleware` sets the browser hardening headers (CSP,
  nosniff, frame options, HSTS, ...) on every response.
- `AccessLogMiddleware` writes one Apache "combined" format line per request
  to the `opfts.access` logger.

CORS is handled by Starlette's stock `CORSMiddleware` (see `main.py`).
"""

from datetime import datetime, timezone
import logging

from starlette.middleware.base import BaseHTTPMiddleware

access_logger = logging.getLogger("opfts.access")

CSP_DIRECTIVES = {
    "default-src": ["'self'"],
    "style-src": ["'self'", "'unsafe-inline'", "https://cdnjs.cloudflare.com"],
    "font-src": ["'self'", "https://cdnjs.cloudflare.com"],
    "script-src": ["'self'", "'unsafe-inline'"],
    "img-src": ["'self'", "data:", "https:"],
}


def build_csp(directives):
    """Render a directive mapping as a Content-Security-Policy header value."""
    return "; ".join(f"{name} {' '.join(sources)}" for name, sources in directives.items())


SECURITY_HEADERS = {
    "Content-Security-Policy": build_csp(CSP_DIRECTIVES),
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
    "Origin-Agent-Cluster": "?1",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
    "X-Content-Type-Options": "nosniff",
    "X-DNS-Prefetch-Control": "off",
    "X-Download-Options": "noopen",
    "X-Frame-Options": "SAMEORIGIN",
    "X-Permitted-Cross-Domain-Policies": "none",
    "X-XSS-Protection": "0",
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Attach `SECURITY_HEADERS` to every response without overriding handler-set values."""

    async def dispatch(self, request, call_next):
        response = await call_next(request)
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        return response


def format_combined(request, status_code, content_length, when=None):
    """Format a request as an Apache/NCSA "combined" log line.

    Args:
        request: Starlette request being logged.
        status_code: Response status sent to the client.
        content_length: Response body size as a string, or None when unknown.
        when: Timestamp for the line; defaults to now (UTC).

    Returns:
        str: e.g. `127.0.0.1 - - [19/Oct/2026:12:00:00 +0000] "GET /health HTTP/1.1" 200 73 "-" "curl/8.0"`.
    """
    when = when or datetime.now(timezone.utc)
    remote = request.client.host if request.client else "-"
    target = request.url.path
    if request.url.query:
        target = f"{target}?{request.url.query}"
    http_version = request.scope.get("http_version", "1.1")
    referrer = request.headers.get("referer", "-")
    user_agent = request.headers.get("user-agent", "-")
    return (
        f'{remote} - - [{when.strftime("%d/%b/%Y:%H:%M:%S %z")}] '
        f'"{request.method} {target} HTTP/{http_version}" '
        f'{status_code} {content_length or "-"} "{referrer}" "{user_agent}"'
    )


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Log every request to `opfts.access` in combined format, including ones that fault."""

    async def dispatch(self, request, call_next):
        try:
            response = await call_next(request)
        except Exception:
            # unhandled faults are answered by the 500 handler further out
            access_logger.info(format_combined(request, 500, None))
            raise
        access_logger.info(
            format_combined(request, response.status_code, response.headers.get("content-length"))
        )
        return response
