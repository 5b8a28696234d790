"""
Recordings API: Request Logging Middleware
===========================================

What:  One access log line per album request.
How:   Measures wall time around the downstream app and logs the endpoint
       that served the request, status, duration and client address.
When:  Runs inside RequestIDMiddleware, so the request ID is already set.

Log level follows the status class:
    5xx → ERROR, 4xx → WARNING, everything else → INFO

Only query parameter *names* are logged (e.g. "albumId" or "name"). Artist
names and request bodies never reach the access log.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from recordings.middleware.request_id import request_id_var

logger = logging.getLogger("recordings.access")

# Health checks hit this every few seconds
UNLOGGED_PATHS = {"/health"}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs structured information about each HTTP request and response.

    Extra fields on the record: request_id, method, path, endpoint,
    query_params, status, duration_ms, client_ip. `endpoint` is the route
    function name (add_album, get_albums_by_artist, get_album_by_id), or
    "unmatched" for 404/405 answered by the router itself.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in UNLOGGED_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000

        route = request.scope.get("route")
        endpoint = getattr(route, "name", None) or "unmatched"
        query_params = sorted(request.query_params.keys())
        # request.client is None under some test transports
        client_ip = request.client.host if request.client else "unknown"
        rid = request_id_var.get("")

        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            "%s %s -> %s %d %.1fms params=%s from %s",
            request.method,
            path,
            endpoint,
            status,
            duration_ms,
            ",".join(query_params) or "-",
            client_ip,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": path,
                "endpoint": endpoint,
                "query_params": query_params,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )

        return response
