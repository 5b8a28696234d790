# Middleware package init
"""
Recordings API: Middleware Package
===================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain:
    Request → [Request ID] → [Logging] → Route Handler

    - Request ID runs first so every log line for the request, including
      the access log line, carries the same correlation ID.
    - Logging captures response status and duration on the way out.
"""
