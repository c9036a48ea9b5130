"""
Bugboard Backend — Middleware Package
=======================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (outermost first):
    Request → [Request ID] → [Logging] → [Identity] → [GZip] → [CORS]
            → [Error Reporting] → Route

    1. Request ID first so every later log line carries the correlation ID
    2. Logging wraps identity so the access log can name the caller
    3. Identity binds request.state.identity for the route dependencies
    4. Error Reporting innermost so unexpected failures come back out as a
       reported 500 that the outer layers still log and tag
"""
