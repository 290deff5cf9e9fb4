# Middleware package init
"""
Evening Coffee Backend - Middleware Package
=============================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (outermost first):
    Request → [CORS] → [Request ID] → [Logging] → [Error Fallback] → [GZip] → Route

    1. CORS: stamps the three Access-Control-* headers on every response and
       answers OPTIONS itself, so preflights never reach anything below
    2. Request ID: correlation id for log lines and the X-Request-ID header
    3. Logging: one access-log line per request, with status and duration
    4. Error Fallback: last line of defence, turns escaped exceptions into
       500 {"error": "Internal server error"}; it sits inside CORS so even that
       response is readable cross-origin
"""
