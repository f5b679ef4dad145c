# Middleware package init
"""
Exercise Tracker - Middleware Package
=======================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    Request ID runs first so the access log line and any handler log lines
    can carry the same correlation ID. Responses pass back in reverse order.
"""
