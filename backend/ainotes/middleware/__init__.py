# Middleware package init
"""
AI Notes Backend — Middleware Package
=====================================

Middleware Chain (outermost first):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    Request ID runs first so the access log line and any error response
    carry the same correlation id.
"""
