# Middleware package init
"""
Notebox - Middleware Package
============================

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [CORS, when configured] → Route Handler

    1. Request ID first: every later log line can carry the correlation ID
    2. Logging: records method, path, status and duration for each request
"""
