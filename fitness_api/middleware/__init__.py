# Middleware package init
"""
Fitness API — Middleware Package
==================================

Middleware Chain:
    Request → [Request Context] → [CORS] → Route Handler

    Request Context: correlation ID, access log, last-resort 500
    CORS: Applied by FastAPI's CORSMiddleware (handles preflight)
"""
