# Middleware package init
"""
Store Admin Backend — Middleware Package
========================================

Middleware Chain (outermost first):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID: assigns the correlation id stored in request_id_var and
       copied into every RequestContext
    2. Logging: one access line per request, level chosen by status class
"""
