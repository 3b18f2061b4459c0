# Middleware package init
"""
PetClinic Backend - Middleware Package
======================================

Middleware Chain (order matters):
    Request → [Rate Limit] → [Request ID] → [Logging] → [GZip] → Route Handler

    1. Rate Limit first: rejected requests never reach a database session
    2. Request ID: correlation id for every later log line and error page
    3. Logging: status and duration, measured around the handler
"""
