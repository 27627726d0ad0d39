"""
Webeze Server Package.

This package contains the web server implementation for the Webeze platform.

Subpackages:
    api: FastAPI route definitions and endpoint logic.
    core: Server configuration and constants.
    services: Business logic and request-scoped dependencies.
    middleware: Request tracing middleware.
    exception_handlers: Mapping of exceptions to JSON error responses.
"""
