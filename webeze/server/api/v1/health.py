"""
Health Check Endpoints.

Unauthenticated liveness and version probes used by load balancers and
deployment checks. They never touch the database.
"""

from fastapi import APIRouter

from webeze.server.core import constant

router = APIRouter()


@router.get(
    "/health",
    summary="Health Check",
    description="Liveness probe for the Webeze API.",
    response_description="Status object.",
)
async def health_check():
    """Report that the process is up and serving requests."""
    return {"status": "ok"}


@router.get(
    "/version",
    summary="Get Version",
    description="Release and API schema version of the running server.",
    response_description="Version object.",
)
async def version():
    """
    Get API version.

    ``version`` is the package release, ``schema_version`` the version of the
    ``/api`` contract clients are built against.
    """
    return {"version": constant.VERSION, "schema_version": constant.SCHEMA_VERSION}
