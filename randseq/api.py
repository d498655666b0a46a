"""
HTTP API for sequence generation.

Requires the ``api`` extra (fastapi, uvicorn).

Endpoints:
- GET /api/v1/random/sequence: generate a sequence
- GET /api/v1/random/distributions: list supported distributions
- GET /swagger: redirect to the interactive docs

Example:
    uvicorn --factory randseq.api:create_app
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, RedirectResponse

from randseq import __version__
from randseq.errors import CLIENT_ERROR, RandSeqError
from randseq.response import ErrorDetails, error_details
from randseq.service import SequenceService
from randseq.types import SampleRequest

logger = logging.getLogger(__name__)


def _error_response(exc: Exception, request: Request) -> JSONResponse:
    err = error_details(exc, details=f"uri={request.url.path}")
    status_code = 400 if err.is_client_error else 500
    return JSONResponse(status_code=status_code, content=err.to_dict())


def create_app(service: SequenceService | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        service: The service to expose. Defaults to one built from
            ``ServiceConfig.load()``.
    """
    if service is None:
        from randseq.config import ServiceConfig

        service = SequenceService(ServiceConfig.load())

    config = service.config
    app = FastAPI(title="randseq", version=__version__)

    @app.exception_handler(RandSeqError)
    async def handle_randseq_error(request: Request, exc: RandSeqError) -> JSONResponse:
        return _error_response(exc, request)

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in e['loc'])}: {e['msg']}" for e in exc.errors()
        )
        err = ErrorDetails(
            message=f"Invalid request parameters: {problems}",
            classification=CLIENT_ERROR,
            details=f"uri={request.url.path}",
        )
        return JSONResponse(status_code=400, content=err.to_dict())

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        return _error_response(exc, request)

    # Sync endpoint: FastAPI runs it in its threadpool, one request per thread.
    @app.get("/api/v1/random/sequence")
    def get_random_sequence(
        count: int = config.default_count,
        source_type: str = Query(config.default_type, alias="type"),
        distribution: str = config.default_distribution,
        param1: float | None = None,
        param2: float | None = None,
    ) -> dict:
        """Generate a pseudo-random sequence."""
        request = SampleRequest(
            count=count,
            source_type=source_type,
            distribution=distribution,
            param1=param1,
            param2=param2,
        )
        return service.run(request).to_dict(json_safe=True)

    @app.get("/api/v1/random/distributions")
    def list_distributions() -> list[dict]:
        """List the distributions this service accepts."""
        return service.registry.describe()

    @app.get("/swagger", include_in_schema=False)
    def redirect_to_docs() -> RedirectResponse:
        return RedirectResponse(url="/docs")

    logger.debug(f"Created API for distributions: {', '.join(service.registry.names())}")
    return app
