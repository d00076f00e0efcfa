"""
Service Skeleton Backend — Front Controller Route
===================================================

What:  GET / runs the bootstrap action once and reports the outcome.
Why:   A request to the root is the quickest end-to-end check that a freshly
       deployed container can resolve its paths, write to var/, and knows
       which user it runs as.
"""

import logging

from fastapi import APIRouter, Depends

from app.schemas.bootstrap import ErrorResponse, RunResponse
from app.services.bootstrap import ApplicationRunner, get_runner

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Bootstrap"])


@router.get(
    "/",
    response_model=RunResponse,
    responses={
        200: {"description": "Diagnostic entry written", "model": RunResponse},
        500: {"description": "Data directory or log file not writable", "model": ErrorResponse},
    },
    summary="Run the bootstrap smoke test",
    description=(
        "Ensures the working-data directory exists and appends one diagnostic "
        "line to the log file."
    ),
)
async def run_bootstrap(runner: ApplicationRunner = Depends(get_runner)) -> RunResponse:
    """
    Error responses (handled by global exception handlers):
        HTTP 500: DataDirectoryError / LogWriteError
    """
    outcome = await runner.run()
    # run() only returns successful outcomes, which always carry the entry
    assert outcome.entry is not None
    return RunResponse(
        status=outcome.status.value,
        logged_at=outcome.entry.timestamp,
        user=outcome.entry.username,
        log_file=outcome.log_path.name,
    )
