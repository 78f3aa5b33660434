from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from starlette.status import HTTP_503_SERVICE_UNAVAILABLE

router = APIRouter()

@router.get("/health")
async def health() -> dict[str, str]:
    """
    Liveness probe.
    Returns 200 OK while the process is alive.
    Does not touch the number source: a missing file is reported per request
    by the /stats endpoints, not by restarting the container.
    """
    return {"status": "ok"}

@router.get("/ready")
async def ready(request: Request):
    """
    Readiness probe.
    Returns 200 once startup has finished and an engine is installed, 503 otherwise.
    """
    ready_flag = getattr(request.app.state, "ready_flag", None)
    engine = getattr(request.app.state, "engine", None)
    if engine is not None and ready_flag and ready_flag():
        return {"status": "ready"}
    return JSONResponse({"status": "not ready"}, status_code=HTTP_503_SERVICE_UNAVAILABLE)
