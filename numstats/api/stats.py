import logging

from fastapi import APIRouter, HTTPException, Request
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_503_SERVICE_UNAVAILABLE

from numstats.errors import EmptyInputError, ResourceUnavailable, StatisticOverflowError
from numstats.observability.metrics import STATISTIC_COUNT
from numstats.services.descriptive import Statistic, StatisticResult, StatisticsEngine
from numstats.api.schemas import ErrorOut, MeanOut, MedianOut, ModeOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/stats")

ERROR_RESPONSES = {
    HTTP_400_BAD_REQUEST: {"model": ErrorOut, "description": "The source holds no numbers, or the result is beyond float range"},
    HTTP_503_SERVICE_UNAVAILABLE: {"model": ErrorOut, "description": "The source cannot be read"},
}


async def _summarize(request: Request, statistic: Statistic) -> StatisticResult:
    """
    Run one statistic against the app's engine.
    EmptyInputError and StatisticOverflowError map to 400, ResourceUnavailable to 503.
    """
    engine: StatisticsEngine = request.app.state.engine
    try:
        result = await engine.summarize(statistic)
    except EmptyInputError as exc:
        STATISTIC_COUNT.labels(statistic, "empty").inc()
        raise HTTPException(status_code=HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except StatisticOverflowError as exc:
        STATISTIC_COUNT.labels(statistic, "overflow").inc()
        raise HTTPException(status_code=HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except ResourceUnavailable as exc:
        STATISTIC_COUNT.labels(statistic, "unavailable").inc()
        logger.warning("Cannot compute %s: %s", statistic, exc)
        raise HTTPException(status_code=HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
    STATISTIC_COUNT.labels(statistic, "ok").inc()
    return result


@router.get("/mean", response_model=MeanOut, responses=ERROR_RESPONSES)
async def get_mean(request: Request):
    """Mean of the numbers currently in the source."""
    result = await _summarize(request, "mean")
    return MeanOut(mean=result.value, count=result.count)


@router.get("/median", response_model=MedianOut, responses=ERROR_RESPONSES)
async def get_median(request: Request):
    """Median of the numbers currently in the source."""
    result = await _summarize(request, "median")
    return MedianOut(median=result.value, count=result.count)


@router.get("/mode", response_model=ModeOut, responses=ERROR_RESPONSES)
async def get_mode(request: Request):
    """
    Most frequent numbers in the source, in order of first occurrence.
    Every number is returned when none repeats.
    """
    result = await _summarize(request, "mode")
    return ModeOut(mode=result.value, count=result.count)
