"""API endpoints for the swap calculator."""

import structlog
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from swapcalc.amm import SwapEngine, get_default_engine
from swapcalc.models.swap import ErrorResponse, SwapRequest, SwapResponse

logger = structlog.get_logger()

router = APIRouter()


def get_engine() -> SwapEngine:
    """Dependency provider for the swap engine.

    Override this in tests to inject an engine with a different fee:
        app.dependency_overrides[get_engine] = lambda: SwapEngine(fee_rate=0.0)
    """
    return get_default_engine()


@router.post(
    "/swap",
    response_model=SwapResponse,
    responses={400: {"model": ErrorResponse}},
)
@router.post(
    "/api/handler",
    response_model=SwapResponse,
    responses={400: {"model": ErrorResponse}},
    include_in_schema=False,
)
async def swap(
    request: SwapRequest,
    engine: SwapEngine = Depends(get_engine),
) -> SwapResponse | JSONResponse:
    """Quote a swap against the pool described in the request.

    Error Handling:
        - Malformed body: 400 "Invalid request body"
        - Engine rejection: 400 with the error kind and a message
        - Unexpected exception: logged, 500
    """
    logger.info(
        "received_swap",
        token_a=request.token_a,
        token_b=request.token_b,
        input_token=request.input_token,
        amount_in=request.amount_in,
    )

    try:
        outcome = engine.swap(
            request.token_a,
            request.reserve_a,
            request.token_b,
            request.reserve_b,
            request.input_token,
            request.amount_in,
        )
    except Exception:
        logger.exception("swap_error", input_token=request.input_token)
        return JSONResponse(status_code=500, content={"detail": "Internal error"})

    if outcome.error is not None:
        logger.warning(
            "swap_rejected",
            error=outcome.error.value,
            detail=outcome.error_detail,
            input_token=request.input_token,
        )
        return JSONResponse(
            status_code=400,
            content=ErrorResponse.for_kind(outcome.error).model_dump(),
        )

    response = SwapResponse.from_outcome(outcome)
    logger.info(
        "returning_swap",
        input_token=request.input_token,
        amount_out=response.amount_out,
    )
    return response


@router.get("/api/hello_world")
async def hello_world() -> dict[str, str]:
    """Liveness greeting kept for existing frontends."""
    return {"message": "Hello, World"}
