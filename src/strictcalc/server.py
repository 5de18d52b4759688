"""
Calculator Server - arithmetic evaluation HTTP endpoint

Exposes calculate() over HTTP using FastAPI. Intended as a development
front end and as an example of embedding the evaluator in a service.

Environment variables:
    STRICTCALC_APP_HOST - Host to bind to (default: 0.0.0.0)
    STRICTCALC_APP_PORT - Port to listen on (default: 8098)
    STRICTCALC_LOG_LEVEL - Log level (debug, info, warning, error)
    STRICTCALC_MAX_EXPRESSION_LENGTH - Longest accepted expression
    STRICTCALC_MAX_NESTING_DEPTH - Deepest accepted nesting

Usage:
    python -m strictcalc.server
    STRICTCALC_APP_PORT=9000 STRICTCALC_LOG_LEVEL=debug python -m strictcalc.server
"""

from __future__ import annotations

import logging
import os

from fastapi import FastAPI, HTTPException

from strictcalc.calculator import calculate
from strictcalc.fastapi_model import (
    CalculationErrorDetail,
    CalculationRequest,
    CalculationResponse,
)
from strictcalc.limits import ExpressionLimits, limits_from_env

ENV_VAR_LOG_LEVEL = "STRICTCALC_LOG_LEVEL"
ENV_VAR_APP_HOST = "STRICTCALC_APP_HOST"
ENV_VAR_APP_PORT = "STRICTCALC_APP_PORT"

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8098

logger = logging.getLogger(__name__)


def create_app(limits: ExpressionLimits | None = None) -> FastAPI:
    """Create and return a FastAPI application for evaluating expressions."""
    limits = limits or limits_from_env()

    app = FastAPI(
        title="Calculator Server",
        description="Strict arithmetic expression evaluation",
    )

    @app.post("/v1/calculate", response_model=CalculationResponse)
    async def calculate_expression(request: CalculationRequest):
        """Evaluate an expression and return its value."""
        result = calculate(request.expression, limits)

        if not result.success:
            assert result.kind is not None and result.error is not None
            logger.info(
                "expression_rejected",
                extra={"kind": result.kind.value, "position": result.position},
            )
            detail = CalculationErrorDetail(
                error=result.kind.value,
                message=result.error,
                position=result.position,
            )
            raise HTTPException(status_code=422, detail=detail.model_dump())

        assert result.value is not None
        return CalculationResponse(value=result.value, display=result.display)

    @app.get("/health")
    async def health_check():
        """Health check endpoint for the calculator service."""
        return {"status": "healthy", "service": "strictcalc"}

    return app


def main() -> None:
    import uvicorn

    logging.basicConfig(
        level=os.getenv(ENV_VAR_LOG_LEVEL, "warning").upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    host = os.getenv(ENV_VAR_APP_HOST, DEFAULT_HOST)
    port = int(os.getenv(ENV_VAR_APP_PORT, str(DEFAULT_PORT)))

    logger.info("starting_calculator_server", extra={"host": host, "port": port})
    uvicorn.run(create_app(), host=host, port=port)


if __name__ == "__main__":
    main()
