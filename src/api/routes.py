"""API routes for the calculator service."""

import logging
from typing import Any

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from src.api.models import CcsCalculationRequest, CcsCalculationResponse
from src.calculators.ccs_data import get_ccs_info
from src.calculators.child_care_subsidy import InvalidInputError, calculate_child_care_subsidy

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}


@router.post(
    "/api/calculators/child-care-subsidy",
    response_model=CcsCalculationResponse,
    responses={400: {"description": "Invalid input"}, 500: {"description": "Calculation failed"}},
)
async def calculate_ccs(body: CcsCalculationRequest) -> CcsCalculationResponse | JSONResponse:
    """Calculate Child Care Subsidy from family income and circumstances."""
    logger.info("Calculating CCS for income: %s", body.annual_family_income)
    try:
        result = calculate_child_care_subsidy(body.to_input())
    except InvalidInputError as exc:
        logger.warning("Invalid input for CCS calculation: %s", exc.message)
        return JSONResponse({"error": exc.message}, status_code=400)
    except Exception:
        logger.exception("Error calculating CCS")
        return JSONResponse(
            {"error": "An error occurred while calculating the subsidy"}, status_code=500
        )
    return CcsCalculationResponse.from_result(result)


@router.get("/api/calculators/child-care-subsidy/info")
async def ccs_info() -> dict[str, Any]:
    """Current CCS rates, thresholds, activity levels and care types."""
    return get_ccs_info()
