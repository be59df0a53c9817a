"""API routes for the tax estimator and website chat proxy."""

import logging
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from config.settings import settings
from src.calculators.deductions import calculate_deductions
from src.calculators.income_tax import calculate_income_tax
from src.calculators.pay import calculate_take_home_pay
from src.calculators.tax_data import TAX_YEARS
from src.calculators.tax_return import calculate_tax_return
from src.models import (
    ChatRequest,
    ChatResponse,
    DeductionClaim,
    IncomeTaxRequest,
    PayRequest,
    TaxCalculationInput,
    TaxCalculationResult,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
async def health() -> dict[str, Any]:
    """Health check endpoint."""
    return {
        "status": "ok",
        "tax_years": sorted(TAX_YEARS),
        "chat_enabled": settings.chat_enabled,
    }


@router.post("/api/tax/estimate", response_model=TaxCalculationResult)
async def estimate(body: TaxCalculationInput) -> TaxCalculationResult:
    """Estimate tax payable and refund/debt for a year."""
    return calculate_tax_return(body)


@router.post("/api/tax/income-tax")
async def income_tax(body: IncomeTaxRequest) -> JSONResponse:
    """Bracket-by-bracket income tax breakdown."""
    result = calculate_income_tax(body.annual_income, body.is_resident, body.tax_year)
    if "error" in result:
        return JSONResponse(result, status_code=400)
    return JSONResponse(result)


@router.post("/api/tax/deductions")
async def deductions(body: DeductionClaim) -> dict[str, Any]:
    """Total a work-related deduction claim."""
    return calculate_deductions(body)


@router.post("/api/tax/pay")
async def take_home_pay(body: PayRequest) -> JSONResponse:
    """Take-home pay per week, fortnight, month and year."""
    result = calculate_take_home_pay(**body.model_dump())
    if "error" in result:
        return JSONResponse(result, status_code=400)
    return JSONResponse(result)


@router.post("/api/chatbot", response_model=ChatResponse)
async def chatbot(body: ChatRequest, request: Request) -> ChatResponse | JSONResponse:
    """Relay a website chat message to the LLM."""
    if not settings.chat_enabled:
        logger.error("Chat API key not configured")
        return JSONResponse({"error": "Chat service is not configured"}, status_code=500)

    if not body.message or not body.message.strip():
        return JSONResponse({"error": "Message is required"}, status_code=400)

    chat = request.app.state.chat_proxy
    try:
        return await chat.reply(
            body.message.strip(),
            history=body.history,
            generation=body.generation_config,
        )
    except Exception:
        logger.exception("Error in chat proxy")
        return JSONResponse(
            {"error": "Failed to get response from chat service"},
            status_code=500,
        )
