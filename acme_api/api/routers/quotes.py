from fastapi import APIRouter, Depends, status

from acme_api.api.deps import get_quote_service
from acme_api.domain.quote_rules import RuleViolation
from acme_api.errors import BusinessRuleViolationError, NotFoundError
from acme_api.schemas.error import ErrorResponse
from acme_api.schemas.quote import CalculateQuoteRequest, CarInsuranceQuote
from acme_api.services.quote import QuoteService

router = APIRouter(prefix="/quote", tags=["car insurance quotes"])


@router.post(
    "/calculate",
    response_model=CarInsuranceQuote,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_409_CONFLICT: {"model": ErrorResponse}},
)
def calculate_quote(
    quote_data: CalculateQuoteRequest,
    quote_service: QuoteService = Depends(get_quote_service),
):
    """
    Calculate a car insurance quote.

    The quote is stored and can be fetched again by its ID.
    Requests that break a business rule are answered with 409 Conflict.
    """
    result = quote_service.calculate_premium(
        quote_data.age_of_driver,
        quote_data.car_id,
        quote_data.purchase_price,
    )
    if isinstance(result, RuleViolation):
        raise BusinessRuleViolationError(result)
    return CarInsuranceQuote.model_validate(result)


@router.get(
    "/{quote_id}",
    response_model=CarInsuranceQuote,
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)
def get_quote_by_id(
    quote_id: int,
    quote_service: QuoteService = Depends(get_quote_service),
):
    """Get a car insurance quote by ID."""
    premium = quote_service.get_by_id(quote_id)
    if premium is None:
        raise NotFoundError(f"Quote with id {quote_id} not found")
    return CarInsuranceQuote.model_validate(premium)
