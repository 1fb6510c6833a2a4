from fastapi import APIRouter, status

from droppit.api.schemas.payments import SizingSuggestionRequest, SizingSuggestionResponse
from droppit.application.use_cases import suggest_package_size as sizing

router = APIRouter()


@router.post(
    "/sizing-suggestion",
    response_model=SizingSuggestionResponse,
    status_code=status.HTTP_200_OK,
)
async def sizing_suggestion(payload: SizingSuggestionRequest) -> SizingSuggestionResponse:
    recommendation = await sizing.suggest_package_size(payload.description)
    return SizingSuggestionResponse(recommendation=recommendation)
