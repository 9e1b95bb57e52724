"""AI prompt generation endpoint."""
from fastapi import APIRouter, Depends

from core.config import Settings, get_settings
from schemas.errors import ErrorResponse, UpstreamErrorResponse
from schemas.generate import GeneratePromptRequest, GeneratePromptResponse
from services.prompt_generator import PromptGenerator

router = APIRouter(prefix="/api", tags=["generate"])


@router.post(
    "/generate-prompt",
    response_model=GeneratePromptResponse,
    responses={
        500: {"model": UpstreamErrorResponse},
        503: {"model": ErrorResponse},
    },
)
async def generate_prompt(
    data: GeneratePromptRequest,
    settings: Settings = Depends(get_settings),
) -> GeneratePromptResponse:
    """
    Generate an optimized prompt from a short request.

    Returns 400 for blank input, 503 when the AI provider is not configured,
    and 500 when the provider fails or returns empty content.
    """
    generator = PromptGenerator.from_settings(settings)
    generated = await generator.generate(data.user_input)
    return GeneratePromptResponse(generated_prompt=generated, original_input=data.user_input)
