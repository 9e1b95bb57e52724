"""AI prompt generation through an OpenAI-compatible chat completions API."""
import logging
from typing import Any

import httpx

from core.config import Settings
from services.exceptions import ConfigurationError, UpstreamError

logger = logging.getLogger(__name__)

TEMPERATURE = 0.7
MAX_TOKENS = 1000

SYSTEM_PROMPT = """You are an expert prompt engineer specializing in creating revolutionary, optimized prompts for AI systems. Your task is to take a user's basic request and transform it into a sophisticated, highly-effective prompt that will produce exceptional results.

Consider these key principles when crafting prompts:
1. Be specific and detailed
2. Provide context and constraints
3. Specify the desired format and structure
4. Include examples when helpful
5. Use clear, unambiguous language
6. Add role-playing elements when appropriate
7. Break complex tasks into steps
8. Specify tone, style, and audience

Transform the user's input into an optimized prompt that is clear, comprehensive, and designed to elicit the best possible AI response. Return ONLY the optimized prompt text without any preamble or explanation."""  # noqa: E501

NOT_CONFIGURED_MESSAGE = (
    "AI service is not configured. Please ensure OpenAI integration is properly set up."
)
EMPTY_RESPONSE_MESSAGE = "AI service returned an empty response. Please try again."
FAILED_MESSAGE = "Failed to generate prompt"


class PromptGenerator:
    """
    Turns a short user request into an optimized prompt.

    Each call opens its own HTTP client, so concurrent generations share no
    state. A caller that goes away does not cancel the upstream request.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        model: str = "gpt-4o-mini",
        timeout: float = 60.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.model = model
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "PromptGenerator":
        """
        Build a generator from application settings.

        Raises:
            ConfigurationError: If the provider base URL or API key is missing.
        """
        if not settings.ai_configured:
            logger.error(
                "Missing AI configuration: AI_INTEGRATIONS_OPENAI_BASE_URL or "
                "AI_INTEGRATIONS_OPENAI_API_KEY not set",
            )
            raise ConfigurationError(NOT_CONFIGURED_MESSAGE)
        return cls(
            base_url=settings.ai_base_url,
            api_key=settings.ai_api_key,
            model=settings.ai_model,
            timeout=settings.ai_timeout,
        )

    def _build_payload(self, user_input: str) -> dict[str, Any]:
        return {
            "model": self.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": user_input},
            ],
            "temperature": TEMPERATURE,
            "max_tokens": MAX_TOKENS,
        }

    async def generate(self, user_input: str) -> str:
        """
        Generate an optimized prompt for the user's request.

        Returns:
            The generated prompt text, stripped of surrounding whitespace.

        Raises:
            UpstreamError: If the provider call fails or returns no content.
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    f"{self.base_url}/chat/completions",
                    json=self._build_payload(user_input),
                    headers={"Authorization": f"Bearer {self.api_key}"},
                )
                response.raise_for_status()
                body = response.json()
        except httpx.HTTPStatusError as e:
            detail = _extract_provider_error(e.response)
            logger.error(
                "Prompt generation failed with status %d: %s",
                e.response.status_code,
                detail,
            )
            raise UpstreamError(FAILED_MESSAGE, detail=detail) from e
        except httpx.HTTPError as e:
            logger.error("Prompt generation request failed: %s", e)
            raise UpstreamError(FAILED_MESSAGE, detail=str(e) or type(e).__name__) from e
        except ValueError as e:
            # Response body was not JSON
            logger.error("Prompt generation returned a malformed body: %s", e)
            raise UpstreamError(FAILED_MESSAGE, detail="Malformed response from AI service") from e

        generated = _extract_content(body)
        if not generated:
            logger.warning("AI service returned empty content")
            raise UpstreamError(EMPTY_RESPONSE_MESSAGE)
        return generated


def _extract_content(body: Any) -> str:
    """Get the trimmed first choice message content, or "" if absent."""
    try:
        content = body["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return ""
    if not isinstance(content, str):
        return ""
    return content.strip()


def _extract_provider_error(response: httpx.Response) -> str:
    """Extract the provider's error message from a failed response."""
    try:
        body = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}"
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        if isinstance(error, str) and error:
            return error
        if body.get("message"):
            return str(body["message"])
    return f"HTTP {response.status_code}"
