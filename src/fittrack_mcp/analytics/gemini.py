"""Gemini text-generation client for workout plans and session insights.

Uses the google-genai SDK with API-key auth.
"""

import logging

import httpx
from google import genai
from google.genai import errors as genai_errors
from google.genai.types import GenerateContentConfig, HttpOptions
from pydantic import ValidationError

from fittrack_mcp.analytics.exceptions import AIUnavailableError, InsightServiceError
from fittrack_mcp.analytics.insights import render_insight_prompt, render_plan_prompt
from fittrack_mcp.analytics.models import GeneratedPlan, InsightContext

logger = logging.getLogger(__name__)


class GeminiClient:
    """Async wrapper around ``genai.Client`` for plan and insight generation."""

    def __init__(
        self,
        api_key: str | None,
        model: str = "gemini-2.0-flash",
        timeout: float = 30,
        client: genai.Client | None = None,
    ):
        self._api_key = api_key
        self._model = model
        self._timeout = timeout
        self._client = client

    @property
    def is_available(self) -> bool:
        return self._client is not None or bool(self._api_key)

    def _get_client(self) -> genai.Client:
        if self._client is None:
            self._client = genai.Client(
                api_key=self._api_key,
                http_options=HttpOptions(timeout=int(self._timeout * 1000)),
            )
        return self._client

    async def _generate(self, prompt: str, config: GenerateContentConfig | None = None) -> str:
        if not self.is_available:
            raise AIUnavailableError("GEMINI_API_KEY is not configured.")

        try:
            response = await self._get_client().aio.models.generate_content(
                model=self._model,
                contents=prompt,
                config=config,
            )
        except genai_errors.APIError as e:
            logger.warning("Gemini returned %s: %s", e.code, e.message)
            raise InsightServiceError(f"Gemini request failed: {e.message}", status_code=e.code) from e
        except httpx.HTTPError as e:
            logger.warning("Gemini request failed: %s", e)
            raise InsightServiceError(f"Gemini request failed: {e}") from e

        text = (response.text or "").strip()
        if not text:
            raise InsightServiceError("Gemini response contained no text")
        return text

    async def generate_workout_plan(self, request: str) -> GeneratedPlan:
        """Ask for a structured plan constrained to the GeneratedPlan schema."""
        text = await self._generate(
            render_plan_prompt(request),
            config=GenerateContentConfig(
                response_mime_type="application/json",
                response_schema=GeneratedPlan,
            ),
        )
        try:
            return GeneratedPlan.model_validate_json(text)
        except ValidationError as e:
            logger.error("Could not parse generated plan: %s", e)
            raise InsightServiceError(
                "Failed to generate a workout plan. The AI service may be busy. Please try again later."
            ) from e

    async def generate_workout_insights(self, context: InsightContext) -> str:
        return await self._generate(render_insight_prompt(context))
