"""Plan generation against a hosted language model."""

import asyncio
import dataclasses
import logging
import time
from typing import Protocol, runtime_checkable

import google.generativeai as genai
from google.api_core import exceptions as google_exceptions

from ..config import DEFAULT_MODEL, DEFAULT_TIMEOUT
from ..errors import ConfigurationError, GenerationError, GenerationErrorKind
from ..models.plan import FitnessPlan
from .request_builder import PlanRequest
from .validation import parse_plan_response

logger = logging.getLogger(__name__)


@runtime_checkable
class PlanGenerator(Protocol):
    """Anything that turns a plan request into a validated plan."""

    async def generate(self, request: PlanRequest) -> FitnessPlan:
        """Generate a plan for the request.

        Raises:
            GenerationError: On transport failure, timeout, empty or invalid response
        """
        ...


def _with_week_number(plan: FitnessPlan, week_number: int) -> FitnessPlan:
    """Pin the plan to the requested week; the model occasionally drifts."""
    if plan.week_number == week_number:
        return plan
    logger.warning(
        "Model returned weekNumber=%s for week %s request; using requested week",
        plan.week_number,
        week_number,
    )
    return dataclasses.replace(plan, week_number=week_number)


class GeminiPlanGenerator:
    """Generates plans with Gemini using schema-constrained JSON output.

    Every call is a fresh request: no caching and no retries. Retrying is
    left to the caller.
    """

    def __init__(
        self,
        api_key: str | None,
        model: str = DEFAULT_MODEL,
        timeout: float = DEFAULT_TIMEOUT,
        temperature: float = 0.7,
    ):
        if not api_key:
            raise ConfigurationError(
                "GEMINI_API_KEY is not set. Add it to your environment or .env file."
            )
        genai.configure(api_key=api_key)
        self.model_name = model
        self.timeout = timeout
        self.temperature = temperature
        self.model = genai.GenerativeModel(model)

    async def generate(self, request: PlanRequest) -> FitnessPlan:
        """Send the request and parse the structured response."""
        logger.info("Requesting week %s plan from %s", request.week_number, self.model_name)
        started = time.monotonic()

        try:
            response = await asyncio.wait_for(
                self.model.generate_content_async(
                    request.instruction_text,
                    generation_config={
                        "response_mime_type": "application/json",
                        "response_schema": request.output_schema,
                        "temperature": self.temperature,
                    },
                    request_options={"timeout": self.timeout},
                ),
                timeout=self.timeout,
            )
        except (asyncio.TimeoutError, google_exceptions.DeadlineExceeded) as e:
            logger.error("Plan generation timed out after %.0fs", self.timeout)
            raise GenerationError(
                GenerationErrorKind.TIMEOUT, f"No response within {self.timeout:.0f}s"
            ) from e
        except (google_exceptions.GoogleAPIError, OSError) as e:
            logger.error("Plan generation transport failure: %s", e)
            raise GenerationError(GenerationErrorKind.TRANSPORT_FAILURE, str(e)) from e

        try:
            plan = parse_plan_response(self._response_text(response), request.output_schema)
        except GenerationError as e:
            logger.error("Plan generation failed (%s): %s", e.kind.value, e)
            raise

        logger.info(
            "Week %s plan generated in %.1fs", request.week_number, time.monotonic() - started
        )
        return _with_week_number(plan, request.week_number)

    @staticmethod
    def _response_text(response) -> str | None:
        """Extract text from a response, tolerating blocked/empty candidates."""
        try:
            return response.text
        except ValueError:
            # Raised by the SDK when no candidate has text parts
            return None
