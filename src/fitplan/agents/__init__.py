"""Plan request building and AI generation."""

from .generator import GeminiPlanGenerator, PlanGenerator
from .output_specs import FITNESS_PLAN_SCHEMA
from .request_builder import PlanRequest, build_plan_request
from .validation import parse_plan_response, validate_document

__all__ = [
    "build_plan_request",
    "FITNESS_PLAN_SCHEMA",
    "GeminiPlanGenerator",
    "parse_plan_response",
    "PlanGenerator",
    "PlanRequest",
    "validate_document",
]
