"""
Cover Letter Service — validate the form, build the prompt, call Gemini.
"""

from __future__ import annotations

import logging
from typing import Any

from app.prompts.cover_letter import PROMPT_TEMPLATE
from app.services import llm_service
from app.utils.validation import validate_payload

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("jobRole", "companyName", "resumeSummary")


def validate_cover_letter_payload(body: Any) -> dict[str, str]:
    return validate_payload(body, REQUIRED_FIELDS)


def build_cover_letter_prompt(payload: dict[str, str]) -> str:
    return PROMPT_TEMPLATE.format(
        jobRole=payload["jobRole"],
        companyName=payload["companyName"],
        resumeSummary=payload["resumeSummary"],
    ).strip()


async def generate_cover_letter(body: Any) -> str:
    """Return the generated cover letter as trimmed plain text."""
    payload = validate_cover_letter_payload(body)
    prompt = build_cover_letter_prompt(payload)

    logger.info(f"Generating cover letter: role={payload['jobRole']} company={payload['companyName']}")

    text = await llm_service.generate(prompt)
    return text.strip()
