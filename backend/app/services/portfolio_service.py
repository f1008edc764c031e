"""
Portfolio Service — generate portfolio page copy from projects and skills.
"""

from __future__ import annotations

import logging
from typing import Any

from app.prompts.portfolio_writer import BIO_BLOCK, PROMPT_TEMPLATE
from app.services import llm_service
from app.utils.validation import validate_payload

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("fullName", "jobRole", "projects", "skills")
OPTIONAL_FIELDS = ("bio",)


def validate_portfolio_payload(body: Any) -> dict[str, str]:
    return validate_payload(body, REQUIRED_FIELDS, OPTIONAL_FIELDS)


def build_portfolio_prompt(payload: dict[str, str]) -> str:
    bio_block = BIO_BLOCK.format(bio=payload["bio"]) if payload.get("bio") else ""
    return PROMPT_TEMPLATE.format(
        fullName=payload["fullName"],
        jobRole=payload["jobRole"],
        projects=payload["projects"],
        skills=payload["skills"],
        bio_block=bio_block,
    ).strip()


async def generate_portfolio(body: Any) -> str:
    payload = validate_portfolio_payload(body)
    prompt = build_portfolio_prompt(payload)

    logger.info(f"Generating portfolio copy: role={payload['jobRole']}")

    return await llm_service.generate(prompt)
