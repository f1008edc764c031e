"""
Resume Service — generate resume content from the candidate's form data.

Responsibilities:
  • Validate the resume form (name, target role, experience, skills)
  • Append the optional education/projects sections when provided
  • Send the prompt to Gemini and return the resume text
"""

from __future__ import annotations

import logging
from typing import Any

from app.prompts.resume_writer import EDUCATION_BLOCK, PROJECTS_BLOCK, PROMPT_TEMPLATE
from app.services import llm_service
from app.utils.validation import validate_payload

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("fullName", "jobRole", "experience", "skills")
OPTIONAL_FIELDS = ("education", "projects")


# ── Public API ───────────────────────────────────────────────────────────────


def validate_resume_payload(body: Any) -> dict[str, str]:
    return validate_payload(body, REQUIRED_FIELDS, OPTIONAL_FIELDS)


def build_resume_prompt(payload: dict[str, str]) -> str:
    """Fill the resume template; optional sections are listed only if present."""
    extra_sections = ""
    optional_blocks = ""

    if payload.get("education"):
        extra_sections += ", EDUCATION"
        optional_blocks += EDUCATION_BLOCK.format(education=payload["education"])
    if payload.get("projects"):
        extra_sections += ", PROJECTS"
        optional_blocks += PROJECTS_BLOCK.format(projects=payload["projects"])

    return PROMPT_TEMPLATE.format(
        fullName=payload["fullName"],
        jobRole=payload["jobRole"],
        experience=payload["experience"],
        skills=payload["skills"],
        extra_sections=extra_sections,
        optional_blocks=optional_blocks,
    ).strip()


async def generate_resume(body: Any) -> str:
    """Validate → build prompt → Gemini. Returns the resume text."""
    payload = validate_resume_payload(body)
    prompt = build_resume_prompt(payload)

    logger.info(f"Generating resume: role={payload['jobRole']} sections={sorted(payload)}")

    return await llm_service.generate(prompt)
