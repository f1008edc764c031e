from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


# ── Request Models ──────────────────────────────────────────────────────────
# Every field is optional here; required-field checks (and their error
# message) live in app.utils.validation.


class CoverLetterRequest(BaseModel):
    """Form data for a cover letter."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    jobRole: Optional[str] = Field(None, description="Target job title")
    companyName: Optional[str] = Field(None, description="Company being applied to")
    resumeSummary: Optional[str] = Field(None, description="Candidate summary, the only source of facts")


class ResumeRequest(BaseModel):
    """Form data for resume content."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    fullName: Optional[str] = None
    jobRole: Optional[str] = None
    experience: Optional[str] = None
    skills: Optional[str] = None
    education: Optional[str] = None
    projects: Optional[str] = None


class PortfolioRequest(BaseModel):
    """Form data for portfolio page copy."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    fullName: Optional[str] = None
    jobRole: Optional[str] = None
    projects: Optional[str] = None
    skills: Optional[str] = None
    bio: Optional[str] = None


# ── Response Models ─────────────────────────────────────────────────────────


class ResumeResponse(BaseModel):
    """Generated resume content."""

    resume: str


class PortfolioResponse(BaseModel):
    """Generated portfolio copy."""

    portfolio: str


class ErrorResponse(BaseModel):
    """Body of every error response."""

    message: str
