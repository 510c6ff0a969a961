"""
Verification data model.

Challenge           — arithmetic problem paired with its expected answer
VerificationMode    — which verification method is in effect
MathProof           — proof from a solved fallback challenge
ExternalTokenProof  — proof from the external widget (reCAPTCHA token)
VerificationProof   — tagged union of the two proofs, discriminated by ``kind``
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class VerificationMode(Enum):
    EXTERNAL = "external"
    FALLBACK = "fallback"


class Challenge(BaseModel):
    """A generated problem. Replaced as a whole, never mutated."""

    model_config = ConfigDict(frozen=True)

    problem_text: str
    expected_answer: int


class MathProof(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["math"] = "math"
    answer: int
    problem_text: str

    def to_wire(self) -> dict:
        return {
            "verificationType": self.kind,
            "mathAnswer": self.answer,
            "mathProblem": self.problem_text,
        }


class ExternalTokenProof(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["recaptcha"] = "recaptcha"
    token: str

    def to_wire(self) -> dict:
        return {"verificationType": self.kind, "recaptchaToken": self.token}


VerificationProof = Annotated[
    Union[MathProof, ExternalTokenProof], Field(discriminator="kind")
]
