from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SeverityTier(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


# --- Catalog ---

class DiseaseInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    description: str = "No description available"
    severity: SeverityTier = SeverityTier.MEDIUM


class SymptomCatalogEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    disease_name: str
    known_symptoms: tuple[str, ...]
    description: str = "No description available"
    severity: SeverityTier = SeverityTier.MEDIUM


# --- User input ---

class SymptomInput(BaseModel):
    symptoms: str
    age: str | None = None
    gender: str | None = None
    weight: str | None = None
    height: str | None = None

    @field_validator("age", "gender", "weight", "height", mode="before")
    @classmethod
    def _numbers_as_text(cls, value):
        if isinstance(value, bool):
            return str(value).lower()
        if isinstance(value, (int, float)):
            return str(value)
        return value

    def demographics(self) -> dict[str, str | None]:
        return {
            "age": self.age,
            "gender": self.gender,
            "weight": self.weight,
            "height": self.height,
        }


# --- Local matcher output ---

class MatchResult(BaseModel):
    disease_name: str
    confidence: int = Field(ge=0, le=100)
    description: str
    severity: SeverityTier


# --- External analysis ---

class AnalysisCondition(BaseModel):
    name: str
    confidence: int = Field(ge=60, le=95)
    description: str
    severity: SeverityTier
    symptoms: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)


class AnalysisResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    conditions: list[AnalysisCondition] = Field(default_factory=list)
    summary: str
    next_steps: list[str] = Field(alias="nextSteps", min_length=1)


class AnalysisOutcome(BaseModel):
    result: AnalysisResult
    source: Literal["model", "fallback"]
    error: str | None = None


# --- HTTP payloads ---

class PredictionItem(MatchResult):
    guidance: str


class PredictionResponse(BaseModel):
    input: str
    matched_symptoms: list[str] = Field(default_factory=list)
    results: list[PredictionItem] = Field(default_factory=list)


class ConditionInfoResponse(BaseModel):
    disease_name: str
    description: str
    severity: SeverityTier
    guidance: str


class AnalysisResponse(BaseModel):
    analysis: AnalysisResult
    source: Literal["model", "fallback"]
