"""
Response shapes for the AI gateway.

The models double as `response_schema` for structured generation and as the typed
results handed to the pages.
"""
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def _clamp(value, low, high):
    try:
        number = float(value)
    except (TypeError, ValueError):
        return low
    return max(low, min(high, number))


# ===== Case DNA =====

class TimelineEvent(BaseModel):
    date: str = Field(description="The date of the event (can be specific or approximate).")
    event: str = Field(description="A concise description of the event.")


class Entity(BaseModel):
    name: str = Field(description="The name of the entity.")
    type: Literal["Person", "Organization", "Digital Asset", "Other"] = Field(
        description="The type of entity (e.g., Person, Organization, Digital Asset, Other)."
    )
    description: str = Field(description="A brief description of the entity's role in the case.")


class CaseDna(BaseModel):
    timeline: List[TimelineEvent]
    entities: List[Entity]
    evidencePatterns: List[str] = Field(
        description="Observed patterns or connections in the evidence (e.g., communication logs, access records)."
    )
    legalLiabilities: List[str] = Field(
        description="Potential legal liabilities or claims that could arise from the facts."
    )


# ===== Cyber Risk Meter =====

class IdentifiedRisk(BaseModel):
    risk: str = Field(description="A specific, clearly identified risk.")
    recommendation: str = Field(description="A concrete, actionable recommendation to mitigate this risk.")


class CyberRiskAssessment(BaseModel):
    riskScore: float = Field(description="A numerical risk score from 0 (very low risk) to 100 (critical risk).")
    riskLevel: Literal["Low", "Medium", "High", "Critical"] = Field(
        description="A qualitative risk level: 'Low', 'Medium', 'High', or 'Critical'."
    )
    summary: str = Field(description="A concise, one-sentence summary of the overall risk profile.")
    identifiedRisks: List[IdentifiedRisk]

    @field_validator("riskScore", mode="before")
    @classmethod
    def _score_range(cls, v):
        return _clamp(v, 0, 100)


# ===== Precedent Predictor =====

class PredictedOutcome(BaseModel):
    outcome: str = Field(
        description="A concise description of the potential outcome (e.g., 'Summary Judgment for Defendant', "
                    "'Settlement', 'Favorable ruling for Plaintiff')."
    )
    reasoning: str = Field(description="Brief reasoning for this prediction based on precedent.")
    confidenceScore: Literal["High", "Medium", "Low"] = Field(
        description="The AI's confidence in this prediction: 'High', 'Medium', or 'Low'."
    )
    likelihoodPercentage: float = Field(description="A numerical likelihood from 0 to 100.")

    @field_validator("likelihoodPercentage", mode="before")
    @classmethod
    def _likelihood_range(cls, v):
        return _clamp(v, 0, 100)


class LegalSection(BaseModel):
    section: str = Field(
        description="The name or citation of the legal section (e.g., 'GDPR Article 17', '17 U.S.C. § 106')."
    )
    relevance: str = Field(description="How this section is relevant to the case.")


class SuggestedStrategy(BaseModel):
    strategy: str = Field(description="A title for the strategy (e.g., 'Focus on Evidentiary Chain of Custody').")
    description: str = Field(description="A brief description of what the strategy entails.")


class PrecedentPrediction(BaseModel):
    predictedOutcomes: List[PredictedOutcome] = Field(description="A list of potential outcomes for the case.")
    keyLegalSections: List[LegalSection] = Field(description="Relevant legal statutes or sections of law.")
    suggestedStrategies: List[SuggestedStrategy] = Field(description="Potential legal strategies to consider.")


# ===== Smart Contract Sentry =====

class Vulnerability(BaseModel):
    name: str = Field(description="Short name of the vulnerability (e.g., 'Reentrancy').")
    line: Optional[int] = Field(description="Line number where the issue appears, if known.")
    severity: Literal["Critical", "High", "Medium", "Low"]
    description: str = Field(description="What the issue is and how it could be exploited.")

    @model_validator(mode="before")
    @classmethod
    def _line_optional(cls, data):
        # the schema sent to the model cannot carry defaults
        if isinstance(data, dict):
            data.setdefault("line", None)
        return data


class ContractAudit(BaseModel):
    securityScore: float = Field(description="Overall security score from 0 (insecure) to 100 (secure).")
    vulnerabilities: List[Vulnerability]
    legalRisks: List[str] = Field(description="Legal or regulatory risks raised by the contract.")
    summary: str = Field(description="A short overall assessment.")

    @field_validator("securityScore", mode="before")
    @classmethod
    def _score_range(cls, v):
        return _clamp(v, 0, 100)


# ===== Quiz =====

class QuizQuestion(BaseModel):
    question: str
    options: List[str] = Field(min_length=4, max_length=4)
    correctAnswer: int
    explanation: str

    @field_validator("correctAnswer")
    @classmethod
    def _answer_in_options(cls, v, info):
        options = info.data.get("options") or []
        if not 0 <= v < len(options):
            raise ValueError(f"correctAnswer {v} is outside the {len(options)} options")
        return v


# ===== Law relevance =====

class LawRelevance(BaseModel):
    model_config = ConfigDict(extra="ignore")

    advice: str = Field(description="Concise professional explanation of why the law helps in this scenario.")
    score: Optional[int] = Field(description="Fit from 0 (unrelated) to 10 (fits like a glove).")

    @model_validator(mode="before")
    @classmethod
    def _score_optional(cls, data):
        if isinstance(data, dict):
            data.setdefault("score", None)
        return data

    @field_validator("score", mode="before")
    @classmethod
    def _score_range(cls, v):
        if v is None:
            return None
        try:
            number = float(v)
        except (TypeError, ValueError):
            return None
        return int(round(_clamp(number, 0, 10)))


# ===== Grounding / chat =====

class GroundingSource(BaseModel):
    uri: str
    title: str = ""


class GroundedText(BaseModel):
    text: str
    sources: List[GroundingSource] = Field(default_factory=list)


class ChatAttachment(BaseModel):
    name: str
    type: str
    data: str  # base64 data URL


class ChatMessage(BaseModel):
    role: Literal["user", "model"]
    content: str
    attachments: List[ChatAttachment] = Field(default_factory=list)


class SavedChat(BaseModel):
    id: str
    title: str
    date: str
    messages: List[ChatMessage] = Field(default_factory=list)
