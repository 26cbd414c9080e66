"""
Pydantic models for the FEREX backend.
Request and response shapes shared by the store and the API.
"""

from pydantic import BaseModel, ConfigDict, field_validator


# ============================
# Scenario Models
# ============================
class SavedScenario(BaseModel):
    """A named scenario as persisted by the store"""
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    data: str  # serialized scenario, never inspected here
    created_at: str  # ISO-8601, supplied by the caller
    updated_at: str

    @field_validator("id", "name", "data", "created_at", "updated_at")
    @classmethod
    def _encodable(cls, value: str) -> str:
        # Lone surrogates (e.g. from a JSON "\ud800" escape) cannot be stored
        try:
            value.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise ValueError(f"not representable as UTF-8 text: {exc.reason}") from exc
        return value


class StatusResponse(BaseModel):
    status: str = "ok"


# ============================
# Calculation Models
# ============================
class PensionRequest(BaseModel):
    """Inputs for the basic FERS annuity"""
    service_years: float
    high_three: float
    age_at_retirement: int


class PensionResult(BaseModel):
    annual_benefit: float


class AnnuitySupplementRequest(BaseModel):
    """Inputs for the FERS special retirement supplement"""
    service_years: float
    ss_benefit_at_62: float


class AnnuitySupplementResult(BaseModel):
    annual_supplement: float


class SocialSecurityRequest(BaseModel):
    """Inputs for a Social Security claiming-age adjustment"""
    benefit_at_fra: float
    claiming_age: float
    full_retirement_age: float = 67


class SocialSecurityResult(BaseModel):
    benefit: float
