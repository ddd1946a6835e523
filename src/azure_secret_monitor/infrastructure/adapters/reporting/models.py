"""JSON report models (no credential material exposed)."""

from pydantic import BaseModel, Field


class SecretInfo(BaseModel):
    """An expiring secret and its owning application."""

    application_name: str
    application_id: str
    secret_id: str
    expiry_date: str = Field(description="Expiry date in UTC, formatted YYYY-MM-DD")
    days_to_expiry: int = Field(description="Whole days left, negative once expired")


class ConfigInfo(BaseModel):
    """Non-sensitive configuration used for the run."""

    expiry_threshold_days: int
    monitor_tag: str
    format: str


class ExecutionInfo(BaseModel):
    """Metadata about the run."""

    timestamp: str = Field(description="Generation time, RFC 3339 in UTC")
    config: ConfigInfo


class OutputResult(BaseModel):
    """Complete JSON report."""

    results: list[SecretInfo] = Field(default_factory=list)
    execution_info: ExecutionInfo
