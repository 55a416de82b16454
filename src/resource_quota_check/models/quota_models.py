"""Data models for quota usage, findings and check outcomes."""

from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class ResourceKind(str, Enum):
    CPU = "cpu"
    MEMORY = "memory"


class CheckStatus(str, Enum):
    COMPLETED = "completed"
    ABORTED = "aborted"
    FAILED = "failed"


class QuotaUsage(BaseModel):
    """Used and hard values of one ResourceQuota, in milli-units."""

    model_config = ConfigDict(frozen=True)

    name: str
    namespace: str
    cpu_used: int = 0
    cpu_hard: int = 0
    memory_used: int = 0
    memory_hard: int = 0

    def pair(self, resource: ResourceKind) -> "tuple[int, int]":
        """Return ``(used, hard)`` for a resource dimension."""
        if resource is ResourceKind.CPU:
            return self.cpu_used, self.cpu_hard
        return self.memory_used, self.memory_hard


class Violation(BaseModel):
    """A quota dimension whose usage reached the threshold."""

    model_config = ConfigDict(frozen=True)

    namespace: str
    quota: str
    resource: ResourceKind
    used: int
    limit: int
    percent_used: float
    threshold: float

    @property
    def message(self) -> str:
        return (
            f"{self.resource.value} for {self.namespace} namespace has reached threshold of "
            f"{self.threshold:4.2f}: USED: {self.used} LIMIT: {self.limit} "
            f"PERCENT_USED: {self.percent_used:6.3f}"
        )

    def __str__(self) -> str:
        return self.message


class QuotaWarning(BaseModel):
    """Recorded when the quotas of a namespace could not be listed."""

    model_config = ConfigDict(frozen=True)

    namespace: str
    error: str

    @property
    def message(self) -> str:
        return f"error occurred listing resource quotas for {self.namespace} namespace {self.error}"

    def __str__(self) -> str:
        return self.message


Finding = Union[Violation, QuotaWarning]


class CheckOutcome(BaseModel):
    """Result of one pass over the cluster."""

    model_config = ConfigDict(frozen=True)

    status: CheckStatus
    findings: List[Finding] = Field(default_factory=list)
    error: Optional[str] = None

    @classmethod
    def completed(cls, findings: List[Finding]) -> "CheckOutcome":
        return cls(status=CheckStatus.COMPLETED, findings=list(findings))

    @classmethod
    def aborted(cls, findings: List[Finding], reason: Optional[str] = None) -> "CheckOutcome":
        return cls(status=CheckStatus.ABORTED, findings=list(findings), error=reason)

    @classmethod
    def failed(cls, error: str) -> "CheckOutcome":
        return cls(status=CheckStatus.FAILED, error=error)

    @property
    def messages(self) -> List[str]:
        return [finding.message for finding in self.findings]
