"""Domain models representing core business entities."""
from dataclasses import dataclass, field
from typing import List

from semver import Version


@dataclass(frozen=True)
class RepositoryQuery:
    """Immutable request to report the release lines of one repository.
    
    Versions strictly below ``floor`` are never reported.
    """
    owner: str
    name: str
    floor: Version
    
    @property
    def full_name(self) -> str:
        """Returns the full repository name (owner/name)."""
        return f"{self.owner}/{self.name}"


@dataclass(frozen=True)
class RepositoryReport:
    """Latest version of each version line for a queried repository."""
    query: RepositoryQuery
    versions: List[Version] = field(default_factory=list)
    tags_skipped: int = 0


@dataclass(frozen=True)
class RunMetrics:
    """Metrics for a reporting run."""
    repositories_processed: int
    repositories_failed: int
    tags_skipped: int
    duration_seconds: float
