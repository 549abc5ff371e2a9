"""Release source interface (port) for fetching release tags.

This is the anti-corruption layer that shields the domain from GitHub API specifics.
"""
from abc import ABC, abstractmethod
from typing import List


class ReleaseFetchError(Exception):
    """Raised when the releases of a repository cannot be retrieved."""
    
    def __init__(self, owner: str, name: str, reason: str):
        self.owner = owner
        self.name = name
        self.reason = reason
        super().__init__(f"failed to list releases of {owner}/{name}: {reason}")


class IReleaseSource(ABC):
    """Abstract interface for listing the releases of a repository."""
    
    @abstractmethod
    async def fetch_release_tags(self, owner: str, name: str) -> List[str]:
        """Fetch the release tag names of a repository.
        
        Args:
            owner: Repository owner (user or organization)
            name: Repository name
            
        Returns:
            Raw tag names, newest release first as reported by the service
            
        Raises:
            ReleaseFetchError: When the releases cannot be retrieved
        """
        pass
    
    @abstractmethod
    async def close(self) -> None:
        """Close any open connections."""
        pass
