"""GitHub REST API client listing repository releases."""
import asyncio
import logging
from typing import List, Optional
import aiohttp
from release_lines.domain.release_source import IReleaseSource, ReleaseFetchError


logger = logging.getLogger(__name__)


class GitHubReleaseClient(IReleaseSource):
    """GitHub REST API client for the "list releases" endpoint.
    
    Implements the IReleaseSource port, providing an anti-corruption layer
    between the domain and GitHub's API. Only the first page of releases is
    requested.
    """
    
    DEFAULT_API_URL = "https://api.github.com"
    
    def __init__(
        self,
        api_url: str = DEFAULT_API_URL,
        per_page: int = 10,
        timeout: float = 30.0,
        session: Optional[aiohttp.ClientSession] = None
    ):
        """Initialize GitHub client.
        
        Args:
            api_url: Base URL of the GitHub REST API
            per_page: Number of releases to request (max 100)
            timeout: Total request timeout in seconds
            session: Existing HTTP session to use; it stays owned by the caller
        """
        self._api_url = api_url.rstrip("/")
        self._per_page = max(1, min(per_page, 100))  # GitHub max is 100
        self._timeout = aiohttp.ClientTimeout(total=timeout)
        self._session = session
        self._owns_session = session is None
    
    async def __aenter__(self) -> "GitHubReleaseClient":
        return self
    
    async def __aexit__(self, *exc: object) -> None:
        await self.close()
    
    def _get_session(self) -> aiohttp.ClientSession:
        """Return the HTTP session (lazy initialization)."""
        if self._session is None:
            self._session = aiohttp.ClientSession(
                headers={
                    "Accept": "application/vnd.github+json",
                    "X-GitHub-Api-Version": "2022-11-28",
                },
                timeout=self._timeout
            )
        return self._session
    
    async def fetch_release_tags(self, owner: str, name: str) -> List[str]:
        """Fetch the release tag names of a repository.
        
        Args:
            owner: Repository owner
            name: Repository name
            
        Returns:
            Tag names of the first page of releases
            
        Raises:
            ReleaseFetchError: On transport errors, non-200 responses or
                an unexpected response body
        """
        url = f"{self._api_url}/repos/{owner}/{name}/releases"
        session = self._get_session()
        
        try:
            async with session.get(url, params={"per_page": self._per_page}) as response:
                if response.status != 200:
                    body = await response.text()
                    raise ReleaseFetchError(
                        owner, name, f"HTTP {response.status}: {body[:200]}"
                    )
                releases = await response.json()
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            raise ReleaseFetchError(owner, name, str(e) or type(e).__name__) from e
        
        if not isinstance(releases, list):
            raise ReleaseFetchError(owner, name, "unexpected response body")
        
        tags = [
            release["tag_name"]
            for release in releases
            if isinstance(release, dict) and isinstance(release.get("tag_name"), str)
        ]
        logger.info(f"Fetched {len(tags)} release tags for {owner}/{name}")
        return tags
    
    async def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._session is not None and self._owns_session:
            await self._session.close()
            self._session = None
