"""Main entry point for the release line reporter.

Reads ``owner/name,min_version`` records from the file given on the command
line and prints the latest release of every version line at or above the
minimum version.
"""
import asyncio
import logging
import os
import sys
from typing import List, Optional
from dotenv import load_dotenv
from release_lines.application.report_service import ReleaseReportService
from release_lines.infrastructure.github_client import GitHubReleaseClient
from release_lines.infrastructure.query_loader import load_queries


USAGE = "Input file required, please specify path! (expected: arg1:file-path)"

logger = logging.getLogger(__name__)


def resolve_log_level(name: str) -> int:
    """Map a LOG_LEVEL name to a logging level.
    
    Unknown names fall back to WARNING. Levels above ERROR are capped so
    fetch failures are always reported.
    """
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        return logging.WARNING
    return min(level, logging.ERROR)


def configure_logging() -> None:
    """Configure root logging from LOG_LEVEL; logs go to stderr."""
    logging.basicConfig(
        level=resolve_log_level(os.getenv("LOG_LEVEL", "WARNING")),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def build_client() -> GitHubReleaseClient:
    """Build the GitHub client from environment variables."""
    return GitHubReleaseClient(
        api_url=os.getenv("GITHUB_API_URL", GitHubReleaseClient.DEFAULT_API_URL),
        per_page=int(os.getenv("RELEASES_PER_PAGE", "10")),
        timeout=float(os.getenv("REQUEST_TIMEOUT", "30"))
    )


async def main(argv: List[str]) -> None:
    """Execute the report for the input file named in argv."""
    if len(argv) != 2:
        print(USAGE)
        return
    
    try:
        queries = load_queries(argv[1])
    except OSError as e:
        print(e)
        return
    
    reporter = ReleaseReportService(release_source=build_client())
    
    try:
        metrics = await reporter.run(queries)
        logger.info(
            f"Done: {metrics.repositories_processed} reported, "
            f"{metrics.repositories_failed} failed"
        )
    finally:
        await reporter.close()


def run(argv: Optional[List[str]] = None) -> None:
    """Console script entry point."""
    # Load environment variables from .env or env file
    load_dotenv('.env') or load_dotenv('env')
    configure_logging()
    
    try:
        asyncio.run(main(sys.argv if argv is None else argv))
    except Exception as e:
        logger.error(f"Run failed: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    run()
