"""Tests for the command line entry point."""
import logging
import pytest
import latest_versions
from latest_versions import USAGE, main, resolve_log_level


class FakeClient:
    """Release source double recording whether it was closed."""
    
    def __init__(self, tags):
        self._tags = tags
        self.closed = False
    
    async def fetch_release_tags(self, owner, name):
        return self._tags
    
    async def close(self):
        self.closed = True


@pytest.mark.asyncio
@pytest.mark.parametrize("argv", [["latest_versions.py"], ["latest_versions.py", "a", "b"]])
async def test_wrong_argument_count_prints_usage(argv, capsys):
    """Test that missing or extra arguments print the usage message."""
    await main(argv)
    
    assert capsys.readouterr().out == USAGE + "\n"


@pytest.mark.asyncio
async def test_missing_file_prints_error(tmp_path, capsys):
    """Test that an unreadable input file prints the underlying error."""
    await main(["latest_versions.py", str(tmp_path / "missing.csv")])
    
    assert "missing.csv" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_reports_each_repository(tmp_path, capsys, monkeypatch):
    """Test a full run against a fake release source."""
    path = tmp_path / "repos.csv"
    path.write_text("repository,min_version\ngolang/go,1.0.0\n", encoding="utf-8")
    client = FakeClient(["v1.0.0", "v1.1.0", "v1.1.1", "v2.0.0"])
    monkeypatch.setattr(latest_versions, "build_client", lambda: client)
    
    await main(["latest_versions.py", str(path)])
    
    assert capsys.readouterr().out == "latest versions of golang/go: [2.0.0 1.1.1 1.0.0]\n"
    assert client.closed


def test_build_client_reads_environment(monkeypatch):
    """Test that the client is configured from environment variables."""
    monkeypatch.setenv("GITHUB_API_URL", "http://localhost:8080")
    monkeypatch.setenv("RELEASES_PER_PAGE", "5")
    
    client = latest_versions.build_client()
    
    assert client._api_url == "http://localhost:8080"
    assert client._per_page == 5


@pytest.mark.asyncio
async def test_latin1_line_does_not_abort_run(tmp_path, capsys, monkeypatch):
    """Test that a line with a non-UTF-8 byte is skipped and others reported."""
    path = tmp_path / "repos.csv"
    path.write_bytes(b"repository,min_version\n# caf\xe9 comment\ngolang/go,1.0.0\n")
    monkeypatch.setattr(latest_versions, "build_client", lambda: FakeClient(["v1.0.1"]))
    
    await main(["latest_versions.py", str(path)])
    
    assert capsys.readouterr().out == "latest versions of golang/go: [1.0.1]\n"


@pytest.mark.parametrize("name, expected", [
    ("DEBUG", logging.DEBUG),
    ("info", logging.INFO),
    (" WARNING ", logging.WARNING),
    ("ERROR", logging.ERROR),
    ("CRITICAL", logging.ERROR),
    ("BASIC_FORMAT", logging.WARNING),
    ("Logger", logging.WARNING),
    ("verbose", logging.WARNING),
    ("", logging.WARNING),
])
def test_resolve_log_level(name, expected):
    """Test that only real level names are honoured and errors stay visible."""
    assert resolve_log_level(name) == expected
