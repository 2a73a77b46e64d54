"""Fetch a web page and save its body to disk."""

import logging
from pathlib import Path

import httpx

logger = logging.getLogger(__name__)


class DownloadError(Exception):
    """Raised when the page cannot be fetched or the server answers non-2xx."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


def fetch_page(
    url: str,
    timeout_sec: float,
    transport: httpx.BaseTransport | None = None,
) -> str:
    """GET url (following redirects) and return the decoded body."""
    try:
        with httpx.Client(
            timeout=httpx.Timeout(timeout_sec),
            follow_redirects=True,
            transport=transport,
        ) as client:
            response = client.get(url)
    except httpx.TimeoutException as e:
        raise DownloadError(f"Request to {url} timed out after {timeout_sec}s") from e
    except httpx.HTTPError as e:
        raise DownloadError(f"Request to {url} failed: {e!s}") from e

    if not response.is_success:
        raise DownloadError(
            f"{url} returned status {response.status_code}",
            status_code=response.status_code,
        )
    return response.text


def save_page(body: str, directory: str | Path, file_name: str) -> Path:
    """
    Write body to directory/file_name, creating the directory if needed.

    file_name must be a bare name; path separators are rejected so the
    write cannot escape the target directory.
    """
    if not file_name or Path(file_name).name != file_name or file_name in (".", ".."):
        raise ValueError(f"Invalid file name: {file_name!r}")
    target_dir = Path(directory)
    target_dir.mkdir(parents=True, exist_ok=True)
    target = target_dir / file_name
    target.write_text(body, encoding="utf-8")
    logger.info("Page saved", extra={"path": str(target), "chars": len(body)})
    return target
