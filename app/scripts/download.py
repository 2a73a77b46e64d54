"""
Download a web page and save it. Run from project root:
  python -m app.scripts.download URL FILE_NAME [--dir DIR]
Example:
  python -m app.scripts.download https://example.com index.html
The body is echoed to stdout and written to DIR/FILE_NAME (DOWNLOAD_DIR by default).
"""
import argparse
import logging
import sys

from app.core.config import get_settings
from app.services.downloader import DownloadError, fetch_page, save_page

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Download a URL and write it to disk.")
    parser.add_argument("url", help="Page URL (http or https)")
    parser.add_argument("file_name", help="Name of the file to write")
    parser.add_argument("--dir", default=settings.DOWNLOAD_DIR, help="Target directory")
    args = parser.parse_args(argv)

    if not args.url.lower().startswith(("http://", "https://")):
        logger.error("URL must use http or https: %s", args.url)
        return 1

    try:
        body = fetch_page(args.url, settings.DOWNLOAD_TIMEOUT_SEC)
    except DownloadError as e:
        logger.error("Download failed: %s", e.message)
        return 1

    print(body)
    try:
        save_page(body, args.dir, args.file_name)
    except (ValueError, OSError) as e:
        logger.error("Could not write file: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )
    sys.exit(main())
