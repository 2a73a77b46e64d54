"""Unit tests for app.services.downloader and the download CLI, with httpx mocked."""

import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

import httpx

from app.scripts import download
from app.services.downloader import DownloadError, fetch_page, save_page


def _transport(status_code: int = 200, text: str = "<html>hi</html>") -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, text=text)

    return httpx.MockTransport(handler)


class TestFetchPage(unittest.TestCase):
    def test_returns_body(self) -> None:
        body = fetch_page("https://example.com", 5.0, transport=_transport())
        self.assertEqual(body, "<html>hi</html>")

    def test_non_success_status(self) -> None:
        with self.assertRaises(DownloadError) as ctx:
            fetch_page("https://example.com/missing", 5.0, transport=_transport(404))
        self.assertEqual(ctx.exception.status_code, 404)

    def test_transport_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        with self.assertRaises(DownloadError) as ctx:
            fetch_page("https://example.com", 5.0, transport=httpx.MockTransport(handler))
        self.assertIn("failed", ctx.exception.message)

    def test_timeout(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("slow", request=request)

        with self.assertRaises(DownloadError) as ctx:
            fetch_page("https://example.com", 5.0, transport=httpx.MockTransport(handler))
        self.assertIn("timed out", ctx.exception.message)


class TestSavePage(unittest.TestCase):
    def test_creates_directory_and_writes(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = save_page("hello", Path(tmp) / "webs", "index.html")
            self.assertEqual(target.read_text(encoding="utf-8"), "hello")

    def test_rejects_path_in_file_name(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            for bad in ("../escape.html", "sub/page.html", "", ".."):
                with self.assertRaises(ValueError):
                    save_page("x", tmp, bad)


class TestDownloadCli(unittest.TestCase):
    def test_success(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with patch.object(download, "fetch_page", return_value="page") as mock_fetch:
                code = download.main(["https://example.com", "index.html", "--dir", tmp])
            self.assertEqual(code, 0)
            mock_fetch.assert_called_once()
            self.assertEqual((Path(tmp) / "index.html").read_text(encoding="utf-8"), "page")

    def test_fetch_failure_exit_code(self) -> None:
        with patch.object(download, "fetch_page", side_effect=DownloadError("boom")):
            self.assertEqual(download.main(["https://example.com", "index.html"]), 1)

    def test_rejects_non_http_url(self) -> None:
        with patch.object(download, "fetch_page") as mock_fetch:
            self.assertEqual(download.main(["ftp://example.com", "index.html"]), 1)
        mock_fetch.assert_not_called()


if __name__ == "__main__":
    unittest.main()
