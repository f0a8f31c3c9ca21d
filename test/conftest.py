from __future__ import annotations

import os
from pathlib import Path

# Settings are read once at import time, so the test environment must be in
# place before anything under ``skillbridge`` is imported.
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ.setdefault("JWT_SECRET", "test-secret-key-with-at-least-32-bytes!")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("LOGFIRE_ENABLED", "false")
os.environ.setdefault("ENABLE_FILE_LOGGING", "false")

import httpx
import pytest

# Load dotenv files so local overrides apply to fixtures reading os.getenv
from dotenv import load_dotenv

TEST_ROOT = Path(__file__).resolve().parent
load_dotenv(TEST_ROOT / ".env", override=False)


@pytest.fixture(autouse=True)
def _global_offline_http_guard(monkeypatch: pytest.MonkeyPatch):
    """Fail any HTTP call that is not aimed at the in-process test app."""
    allowed_prefixes = (
        "http://test",
        "http://localhost",
        "http://127.0.0.1",
        "/",
    )

    orig_async = httpx._client.AsyncClient.request

    async def offline_async(self, method, url, *args, **kwargs):
        url_str = str(url)
        if url_str.startswith("/") or any(str(self.base_url.join(url_str)).startswith(p) for p in allowed_prefixes):
            return await orig_async(self, method, url, *args, **kwargs)
        raise RuntimeError(f"External HTTP blocked by global offline guard (async): {url_str}")

    monkeypatch.setattr(httpx._client.AsyncClient, "request", offline_async, raising=True)
