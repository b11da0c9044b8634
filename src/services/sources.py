import asyncio
import csv
import io
import logging
import re
from dataclasses import dataclass
from typing import Dict, List, Optional

import httpx

from config import DEFAULT_FETCH_TIMEOUT

logger = logging.getLogger(__name__)


class SourceFetchError(RuntimeError):
    def __init__(self, failed: List[str], detail: str = ""):
        self.failed = failed
        message = f"Failed to fetch CSV sources: {', '.join(failed)}"
        super().__init__(f"{message} ({detail})" if detail else message)


@dataclass(frozen=True)
class SourceTexts:
    brands: str
    master: str


def _clean_header(header: Optional[str]) -> str:
    return re.sub(r"\s+", " ", header or "").strip()


def parse_csv_rows(text: str) -> List[Dict[str, str]]:
    """Parse CSV text into one dict per non-blank line, keyed by header."""
    body = text.lstrip("\ufeff").strip()
    if not body:
        return []

    reader = csv.reader(io.StringIO(body))
    headers = [_clean_header(h) for h in next(reader, [])]
    rows: List[Dict[str, str]] = []
    for cells in reader:
        if not any(c.strip() for c in cells):
            continue
        padded = cells + [""] * (len(headers) - len(cells))
        rows.append({h: padded[i].strip() for i, h in enumerate(headers)})
    return rows


async def _fetch_text(client: httpx.AsyncClient, label: str, url: str) -> str:
    try:
        response = await client.get(url)
    except httpx.HTTPError as e:
        logger.error(f"Fetching {label} CSV failed: {e}")
        raise SourceFetchError([label], str(e)) from e

    if not response.is_success:
        logger.error(f"Fetching {label} CSV returned HTTP {response.status_code}")
        raise SourceFetchError([label], f"HTTP {response.status_code}")
    return response.text


async def _fetch_both(client: httpx.AsyncClient, brands_url: str, master_url: str) -> SourceTexts:
    results = await asyncio.gather(
        _fetch_text(client, "brands", brands_url),
        _fetch_text(client, "master", master_url),
        return_exceptions=True,
    )
    failed = [e for e in results if isinstance(e, BaseException)]
    if failed:
        labels = [label for e in failed if isinstance(e, SourceFetchError) for label in e.failed]
        if len(labels) != len(failed):
            raise failed[0]
        raise SourceFetchError(labels)
    return SourceTexts(brands=results[0], master=results[1])


async def fetch_sources(
    brands_url: str,
    master_url: str,
    timeout: float = DEFAULT_FETCH_TIMEOUT,
    client: Optional[httpx.AsyncClient] = None,
) -> SourceTexts:
    """Fetch both CSV sources concurrently; either failure is fatal."""
    if client is not None:
        return await _fetch_both(client, brands_url, master_url)

    async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as owned:
        return await _fetch_both(owned, brands_url, master_url)
