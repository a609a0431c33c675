import httpx
from typing import Any, List, Optional
from pydantic import TypeAdapter, ValidationError
from scrapview.core.config import settings
from scrapview.schemas import Attempt

_ATTEMPTS = TypeAdapter(List[Attempt])

class ScrapeError(Exception):
    """Upstream scrape call failed or returned something that is not an attempt chain"""

def parse_attempts(data: Any) -> List[Attempt]:
    """
    Deserialize the upstream JSON array into attempts.
    Records missing url or response_status are rejected here so the
    classifier only ever sees well-formed attempts.
    """
    if not isinstance(data, list):
        raise ScrapeError(f"Expected a JSON array of attempts, got {type(data).__name__}")
    try:
        return _ATTEMPTS.validate_python(data)
    except ValidationError as e:
        raise ScrapeError(f"Malformed attempt record: {e.error_count()} validation error(s)") from e

async def fetch_attempts(url: str, transport: Optional[httpx.AsyncBaseTransport] = None) -> List[Attempt]:
    """Ask the scrape endpoint to follow the chain for ``url``."""
    if settings.USE_MOCK:
        return parse_attempts(_mock_chain(url))

    headers = {
        "User-Agent": settings.USER_AGENT,
        "Accept": "application/json",
    }
    try:
        async with httpx.AsyncClient(
            timeout=settings.REQUEST_TIMEOUT,
            headers=headers,
            transport=transport,
        ) as client:
            # httpx percent-encodes the query value
            response = await client.get(settings.SCRAPE_ENDPOINT, params={"url": url})
            response.raise_for_status()
            data = response.json()
    except httpx.TimeoutException as e:
        raise ScrapeError(f"Timeout while scraping {url}") from e
    except httpx.HTTPStatusError as e:
        raise ScrapeError(f"Scrape endpoint returned HTTP {e.response.status_code} for {url}") from e
    except httpx.HTTPError as e:
        raise ScrapeError(f"Failed to reach scrape endpoint for {url}: {str(e)}") from e
    except ValueError as e:
        raise ScrapeError(f"Scrape endpoint returned a non-JSON body for {url}") from e

    return parse_attempts(data)

def _mock_chain(url: str) -> list:
    """Canned redirect chain for local development"""
    final_url = url.rstrip("/") + "/"
    return [
        {
            "url": url,
            "response_status": 301,
            "h_location": final_url,
            "html": "",
        },
        {
            "url": final_url,
            "response_status": 200,
            "h_location": "",
            "html": f'<html><head><meta property="og:url" content="{final_url}"></head><body>Mock page</body></html>',
            "og_info": {
                "og_image": final_url + "og.png",
                "og_url": final_url,
                "url_match": True,
            },
        },
    ]
