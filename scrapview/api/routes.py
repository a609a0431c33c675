from urllib.parse import urlparse
from fastapi import APIRouter, HTTPException, Response, status
from scrapview.schemas import InspectRequest, InspectResponse
from scrapview.services.inspect import inspect_url, report_snapshot
from scrapview.services.session import session
from scrapview.fetch.scrape_client import ScrapeError

router = APIRouter()

@router.post("/inspect", response_model=InspectResponse)
async def inspect(request: InspectRequest):
    """
    Scrape a URL and classify every attempt of the resulting chain.

    The new chain replaces the current one unless a newer submission
    started while it was being fetched.
    """
    if not request.url:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="URL is required"
        )

    if not request.url.startswith(("http://", "https://")):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="URL must start with http:// or https://"
        )

    if not urlparse(request.url).hostname:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="URL must include a host"
        )

    try:
        return await inspect_url(request.url)
    except ScrapeError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(e)
        )

@router.get("/inspect/current", response_model=InspectResponse)
async def current_inspection():
    """Report for the current attempt chain"""
    snapshot = session.current
    if snapshot is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No URL has been inspected yet"
        )
    return report_snapshot(snapshot)

@router.get("/inspect/current/attempts/{index}/html")
async def attempt_html(index: int):
    """Raw HTML body of one attempt, verbatim"""
    snapshot = session.current
    if snapshot is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No URL has been inspected yet"
        )
    if not 0 <= index < len(snapshot.attempts):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Attempt {index} does not exist (chain has {len(snapshot.attempts)})"
        )
    # Served as source text; scraped pages must never render on this origin
    return Response(
        content=snapshot.attempts[index].raw_html,
        media_type="text/plain",
        headers={"X-Content-Type-Options": "nosniff"}
    )

@router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "Scrape Chain Inspector"}
