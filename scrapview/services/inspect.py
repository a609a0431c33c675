from typing import Optional, Sequence
from scrapview.core.config import settings
from scrapview.fetch import scrape_client
from scrapview.inspect.classifier import (
    RuleSet,
    classify_all,
    chip_status,
    status_severity,
    preview_image,
)
from scrapview.schemas import Attempt, AttemptReport, InspectResponse
from scrapview.services.session import session, Snapshot

def configured_rules() -> Optional[RuleSet]:
    """Rule set named by CLASSIFIER_RULES, or None if the name is unknown"""
    try:
        return RuleSet(settings.CLASSIFIER_RULES)
    except ValueError:
        return None

def active_rules() -> RuleSet:
    # Unknown names are reported once at startup
    return configured_rules() or RuleSet.FULL

def build_report(generation: int, url: str, attempts: Sequence[Attempt], superseded: bool = False) -> InspectResponse:
    """Classify every attempt of a complete chain and shape the response"""
    rules = active_rules()
    classifications = classify_all(attempts, rules)

    reports = []
    for i, (attempt, result) in enumerate(zip(attempts, classifications)):
        reports.append(AttemptReport(
            index=i,
            url=attempt.url,
            response_status=attempt.response_status,
            h_location=attempt.redirect_location,
            html_length=len(attempt.raw_html),
            og_info=attempt.og_info,
            is_last=i == len(attempts) - 1,
            severity=result.severity,
            hint=result.hint,
            chip=chip_status(result.severity),
            status_severity=status_severity(attempts, i),
        ))

    return InspectResponse(
        generation=generation,
        url=url,
        superseded=superseded,
        preview_image=preview_image(attempts),
        attempts=reports,
    )

def report_snapshot(snapshot: Snapshot) -> InspectResponse:
    return build_report(snapshot.generation, snapshot.url, snapshot.attempts)

async def inspect_url(url: str) -> InspectResponse:
    """
    Main pipeline for one submission.

    1. Take a generation token
    2. Fetch the full attempt chain from the scrape endpoint
    3. Commit it as current unless a newer submission started meanwhile
    4. Classify every attempt and return the report

    A superseded result is still reported to its caller, flagged as such.
    """
    token = session.begin(url)

    print(f"FETCHING chain for {url} from {settings.SCRAPE_ENDPOINT}")
    try:
        attempts = await scrape_client.fetch_attempts(url)
    except scrape_client.ScrapeError as e:
        print(f"ERROR scraping {url}: {str(e)}")
        raise

    print(f"RECEIVED {len(attempts)} attempt(s) for {url}")

    committed = session.commit(token, url, attempts)
    return build_report(token, url, attempts, superseded=not committed)
