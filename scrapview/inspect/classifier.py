"""
Attempt classification for scrape chains.

Every attempt in a chain gets a severity and a hint explaining why the
backend kept following the chain, stopped, or failed. The result depends
only on the sequence and the attempt's position in it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence
from scrapview.schemas import Attempt, Severity

# Backend gives up after 4 attempts (0-indexed)
CUTOFF_INDEX = 3

HINT_CUTOFF = "maximum attempt count reached"
HINT_DUPLICATE_GUARD = "stopped: duplicate-chain guard triggered"
HINT_REDIRECTED = "redirected"
HINT_OG_RETRY = "retrying via og:url: og:image and og:url domains differ"
HINT_COMPLETE = "complete"
HINT_FAILED = "failed"

CHIP_STATUS = {
    Severity.SUCCESS: "ok",
    Severity.WARNING: "attention",
    Severity.ERROR: "failed",
}

class RuleSet(str, Enum):
    FULL = "full"
    # Degraded mode: no error-status override
    LEGACY = "legacy"

@dataclass(frozen=True)
class Classification:
    severity: Severity
    hint: str

@dataclass(frozen=True)
class AttemptFacts:
    is_last: bool
    has_redirect: bool
    has_error: bool
    has_mismatch: bool

    @property
    def needs_retry(self) -> bool:
        return self.has_redirect or self.has_mismatch

def attempt_facts(attempts: Sequence[Attempt], index: int) -> AttemptFacts:
    """Derive the predicates the rules are evaluated against."""
    if not 0 <= index < len(attempts):
        raise IndexError(f"attempt index {index} out of range for {len(attempts)} attempts")

    attempt = attempts[index]
    status = attempt.response_status
    og = attempt.og_info
    return AttemptFacts(
        is_last=index == len(attempts) - 1,
        has_redirect=300 <= status < 400,
        has_error=status < 200 or status >= 400,
        has_mismatch=og is not None and og.url_match is False,
    )

def classify(attempts: Sequence[Attempt], index: int, rules: RuleSet = RuleSet.FULL) -> Classification:
    """
    Classify the attempt at ``index`` within ``attempts``.

    Rules are checked in order and the first match wins:
    1. the cutoff attempt still needing a retry -> maximum attempt count reached
    2. last attempt with an og:url mismatch -> duplicate-chain guard
    3. intermediate redirect -> redirected
    4. intermediate og:url mismatch -> retrying via og:url
    5. anything else -> complete

    With the full rule set an error status then overrides whatever
    rules 1-5 produced. Raises IndexError for an index outside the sequence.
    """
    facts = attempt_facts(attempts, index)

    if index == CUTOFF_INDEX and facts.needs_retry and not facts.is_last:
        result = Classification(Severity.WARNING, HINT_CUTOFF)
    elif facts.is_last and facts.has_mismatch:
        result = Classification(Severity.WARNING, HINT_DUPLICATE_GUARD)
    elif not facts.is_last and facts.has_redirect:
        result = Classification(Severity.WARNING, HINT_REDIRECTED)
    elif not facts.is_last and facts.has_mismatch:
        result = Classification(Severity.WARNING, HINT_OG_RETRY)
    else:
        result = Classification(Severity.SUCCESS, HINT_COMPLETE)

    if rules == RuleSet.FULL and facts.has_error:
        result = Classification(Severity.ERROR, HINT_FAILED)

    return result

def classify_all(attempts: Sequence[Attempt], rules: RuleSet = RuleSet.FULL) -> List[Classification]:
    """Classify every attempt in order"""
    return [classify(attempts, i, rules) for i in range(len(attempts))]

def chip_status(severity: Severity) -> str:
    return CHIP_STATUS[severity]

def status_severity(attempts: Sequence[Attempt], index: int) -> Severity:
    """
    Colour of the HTTP status chip for an attempt.
    Unlike the hint, this ignores the cutoff: any attempt the chain
    continued past because of a redirect or mismatch is a warning.
    """
    facts = attempt_facts(attempts, index)
    if facts.has_error:
        return Severity.ERROR
    if facts.needs_retry and not facts.is_last:
        return Severity.WARNING
    return Severity.SUCCESS

def preview_image(attempts: Sequence[Attempt]) -> Optional[str]:
    """og:image of the last attempt, or None if there is nothing to preview"""
    if not attempts:
        return None
    og = attempts[-1].og_info
    if og is None or not og.og_image:
        return None
    return og.og_image
