# Standard library imports
from collections.abc import Iterable
from typing import Protocol, TypeVar

# Local application imports
from app.core.monitoring.logging import get_logger
from app.models.issues.issue import TERMINAL_STATUSES, IssueCategory, IssueStatus
from app.services.verification.geo import distance
from app.services.verification.similarity import similarity
from app.services.verification.types import GeoPoint

logger = get_logger(__name__)

DEFAULT_RADIUS_METERS = 100
TITLE_SIMILARITY_THRESHOLD = 0.6


class DuplicateCandidate(Protocol):
    title: str
    category: IssueCategory
    status: IssueStatus
    latitude: float
    longitude: float


CandidateT = TypeVar("CandidateT", bound=DuplicateCandidate)


def is_duplicate_of(
    candidate: DuplicateCandidate,
    location: GeoPoint,
    category: IssueCategory,
    title: str,
    radius_meters: float = DEFAULT_RADIUS_METERS,
) -> bool:
    if IssueCategory(candidate.category) != category or IssueStatus(candidate.status) in TERMINAL_STATUSES:
        return False

    candidate_location = GeoPoint(float(candidate.latitude), float(candidate.longitude))
    if distance(location, candidate_location) > radius_meters:
        return False

    return similarity(title.lower(), candidate.title.lower()) > TITLE_SIMILARITY_THRESHOLD


def find_duplicates(
    location: GeoPoint,
    category: IssueCategory,
    title: str,
    candidates: Iterable[CandidateT],
    radius_meters: float = DEFAULT_RADIUS_METERS,
) -> list[CandidateT]:
    """
    Return the candidates that look like the same problem as a new report.

    A candidate matches when it has the same category, is still open, lies
    within ``radius_meters`` of ``location`` and its title is more than 60%
    similar to ``title``. Matches keep their input order. A candidate that
    cannot be evaluated (missing title, bad coordinates, ...) is logged and
    skipped so one bad row never blocks a submission.
    """
    category = IssueCategory(category)
    duplicates: list[CandidateT] = []
    for candidate in candidates:
        try:
            matched = is_duplicate_of(candidate, location, category, title, radius_meters)
        except (AttributeError, TypeError, ValueError) as e:
            logger.warning(f"Skipping malformed duplicate candidate {getattr(candidate, 'id', None)}: {e}")
            continue
        if matched:
            duplicates.append(candidate)
    return duplicates
