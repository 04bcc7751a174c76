"""Field validation for records entering the catalog."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .movie_info import MovieInfo
from .review import Review

MOVIE_INFO_NAME_REQUIRED = "movieInfo.name must be present"
MOVIE_INFO_YEAR_POSITIVE = "movieInfo.year must be positive"
MOVIE_INFO_CAST_REQUIRED = "movieInfo.cast must be present"
REVIEW_MOVIE_INFO_ID_REQUIRED = "reviewInfo.movieInfoId : must not be null"
REVIEW_RATING_NON_NEGATIVE = "rating.negative : please pass a non-negative value"


@dataclass(frozen=True, slots=True)
class FieldViolation:
    """A single failed constraint on a named field."""

    field: str
    message: str


def validate_movie_info(movie_info: MovieInfo) -> list[FieldViolation]:
    violations: list[FieldViolation] = []
    if not movie_info.name or not movie_info.name.strip():
        violations.append(FieldViolation("name", MOVIE_INFO_NAME_REQUIRED))
    if movie_info.year is None or movie_info.year <= 0:
        violations.append(FieldViolation("year", MOVIE_INFO_YEAR_POSITIVE))
    # one message for the whole list, however many entries are blank
    if not movie_info.cast or any(not member.strip() for member in movie_info.cast):
        violations.append(FieldViolation("cast", MOVIE_INFO_CAST_REQUIRED))
    return violations


def validate_review(review: Review) -> list[FieldViolation]:
    violations: list[FieldViolation] = []
    if review.movie_info_id is None or not str(review.movie_info_id).strip():
        violations.append(FieldViolation("movieInfoId", REVIEW_MOVIE_INFO_ID_REQUIRED))
    if review.rating is not None and review.rating < 0:
        violations.append(FieldViolation("rating", REVIEW_RATING_NON_NEGATIVE))
    return violations


def render_violations(violations: Iterable[FieldViolation]) -> str:
    """Join violation messages in sorted order, comma separated."""

    return ",".join(sorted(violation.message for violation in violations))


__all__ = [
    "FieldViolation",
    "render_violations",
    "validate_movie_info",
    "validate_review",
]
