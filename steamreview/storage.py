"""Writing reviews to text or JSON files, optionally split by language."""

from __future__ import annotations

import json
import sys
from collections.abc import Iterable, Sequence
from datetime import datetime
from typing import Any

from . import messages as msg
from .config import FILE_EXT_JSON, FILE_EXT_TXT
from .i18n import t, tf
from .models import GameDetails, ReviewData

UNKNOWN_LANGUAGE = "unknown"
_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

# Characters the JSON output escapes so that it is safe to embed in HTML.
_JSON_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


class StorageError(Exception):
    """Raised when reviews cannot be written to disk."""


def _log(message: str) -> None:
    stamp = datetime.now().strftime("%Y/%m/%d %H:%M:%S")
    sys.stderr.write(f"{stamp} {message}\n")
    sys.stderr.flush()


def _format_timestamp(timestamp: int) -> str:
    return datetime.fromtimestamp(timestamp).strftime(_TIME_FORMAT)


def _bool_text(value: bool) -> str:
    return "true" if value else "false"


def _details_header(details: GameDetails) -> list[str]:
    lines = [
        t(msg.MSG_FILE_GAME_DETAILS),
        tf(msg.MSG_FILE_GAME_NAME, details.name),
        tf(msg.MSG_FILE_APP_ID, details.app_id),
    ]
    if details.developer:
        lines.append(tf(msg.MSG_FILE_DEVELOPER, ", ".join(details.developer)))
    if details.publisher:
        lines.append(tf(msg.MSG_FILE_PUBLISHER, ", ".join(details.publisher)))
    lines.append(tf(msg.MSG_FILE_RELEASE_DATE, details.release_date))
    lines.append(tf(msg.MSG_FILE_PRICE, details.price))
    if details.genres:
        lines.append(tf(msg.MSG_FILE_GENRES, ", ".join(details.genres)))
    if details.categories:
        lines.append(tf(msg.MSG_FILE_CATEGORIES, ", ".join(details.categories)))
    if details.website:
        lines.append(tf(msg.MSG_FILE_WEBSITE, details.website))
    lines.append(tf(msg.MSG_FILE_AGE_RESTRICTION, details.required_age))
    lines.append(tf(msg.MSG_FILE_FREE, details.is_free))
    lines.append(tf(msg.MSG_FILE_RETRIEVED_AT, details.retrieved_at.strftime(_TIME_FORMAT)))
    lines.extend(["", t(msg.MSG_FILE_REVIEWS_LIST), ""])
    return lines


def _review_block(number: int, review: ReviewData) -> list[str]:
    lines = [
        tf(msg.MSG_FILE_REVIEW_NUMBER, number),
        f"ID: {review.recommendation_id}",
        f"language: {review.language}",
        f"voted_up: {_bool_text(review.voted_up)}",
        f"votes_up: {review.votes_up}",
        f"votes_funny: {review.votes_funny}",
        f"weighted_score: {review.weighted_score:.2f}",
        f"steam_purchase: {_bool_text(review.steam_purchase)}",
        f"playtime: {review.author.playtime_at_review}分",
        f"created_at: {_format_timestamp(review.timestamp_created)}",
    ]
    if review.timestamp_updated > 0:
        lines.append(f"updated_at: {_format_timestamp(review.timestamp_updated)}")
    lines.extend(["review:", review.review])
    if review.developer_response:
        lines.extend(["developer_response:", review.developer_response])
        if review.timestamp_dev_response > 0:
            stamp = _format_timestamp(review.timestamp_dev_response)
            lines.append(f"developer_response_timestamp: {stamp}")
    lines.append("")
    return lines


def _text_document(reviews: Sequence[ReviewData], details: GameDetails | None) -> str:
    lines: list[str] = [] if details is None else _details_header(details)
    for number, review in enumerate(reviews, start=1):
        lines.extend(_review_block(number, review))
    return "".join(line + "\n" for line in lines)


def _integral_floats(value: Any) -> Any:
    """Write whole-number floats without a fractional part, as the file format does."""
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return int(value)
    if isinstance(value, dict):
        return {key: _integral_floats(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_integral_floats(item) for item in value]
    return value


def _json_document(reviews: Sequence[ReviewData], details: GameDetails | None) -> str:
    data: dict[str, Any] = {}
    if details is not None:
        data["game_details"] = details.to_dict()
    data["reviews"] = [review.to_dict() for review in reviews]
    text = json.dumps(_integral_floats(data), ensure_ascii=False, indent=2)
    for char, escape in _JSON_ESCAPES.items():
        text = text.replace(char, escape)
    return text + "\n"


def save_reviews(
    reviews: Iterable[ReviewData],
    filename: str,
    output_json: bool = False,
    game_details: GameDetails | None = None,
) -> str:
    """Write *reviews* to *filename* as text or JSON and return the file name."""
    reviews = list(reviews)
    try:
        handle = open(filename, "w", encoding="utf-8", newline="")
    except OSError as exc:
        raise StorageError(tf(msg.MSG_FILE_CREATION_ERROR, exc)) from exc

    with handle:
        try:
            if output_json:
                handle.write(_json_document(reviews, game_details))
            else:
                handle.write(_text_document(reviews, game_details))
        except (OSError, ValueError, TypeError) as exc:
            key = msg.MSG_FILE_JSON_WRITE_ERROR if output_json else msg.MSG_FILE_CREATION_ERROR
            raise StorageError(tf(key, exc)) from exc
    return filename


def _output_path(output_dir: str, name: str) -> str:
    return f"{output_dir}/{name}" if output_dir else name


def save_reviews_by_language(
    reviews: Iterable[ReviewData],
    base_filename: str,
    output_dir: str,
    verbose: bool = False,
    output_json: bool = False,
    game_details: GameDetails | None = None,
) -> list[str]:
    """Write one file per review language plus an all-languages file.

    Returns the names of the files written. A language file that cannot be
    written is reported and skipped; failing to write the all-languages file
    raises StorageError.
    """
    reviews = list(reviews)
    by_language: dict[str, list[ReviewData]] = {}
    for review in reviews:
        by_language.setdefault(review.language or UNKNOWN_LANGUAGE, []).append(review)

    ext = FILE_EXT_JSON if output_json else FILE_EXT_TXT
    stem = base_filename.removesuffix(FILE_EXT_JSON)
    saved: list[str] = []

    for language, language_reviews in by_language.items():
        filename = _output_path(output_dir, f"{stem}_{language}{ext}")
        try:
            saved.append(save_reviews(language_reviews, filename, output_json, game_details))
        except StorageError as exc:
            _log(tf(msg.MSG_FILE_LANGUAGE_SAVE_ERROR, language, exc))
            continue
        if verbose:
            _log(tf(msg.MSG_FILE_LANGUAGE_SAVED, language, len(language_reviews), filename))

    summary = _output_path(output_dir, f"{stem}_all_languages{ext}")
    try:
        saved.append(save_reviews(reviews, summary, output_json, game_details))
    except StorageError as exc:
        raise StorageError(tf(msg.MSG_FILE_SUMMARY_ERROR, exc)) from exc
    if verbose:
        _log(tf(msg.MSG_FILE_ALL_LANGUAGES_SAVED, summary, len(reviews)))
    return saved