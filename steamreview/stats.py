"""Summary statistics over a set of reviews."""

from __future__ import annotations

import sys
from collections import Counter
from collections.abc import Iterable
from typing import TextIO

from . import messages as msg
from .i18n import t, tf
from .models import ReviewData

UNKNOWN_LANGUAGE = "unknown"


def format_review_stats(reviews: Iterable[ReviewData], game_name: str) -> str:
    """Return the statistics report for *reviews* as text ending in a newline."""
    reviews = list(reviews)
    if not reviews:
        return t(msg.MSG_STATS_NO_REVIEWS) + "\n"

    total = len(reviews)
    counts: Counter[str] = Counter()
    positives: Counter[str] = Counter()
    for review in reviews:
        language = review.language or UNKNOWN_LANGUAGE
        counts[language] += 1
        if review.voted_up:
            positives[language] += 1

    positive = sum(positives.values())
    negative = total - positive
    lines = [
        "",
        t(msg.MSG_STATS_TITLE),
        tf(msg.MSG_STATS_GAME, game_name),
        tf(msg.MSG_STATS_TOTAL_REVIEWS, total),
        tf(msg.MSG_STATS_POSITIVE, positive, positive / total * 100),
        tf(msg.MSG_STATS_NEGATIVE, negative, negative / total * 100),
        "",
        t(msg.MSG_STATS_LANGUAGE_BREAKDOWN),
    ]
    for language, count in counts.items():
        language_positive = positives[language]
        lines.append(
            tf(
                msg.MSG_FILE_LANGUAGE_STATS,
                language,
                count,
                count / total * 100,
                language_positive,
                language_positive / count * 100,
                count - language_positive,
            )
        )
    return "\n".join(lines) + "\n"


def print_review_stats(
    reviews: Iterable[ReviewData], game_name: str, out: TextIO | None = None
) -> None:
    """Write the statistics report to *out*, standard output by default."""
    stream = sys.stdout if out is None else out
    stream.write(format_review_stats(reviews, game_name))
    stream.flush()