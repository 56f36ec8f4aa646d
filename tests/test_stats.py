import io
import re

import pytest

from steamreview import i18n
from steamreview import messages as msg
from steamreview.models import ReviewData
from steamreview.stats import format_review_stats, print_review_stats

LANGUAGE_LINE = re.compile(
    r"^  (\S+): (\d+) reviews \(([\d.]+)%\) - Positive: (\d+) \(([\d.]+)%\), Negative: (\d+)$"
)


@pytest.fixture(autouse=True)
def english():
    i18n.init({"STEAM_REVIEW_LANG": "en"})
    yield
    i18n.reset()


def _sample():
    return [
        ReviewData(language="english", voted_up=True),
        ReviewData(language="english", voted_up=False),
        ReviewData(language="", voted_up=True),
    ]


def test_no_reviews():
    assert format_review_stats([], "Portal") == "No reviews found\n"


def test_summary_lines():
    lines = format_review_stats(_sample(), "Portal").splitlines()
    assert lines[0] == ""
    assert lines[1] == "=== Review Statistics ==="
    assert lines[2] == "Game: Portal"
    assert lines[3] == "Total reviews: 3"
    assert lines[4] == "Positive: 2 (66.7%)"
    assert lines[5] == "Negative: 1 (33.3%)"
    assert lines[7] == i18n.t(msg.MSG_STATS_LANGUAGE_BREAKDOWN)


def test_language_breakdown_is_consistent():
    reviews = _sample()
    lines = format_review_stats(reviews, "Portal").splitlines()
    parsed = [LANGUAGE_LINE.match(line) for line in lines[8:]]
    assert all(parsed)
    languages = [m.group(1) for m in parsed]
    assert languages == ["english", "unknown"]
    counts = [int(m.group(2)) for m in parsed]
    assert sum(counts) == len(reviews)
    for m in parsed:
        assert int(m.group(4)) + int(m.group(6)) == int(m.group(2))
    assert sum(int(m.group(4)) for m in parsed) == sum(r.voted_up for r in reviews)


def test_japanese_report():
    i18n.init({"STEAM_REVIEW_LANG": "ja"})
    text = format_review_stats(_sample(), "Portal")
    assert "=== レビュー統計 ===" in text
    assert "ゲーム: Portal" in text


def test_print_writes_report():
    out = io.StringIO()
    print_review_stats(_sample(), "Portal", out)
    assert out.getvalue() == format_review_stats(_sample(), "Portal")


def test_print_defaults_to_stdout(capsys):
    print_review_stats([], "Portal")
    assert capsys.readouterr().out == i18n.t(msg.MSG_STATS_NO_REVIEWS) + "\n"