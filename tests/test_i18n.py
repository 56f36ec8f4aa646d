import pytest

from steamreview import i18n
from steamreview.messages import messages_for

_LANG_VARS = ("STEAM_REVIEW_LANG", "LANG", "LC_ALL", "LC_MESSAGES", "LANGUAGE")


@pytest.fixture(autouse=True)
def _clean_state():
    i18n.reset()
    yield
    i18n.reset()


@pytest.mark.parametrize(
    "environ, expected",
    [
        ({"STEAM_REVIEW_LANG": "ja", "LANG": "en"}, "ja"),
        ({"LANG": "ja_JP.UTF-8"}, "ja"),
        ({"LC_ALL": "en_US.UTF-8"}, "en"),
        ({}, "en"),
        ({"STEAM_REVIEW_LANG": "fr"}, "en"),
    ],
)
def test_detect_language(environ, expected):
    assert i18n.detect_language(environ) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("ja", "ja"),
        ("ja_JP", "ja"),
        ("ja_JP.UTF-8", "ja"),
        ("en-US", "en"),
        ("EN_US", "en"),
        ("C", "c"),
        ("", ""),
    ],
)
def test_normalize_language(value, expected):
    assert i18n.normalize_language(value) == expected


@pytest.mark.parametrize(
    "language, expected",
    [("en", True), ("ja", True), ("fr", False), ("", False), ("zh", False)],
)
def test_is_supported_language(language, expected):
    assert i18n.is_supported_language(language) is expected


@pytest.mark.parametrize(
    "language, key, expected",
    [
        ("en", "error.no_input", "Error: Please specify either App ID or game name"),
        ("ja", "error.no_input", "エラー: App ID またはゲーム名を指定してください"),
        ("en", "stats.title", "=== Review Statistics ==="),
        ("ja", "stats.title", "=== レビュー統計 ==="),
        ("en", "nonexistent.key", "nonexistent.key"),
    ],
)
def test_localizer_t(language, key, expected):
    localizer = i18n.Localizer(language, messages_for(language))
    assert localizer.t(key) == expected


@pytest.mark.parametrize(
    "language, key, args, expected",
    [
        ("en", "stats.total_reviews", (100,), "Total reviews: 100"),
        ("ja", "stats.total_reviews", (100,), "総レビュー数: 100"),
        ("en", "stats.positive", (80, 80.0), "Positive: 80 (80.0%)"),
        ("ja", "stats.positive", (80, 80.0), "肯定的: 80 (80.0%)"),
    ],
)
def test_localizer_tf(language, key, args, expected):
    localizer = i18n.Localizer(language, messages_for(language))
    assert localizer.tf(key, *args) == expected


def test_japanese_localizer_falls_back_to_english():
    localizer = i18n.Localizer("ja", {})
    assert localizer.t("error.no_input") == "Error: Please specify either App ID or game name"


def test_global_functions_english_then_japanese():
    i18n.init({"STEAM_REVIEW_LANG": "en"})
    assert i18n.get_current_language() == "en"
    assert i18n.t("error.no_input") == "Error: Please specify either App ID or game name"
    assert i18n.tf("stats.total_reviews", 50) == "Total reviews: 50"

    i18n.reset()
    i18n.init({"STEAM_REVIEW_LANG": "ja"})
    assert i18n.get_current_language() == "ja"
    assert i18n.t("error.no_input") == "エラー: App ID またはゲーム名を指定してください"


def test_fallback_behavior_returns_key():
    i18n.init({"STEAM_REVIEW_LANG": "ja"})
    assert i18n.t("nonexistent.key") == "nonexistent.key"


def test_current_language_defaults_to_english_before_init():
    assert i18n.get_current_language() == "en"


def test_t_initialises_from_process_environment(monkeypatch):
    for name in _LANG_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("STEAM_REVIEW_LANG", "ja")
    assert i18n.t("stats.title") == "=== レビュー統計 ==="
    assert i18n.get_current_language() == "ja"


@pytest.mark.parametrize(
    "template, args, expected",
    [
        ("Free: %t", (True,), "Free: true"),
        ("Free: %t", (False,), "Free: false"),
        ("%d%%", (5,), "5%"),
        ("%s", (), "%!s(MISSING)"),
        ("%v", (1000000.0,), "1e+06"),
        ("%v", (3.5,), "3.5"),
        ("%v", (80.0,), "80"),
        ("error: %v", (ValueError("boom"),), "error: boom"),
        ("%q", ("x",), '"x"'),
    ],
)
def test_go_format(template, args, expected):
    assert i18n.go_format(template, *args) == expected


def test_go_format_leaves_plain_text_untouched():
    text = "no verbs here"
    assert i18n.go_format(text) == text