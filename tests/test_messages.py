import re

import pytest

from steamreview import messages
from steamreview.messages import messages_for

_VERB = re.compile(r"%(?:%|[-+# 0]*\d*(?:\.\d+)?[a-zA-Z])")

_DECLARED_KEYS = {
    "app.name",
    "app.version",
    "app.started",
    "usage.title",
    "usage.options",
    "usage.examples",
    "usage.help_text",
    "usage.full_text",
    "error.no_input",
    "error.both_inputs",
    "error.dir_creation",
    "error.review_fetch",
    "error.file_save",
    "error.logger_init",
    "error.game_details_fetch",
    "success.completed",
    "success.file_saved",
    "stats.title",
    "stats.game",
    "stats.total_reviews",
    "stats.positive",
    "stats.negative",
    "stats.language_breakdown",
    "stats.no_reviews",
    "file.saved_files",
    "file.language_stats",
    "file.creation_error",
    "file.game_details",
    "file.game_name",
    "file.app_id",
    "file.developer",
    "file.publisher",
    "file.release_date",
    "file.price",
    "file.genres",
    "file.categories",
    "file.website",
    "file.age_restriction",
    "file.free",
    "file.retrieved_at",
    "file.reviews_list",
    "file.review_number",
    "file.json_write_error",
    "file.language_save_error",
    "file.language_saved",
    "file.all_languages_saved",
    "file.summary_error",
    "verbose.review_saved",
    "verbose.language_saved",
    "error.steam_api_fetch",
    "error.json_decode",
    "error.game_not_found",
    "error.http_request",
    "error.http_status",
    "error.steam_api_response",
    "error.app_id_fetch",
    "error.steam_store_fetch",
    "error.app_data_not_found",
    "error.game_details_fail",
    "verbose.review_fetch_start",
    "verbose.review_progress",
    "verbose.no_more_reviews",
    "verbose.max_reviews_reached",
    "verbose.cursor_not_changed",
    "verbose.total_reviews_fetched",
    "verbose.game_review_fetch",
    "verbose.game_details_fetch",
    "verbose.game_details_obtained",
    "field.developer",
    "field.publisher",
    "field.release_date",
    "field.price",
    "field.genre",
    "field.category",
    "field.playtime",
    "field.review",
}


def test_english_pinned_values():
    catalogue = messages_for("en")
    assert catalogue["error.no_input"] == "Error: Please specify either App ID or game name"
    assert catalogue["stats.title"] == "=== Review Statistics ==="
    assert catalogue["stats.total_reviews"] == "Total reviews: %d"


def test_japanese_pinned_values():
    catalogue = messages_for("ja")
    assert catalogue["error.no_input"] == "エラー: App ID またはゲーム名を指定してください"
    assert catalogue["stats.title"] == "=== レビュー統計 ==="
    assert catalogue["stats.positive"] == "肯定的: %d (%.1f%%)"


@pytest.mark.parametrize("language", ["fr", "", "zh", "EN"])
def test_unknown_language_falls_back_to_english(language):
    assert messages_for(language) == messages_for("en")


def test_catalogues_share_the_same_keys():
    assert set(messages_for("en")) == set(messages_for("ja"))


def test_every_declared_key_but_help_text_has_a_message():
    assert messages.MSG_USAGE_HELP == "usage.help_text"
    assert _DECLARED_KEYS - set(messages_for("en")) == {messages.MSG_USAGE_HELP}
    assert set(messages_for("en")) <= _DECLARED_KEYS


def test_format_verbs_agree_between_languages():
    english = messages_for("en")
    japanese = messages_for("ja")
    for key, template in english.items():
        assert _VERB.findall(template) == _VERB.findall(japanese[key]), key


def test_returned_catalogue_is_a_copy():
    first = messages_for("en")
    first["stats.title"] = "changed"
    del first["error.no_input"]
    second = messages_for("en")
    assert second["stats.title"] == "=== Review Statistics ==="
    assert "error.no_input" in second


def test_usage_text_takes_name_and_version_first():
    for language in ("en", "ja"):
        usage = messages_for(language)[messages.MSG_USAGE_FULL]
        assert usage.startswith("%s version %s\n")
        assert "steam-review -appid 440 -max 500 -verbose" in usage
        assert _VERB.findall(usage) == ["%s", "%s"]