"""Message keys and the English and Japanese message catalogues.

Templates use printf-style verbs (%s, %d, %v, %w, %t, %.1f, %%).
"""

from __future__ import annotations

# Application info
MSG_APP_NAME = "app.name"
MSG_APP_VERSION = "app.version"
MSG_APP_STARTED = "app.started"

# Usage and help
MSG_USAGE_TITLE = "usage.title"
MSG_USAGE_OPTIONS = "usage.options"
MSG_USAGE_EXAMPLES = "usage.examples"
MSG_USAGE_HELP = "usage.help_text"
MSG_USAGE_FULL = "usage.full_text"

# Errors
MSG_ERROR_NO_INPUT = "error.no_input"
MSG_ERROR_BOTH_INPUTS = "error.both_inputs"
MSG_ERROR_DIR_CREATION = "error.dir_creation"
MSG_ERROR_REVIEW_FETCH = "error.review_fetch"
MSG_ERROR_FILE_SAVE = "error.file_save"
MSG_ERROR_LOGGER_INIT = "error.logger_init"
MSG_ERROR_GAME_DETAILS_INIT = "error.game_details_fetch"

# Success
MSG_SUCCESS_COMPLETED = "success.completed"
MSG_SUCCESS_FILE_SAVED = "success.file_saved"

# Statistics
MSG_STATS_TITLE = "stats.title"
MSG_STATS_GAME = "stats.game"
MSG_STATS_TOTAL_REVIEWS = "stats.total_reviews"
MSG_STATS_POSITIVE = "stats.positive"
MSG_STATS_NEGATIVE = "stats.negative"
MSG_STATS_LANGUAGE_BREAKDOWN = "stats.language_breakdown"
MSG_STATS_NO_REVIEWS = "stats.no_reviews"

# File output
MSG_FILE_SAVED_FILES = "file.saved_files"
MSG_FILE_LANGUAGE_STATS = "file.language_stats"
MSG_FILE_CREATION_ERROR = "file.creation_error"
MSG_FILE_GAME_DETAILS = "file.game_details"
MSG_FILE_GAME_NAME = "file.game_name"
MSG_FILE_APP_ID = "file.app_id"
MSG_FILE_DEVELOPER = "file.developer"
MSG_FILE_PUBLISHER = "file.publisher"
MSG_FILE_RELEASE_DATE = "file.release_date"
MSG_FILE_PRICE = "file.price"
MSG_FILE_GENRES = "file.genres"
MSG_FILE_CATEGORIES = "file.categories"
MSG_FILE_WEBSITE = "file.website"
MSG_FILE_AGE_RESTRICTION = "file.age_restriction"
MSG_FILE_FREE = "file.free"
MSG_FILE_RETRIEVED_AT = "file.retrieved_at"
MSG_FILE_REVIEWS_LIST = "file.reviews_list"
MSG_FILE_REVIEW_NUMBER = "file.review_number"
MSG_FILE_JSON_WRITE_ERROR = "file.json_write_error"
MSG_FILE_LANGUAGE_SAVE_ERROR = "file.language_save_error"
MSG_FILE_LANGUAGE_SAVED = "file.language_saved"
MSG_FILE_ALL_LANGUAGES_SAVED = "file.all_languages_saved"
MSG_FILE_SUMMARY_ERROR = "file.summary_error"

# Verbose logging
MSG_VERBOSE_REVIEW_SAVED = "verbose.review_saved"
MSG_VERBOSE_LANGUAGE_SAVED = "verbose.language_saved"

# API errors
MSG_ERROR_STEAM_API_FETCH = "error.steam_api_fetch"
MSG_ERROR_JSON_DECODE = "error.json_decode"
MSG_ERROR_GAME_NOT_FOUND = "error.game_not_found"
MSG_ERROR_HTTP_REQUEST = "error.http_request"
MSG_ERROR_HTTP_STATUS = "error.http_status"
MSG_ERROR_STEAM_API_RESPONSE = "error.steam_api_response"
MSG_ERROR_APP_ID_FETCH = "error.app_id_fetch"
MSG_ERROR_STEAM_STORE_FETCH = "error.steam_store_fetch"
MSG_ERROR_APP_DATA_NOT_FOUND = "error.app_data_not_found"
MSG_ERROR_GAME_DETAILS_FAIL = "error.game_details_fail"

# Progress messages
MSG_VERBOSE_REVIEW_FETCH_START = "verbose.review_fetch_start"
MSG_VERBOSE_REVIEW_PROGRESS = "verbose.review_progress"
MSG_VERBOSE_NO_MORE_REVIEWS = "verbose.no_more_reviews"
MSG_VERBOSE_MAX_REVIEWS_REACHED = "verbose.max_reviews_reached"
MSG_VERBOSE_CURSOR_NOT_CHANGED = "verbose.cursor_not_changed"
MSG_VERBOSE_TOTAL_REVIEWS_FETCHED = "verbose.total_reviews_fetched"
MSG_VERBOSE_GAME_REVIEW_FETCH = "verbose.game_review_fetch"
MSG_VERBOSE_GAME_DETAILS_FETCH = "verbose.game_details_fetch"
MSG_VERBOSE_GAME_DETAILS_OBTAINED = "verbose.game_details_obtained"

# Data fields
MSG_FIELD_DEVELOPER = "field.developer"
MSG_FIELD_PUBLISHER = "field.publisher"
MSG_FIELD_RELEASE_DATE = "field.release_date"
MSG_FIELD_PRICE = "field.price"
MSG_FIELD_GENRE = "field.genre"
MSG_FIELD_CATEGORY = "field.category"
MSG_FIELD_PLAYTIME = "field.playtime"
MSG_FIELD_REVIEW = "field.review"


_ENGLISH_USAGE = """%s version %s

Usage:
  steam-review [options]

Options:
  -appid string         Steam App ID (e.g., 440)
  -game string          Game name (e.g., "Team Fortress 2")
  -max int             Maximum number of reviews to retrieve (default: 100, 0 for unlimited)
  -lang string         Languages to retrieve (comma-separated, default: japanese, e.g., "japanese,english")
  -output string       Output directory (default: output)
  -split              Split files by language
  -json               Output files in JSON format (.json) (default: text format)
  -verbose            Show detailed logs
  -filter string      Review filter (recent: by creation date, updated: by update date, all: by helpfulness (default))
  -help               Show this help
  -version            Show version information

Examples:
  # Get Japanese reviews by App ID (default: sorted by helpfulness)
  steam-review -appid 440 -max 500 -verbose

  # Get reviews sorted by creation date
  steam-review -appid 440 -max 500 -filter recent -verbose

  # Get English reviews by game name
  steam-review -game "Cyberpunk 2077" -lang "english" -max 1000 -output ./reviews

  # Get reviews in multiple languages
  steam-review -game "Elden Ring" -lang "japanese,english" -max 300 -split

  # Save Japanese reviews in JSON format
  steam-review -appid 570 -max 2000 -output ./dota2_reviews -json -verbose

  # Get reviews in all languages
  steam-review -appid 730 -lang "all" -max 1000 -split

  # Get recently updated reviews
  steam-review -appid 730 -filter updated -max 200

Notes:
  - Specify either App ID or game name, not both
  - If -lang is not specified, only Japanese reviews will be retrieved by default
  - Use "all" to retrieve reviews in all languages
  - Retrieving a large number of reviews may take time
  - Due to Steam API rate limits, there is a 1-second delay between requests"""

_JAPANESE_USAGE = """%s version %s

使用方法:
  steam-review [オプション]

オプション:
  -appid string         Steam App ID (例: 440)
  -game string          ゲーム名 (例: "Team Fortress 2")
  -max int             最大取得レビュー数 (デフォルト: 100, 0で無制限)
  -lang string         取得する言語 (カンマ区切り, デフォルト: japanese, 例: "japanese,english")
  -output string       出力ディレクトリ (デフォルト: output)
  -split              言語別にファイルを分けて保存
  -json               出力ファイルをJSON形式(.json)にする (デフォルト: テキスト形式)
  -verbose            詳細なログを表示
  -filter string      レビューのフィルター (recent: 作成日時順, updated: 更新日時順, all: 有用性順(デフォルト))
  -help               このヘルプを表示
  -version            バージョン情報を表示

使用例:
  # App IDを指定して日本語レビューを取得（デフォルト: 有用性順）
  steam-review -appid 440 -max 500 -verbose

  # 作成日時順でレビューを取得
  steam-review -appid 440 -max 500 -filter recent -verbose

  # ゲーム名で英語レビューを取得
  steam-review -game "Cyberpunk 2077" -lang "english" -max 1000 -output ./reviews

  # 複数言語のレビューを取得
  steam-review -game "Elden Ring" -lang "japanese,english" -max 300 -split

  # 日本語レビューをJSON形式で保存
  steam-review -appid 570 -max 2000 -output ./dota2_reviews -json -verbose

  # すべての言語のレビューを取得
  steam-review -appid 730 -lang "all" -max 1000 -split

  # 最近更新されたレビューから取得
  steam-review -appid 730 -filter updated -max 200

注意:
  - App IDとゲーム名のどちらか一方を指定してください
  - -lang を指定しない場合、デフォルトで日本語レビューのみを取得します
  - "all" を指定するとすべての言語のレビューを取得します
  - 大量のレビューを取得する場合は時間がかかります
  - Steam APIのレート制限により、リクエスト間に1秒の待機時間があります"""


_ENGLISH: dict[str, str] = {
    MSG_APP_NAME: "Steam Reviews CLI Tool",
    MSG_APP_VERSION: "Steam Reviews CLI Tool version %s",
    MSG_APP_STARTED: "%s started",
    MSG_USAGE_TITLE: "Usage:\n  steam-review [options]",
    MSG_USAGE_OPTIONS: "Options:",
    MSG_USAGE_EXAMPLES: "Examples:",
    MSG_USAGE_FULL: _ENGLISH_USAGE,
    MSG_ERROR_NO_INPUT: "Error: Please specify either App ID or game name",
    MSG_ERROR_BOTH_INPUTS: "Error: Cannot specify both App ID and game name",
    MSG_ERROR_DIR_CREATION: "Failed to create output directory: %v",
    MSG_ERROR_REVIEW_FETCH: "Review fetch error: %v",
    MSG_ERROR_FILE_SAVE: "File save error: %v",
    MSG_ERROR_LOGGER_INIT: "Failed to initialize logger: %v",
    MSG_ERROR_GAME_DETAILS_INIT: "Failed to fetch game details: %v",
    MSG_SUCCESS_COMPLETED: "Process completed",
    MSG_SUCCESS_FILE_SAVED: "Reviews saved to %s",
    MSG_STATS_TITLE: "=== Review Statistics ===",
    MSG_STATS_GAME: "Game: %s",
    MSG_STATS_TOTAL_REVIEWS: "Total reviews: %d",
    MSG_STATS_POSITIVE: "Positive: %d (%.1f%%)",
    MSG_STATS_NEGATIVE: "Negative: %d (%.1f%%)",
    MSG_STATS_LANGUAGE_BREAKDOWN: "Review Statistics by Language:",
    MSG_STATS_NO_REVIEWS: "No reviews found",
    MSG_FILE_SAVED_FILES: "=== Saved Files ===",
    MSG_FILE_LANGUAGE_STATS: (
        "  %s: %d reviews (%.1f%%) - Positive: %d (%.1f%%), Negative: %d"
    ),
    MSG_FILE_CREATION_ERROR: "File creation error: %w",
    MSG_FILE_GAME_DETAILS: "=== Game Details ===",
    MSG_FILE_GAME_NAME: "Game Name: %s",
    MSG_FILE_APP_ID: "App ID: %s",
    MSG_FILE_DEVELOPER: "Developer: %s",
    MSG_FILE_PUBLISHER: "Publisher: %s",
    MSG_FILE_RELEASE_DATE: "Release Date: %s",
    MSG_FILE_PRICE: "Price: %s",
    MSG_FILE_GENRES: "Genres: %s",
    MSG_FILE_CATEGORIES: "Categories: %s",
    MSG_FILE_WEBSITE: "Website: %s",
    MSG_FILE_AGE_RESTRICTION: "Age Restriction: %d years and older",
    MSG_FILE_FREE: "Free: %t",
    MSG_FILE_RETRIEVED_AT: "Retrieved At: %s",
    MSG_FILE_REVIEWS_LIST: "=== Reviews List ===",
    MSG_FILE_REVIEW_NUMBER: "=== Review %d ===",
    MSG_FILE_JSON_WRITE_ERROR: "JSON write error: %w",
    MSG_FILE_LANGUAGE_SAVE_ERROR: "Language %s file save error: %v",
    MSG_FILE_LANGUAGE_SAVED: "Language %s: %d reviews saved to %s",
    MSG_FILE_ALL_LANGUAGES_SAVED: "All languages summary file saved: %s (%d reviews)",
    MSG_FILE_SUMMARY_ERROR: "Summary file save error: %w",
    MSG_ERROR_STEAM_API_FETCH: "Steam API fetch error: %w",
    MSG_ERROR_JSON_DECODE: "JSON decode error: %w",
    MSG_ERROR_GAME_NOT_FOUND: "Game '%s' not found",
    MSG_ERROR_HTTP_REQUEST: "HTTP request error: %w",
    MSG_ERROR_HTTP_STATUS: "HTTP error: %d",
    MSG_ERROR_STEAM_API_RESPONSE: "Steam API error: success = %d",
    MSG_ERROR_APP_ID_FETCH: "App ID fetch error: %w",
    MSG_ERROR_STEAM_STORE_FETCH: "Steam Store API fetch error: %w",
    MSG_ERROR_APP_DATA_NOT_FOUND: "App ID %s data not found",
    MSG_ERROR_GAME_DETAILS_FAIL: "Failed to get details for App ID %s",
    MSG_VERBOSE_REVIEW_FETCH_START: "Starting to fetch reviews for App ID %s",
    MSG_VERBOSE_REVIEW_PROGRESS: "Current reviews: %d, cursor: %s",
    MSG_VERBOSE_NO_MORE_REVIEWS: "No more reviews available",
    MSG_VERBOSE_MAX_REVIEWS_REACHED: "Reached maximum review count %d",
    MSG_VERBOSE_CURSOR_NOT_CHANGED: "Cursor did not change. Ending process",
    MSG_VERBOSE_TOTAL_REVIEWS_FETCHED: "Fetched a total of %d reviews",
    MSG_VERBOSE_GAME_REVIEW_FETCH: "Fetching reviews for game '%s' (App ID: %s)",
    MSG_VERBOSE_GAME_DETAILS_FETCH: "Fetching game details for App ID %s...",
    MSG_VERBOSE_GAME_DETAILS_OBTAINED: "Game details obtained: %s",
    MSG_VERBOSE_REVIEW_SAVED: "Reviews saved to %s",
    MSG_VERBOSE_LANGUAGE_SAVED: "Language %s: %d reviews saved to %s",
    MSG_FIELD_DEVELOPER: "Developer",
    MSG_FIELD_PUBLISHER: "Publisher",
    MSG_FIELD_RELEASE_DATE: "Release Date",
    MSG_FIELD_PRICE: "Price",
    MSG_FIELD_GENRE: "Genre",
    MSG_FIELD_CATEGORY: "Category",
    MSG_FIELD_PLAYTIME: "%d minutes",
    MSG_FIELD_REVIEW: "review",
}

_JAPANESE: dict[str, str] = {
    MSG_APP_NAME: "Steam Reviews CLI Tool",
    MSG_APP_VERSION: "Steam Reviews CLI Tool version %s",
    MSG_APP_STARTED: "%s が開始されました",
    MSG_USAGE_TITLE: "使用方法:\n  steam-review [オプション]",
    MSG_USAGE_OPTIONS: "オプション:",
    MSG_USAGE_EXAMPLES: "使用例:",
    MSG_USAGE_FULL: _JAPANESE_USAGE,
    MSG_ERROR_NO_INPUT: "エラー: App ID またはゲーム名を指定してください",
    MSG_ERROR_BOTH_INPUTS: "エラー: App ID とゲーム名の両方を指定することはできません",
    MSG_ERROR_DIR_CREATION: "出力ディレクトリの作成に失敗しました: %v",
    MSG_ERROR_REVIEW_FETCH: "レビュー取得エラー: %v",
    MSG_ERROR_FILE_SAVE: "ファイル保存エラー: %v",
    MSG_ERROR_LOGGER_INIT: "ロガーの初期化に失敗しました: %v",
    MSG_ERROR_GAME_DETAILS_INIT: "ゲーム詳細情報の取得に失敗しました: %v",
    MSG_SUCCESS_COMPLETED: "処理が完了しました",
    MSG_SUCCESS_FILE_SAVED: "レビューを %s に保存しました",
    MSG_STATS_TITLE: "=== レビュー統計 ===",
    MSG_STATS_GAME: "ゲーム: %s",
    MSG_STATS_TOTAL_REVIEWS: "総レビュー数: %d",
    MSG_STATS_POSITIVE: "肯定的: %d (%.1f%%)",
    MSG_STATS_NEGATIVE: "否定的: %d (%.1f%%)",
    MSG_STATS_LANGUAGE_BREAKDOWN: "言語別レビュー統計:",
    MSG_STATS_NO_REVIEWS: "レビューが見つかりませんでした",
    MSG_FILE_SAVED_FILES: "=== 保存したファイル一覧 ===",
    MSG_FILE_LANGUAGE_STATS: "  %s: %d件 (%.1f%%) - 肯定的: %d件 (%.1f%%), 否定的: %d件",
    MSG_FILE_CREATION_ERROR: "ファイル作成エラー: %w",
    MSG_FILE_GAME_DETAILS: "=== ゲーム詳細情報 ===",
    MSG_FILE_GAME_NAME: "ゲーム名: %s",
    MSG_FILE_APP_ID: "App ID: %s",
    MSG_FILE_DEVELOPER: "開発者: %s",
    MSG_FILE_PUBLISHER: "パブリッシャー: %s",
    MSG_FILE_RELEASE_DATE: "リリース日: %s",
    MSG_FILE_PRICE: "価格: %s",
    MSG_FILE_GENRES: "ジャンル: %s",
    MSG_FILE_CATEGORIES: "カテゴリ: %s",
    MSG_FILE_WEBSITE: "ウェブサイト: %s",
    MSG_FILE_AGE_RESTRICTION: "年齢制限: %d歳以上",
    MSG_FILE_FREE: "無料: %t",
    MSG_FILE_RETRIEVED_AT: "情報取得日時: %s",
    MSG_FILE_REVIEWS_LIST: "=== レビュー一覧 ===",
    MSG_FILE_REVIEW_NUMBER: "=== レビュー %d ===",
    MSG_FILE_JSON_WRITE_ERROR: "JSON書き込みエラー: %w",
    MSG_FILE_LANGUAGE_SAVE_ERROR: "言語 %s のファイル保存エラー: %v",
    MSG_FILE_LANGUAGE_SAVED: "言語 %s: %d件のレビューを %s に保存",
    MSG_FILE_ALL_LANGUAGES_SAVED: "全言語統合ファイルを保存: %s (%d件)",
    MSG_FILE_SUMMARY_ERROR: "サマリーファイル保存エラー: %w",
    MSG_ERROR_STEAM_API_FETCH: "Steam API取得エラー: %w",
    MSG_ERROR_JSON_DECODE: "JSONデコードエラー: %w",
    MSG_ERROR_GAME_NOT_FOUND: "ゲーム '%s' が見つかりません",
    MSG_ERROR_HTTP_REQUEST: "HTTP リクエストエラー: %w",
    MSG_ERROR_HTTP_STATUS: "HTTP エラー: %d",
    MSG_ERROR_STEAM_API_RESPONSE: "Steam API エラー: success = %d",
    MSG_ERROR_APP_ID_FETCH: "App ID取得エラー: %w",
    MSG_ERROR_STEAM_STORE_FETCH: "Steam Store API取得エラー: %w",
    MSG_ERROR_APP_DATA_NOT_FOUND: "App ID %s のデータが見つかりません",
    MSG_ERROR_GAME_DETAILS_FAIL: "App ID %s の詳細情報取得に失敗しました",
    MSG_VERBOSE_REVIEW_FETCH_START: "App ID %s のレビュー取得を開始します",
    MSG_VERBOSE_REVIEW_PROGRESS: "現在のレビュー数: %d, カーソル: %s",
    MSG_VERBOSE_NO_MORE_REVIEWS: "これ以上レビューがありません",
    MSG_VERBOSE_MAX_REVIEWS_REACHED: "最大レビュー数 %d に到達しました",
    MSG_VERBOSE_CURSOR_NOT_CHANGED: "カーソルが変更されませんでした。終了します",
    MSG_VERBOSE_TOTAL_REVIEWS_FETCHED: "合計 %d 件のレビューを取得しました",
    MSG_VERBOSE_GAME_REVIEW_FETCH: "ゲーム '%s' (App ID: %s) のレビューを取得します",
    MSG_VERBOSE_GAME_DETAILS_FETCH: "App ID %s のゲーム詳細情報を取得中...",
    MSG_VERBOSE_GAME_DETAILS_OBTAINED: "ゲーム詳細情報を取得しました: %s",
    MSG_VERBOSE_REVIEW_SAVED: "レビューを %s に保存しました",
    MSG_VERBOSE_LANGUAGE_SAVED: "言語 %s: %d件のレビューを %s に保存",
    MSG_FIELD_DEVELOPER: "開発者",
    MSG_FIELD_PUBLISHER: "パブリッシャー",
    MSG_FIELD_RELEASE_DATE: "リリース日",
    MSG_FIELD_PRICE: "価格",
    MSG_FIELD_GENRE: "ジャンル",
    MSG_FIELD_CATEGORY: "カテゴリ",
    MSG_FIELD_PLAYTIME: "%d分",
    MSG_FIELD_REVIEW: "review",
}

_CATALOGUES = {"en": _ENGLISH, "ja": _JAPANESE}


def messages_for(language: str) -> dict[str, str]:
    """Return a fresh copy of the catalogue for *language*; English if unknown."""
    return dict(_CATALOGUES.get(language, _ENGLISH))