"""Command-line entry point: fetch Steam reviews, save them and print statistics."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Sequence

from . import api, i18n
from . import messages as msg
from .config import APP_NAME, FILE_EXT_JSON, FILE_EXT_TXT, FILTER_ALL, VERSION, Config
from .i18n import t, tf
from .logger import Logger
from .models import GameDetails, ReviewData
from .stats import print_review_stats
from .storage import StorageError, save_reviews, save_reviews_by_language

LOG_DIR = "logs"


def parse_languages(text: str) -> list[str]:
    """Split a comma separated language list, dropping blanks."""
    return [part.strip() for part in text.split(",") if part.strip()]


def _print_usage() -> None:
    sys.stdout.write(tf(msg.MSG_USAGE_FULL, APP_NAME, VERSION))
    sys.stdout.flush()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="steam-review", add_help=False, allow_abbrev=False)
    parser.add_argument("-version", "--version", dest="show_version", action="store_true")
    parser.add_argument("-appid", "--appid", dest="app_id", default="")
    parser.add_argument("-game", "--game", dest="game_name", default="")
    parser.add_argument("-max", "--max", dest="max_reviews", type=int, default=100)
    parser.add_argument("-lang", "--lang", dest="languages", default="japanese")
    parser.add_argument("-output", "--output", dest="output_dir", default="output")
    parser.add_argument("-filter", "--filter", dest="filter", default=FILTER_ALL)
    parser.add_argument("-split", "--split", dest="split_by_lang", action="store_true")
    parser.add_argument("-json", "--json", dest="output_json", action="store_true")
    parser.add_argument("-verbose", "--verbose", dest="verbose", action="store_true")
    parser.add_argument("-help", "--help", "-h", dest="help", action="store_true")
    return parser


def _config_from(args: argparse.Namespace) -> Config:
    return Config(
        app_id=args.app_id,
        game_name=args.game_name,
        max_reviews=args.max_reviews,
        languages=parse_languages(args.languages),
        output_dir=args.output_dir,
        verbose=args.verbose,
        split_by_lang=args.split_by_lang,
        output_json=args.output_json,
        filter=args.filter,
    )


def _input_error(key: str) -> int:
    print(t(key) + "\n")
    _print_usage()
    return 1


def _run(cfg: Config, log: Logger) -> int:
    log.info(tf(msg.MSG_APP_STARTED, tf(msg.MSG_APP_VERSION, VERSION)))

    if not cfg.app_id and not cfg.game_name:
        return _input_error(msg.MSG_ERROR_NO_INPUT)
    if cfg.app_id and cfg.game_name:
        return _input_error(msg.MSG_ERROR_BOTH_INPUTS)

    if cfg.output_dir:
        try:
            os.makedirs(cfg.output_dir, exist_ok=True)
        except OSError as exc:
            log.error(tf(msg.MSG_ERROR_DIR_CREATION, exc))
            return 1

    reviews: list[ReviewData]
    try:
        if cfg.app_id:
            app_id = cfg.app_id
            game_name = f"App ID {app_id}"
            log.verbose(f"App ID {app_id} のレビューを取得中...")
            reviews = api.fetch_all_reviews(
                app_id, cfg.max_reviews, cfg.verbose, cfg.languages, cfg.filter, log
            )
        else:
            game_name = cfg.game_name
            log.verbose(f"ゲーム '{game_name}' のレビューを取得中...")
            reviews, app_id = api.get_reviews_by_game_name(
                game_name, cfg.max_reviews, cfg.verbose, cfg.languages, cfg.filter, log
            )
    except api.SteamAPIError as exc:
        log.error(tf(msg.MSG_ERROR_REVIEW_FETCH, exc))
        return 1

    if not reviews:
        log.info(t(msg.MSG_STATS_NO_REVIEWS))
        return 0

    log.info(f"取得したレビュー数: {len(reviews)}件")

    game_details: GameDetails | None
    try:
        game_details = api.get_game_details(app_id, cfg.verbose, log)
    except api.SteamAPIError as exc:
        # Reviews are still saved without the store details.
        log.verbose(tf(msg.MSG_ERROR_GAME_DETAILS_INIT, exc))
        game_details = None

    ext = FILE_EXT_JSON if cfg.output_json else FILE_EXT_TXT
    base_filename = f"steam_reviews_{app_id}{ext}"

    saved_files: list[str] = []
    if cfg.split_by_lang:
        try:
            saved_files = save_reviews_by_language(
                reviews, base_filename, cfg.output_dir, cfg.verbose, cfg.output_json, game_details
            )
        except StorageError as exc:
            log.error(tf(msg.MSG_ERROR_FILE_SAVE, exc))
    else:
        filename = f"{cfg.output_dir}/{base_filename}" if cfg.output_dir else base_filename
        try:
            saved_files.append(save_reviews(reviews, filename, cfg.output_json, game_details))
        except StorageError as exc:
            log.error(tf(msg.MSG_ERROR_FILE_SAVE, exc))
        else:
            log.verbose(tf(msg.MSG_VERBOSE_REVIEW_SAVED, filename))

    log.echo("\n" + t(msg.MSG_FILE_SAVED_FILES))
    for name in saved_files:
        log.echo(f"- {name}\n")
    log.echo("\n")

    display_name = game_details.name if game_details is not None else game_name
    print_review_stats(reviews, display_name)

    log.info(t(msg.MSG_SUCCESS_COMPLETED))
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line tool and return its exit status."""
    i18n.init()
    args = _build_parser().parse_args(argv)

    if args.show_version:
        print(tf(msg.MSG_APP_VERSION, VERSION))
        return 0
    if args.help:
        _print_usage()
        return 0

    try:
        log = Logger(LOG_DIR, args.verbose)
    except OSError as exc:
        print(tf(msg.MSG_ERROR_LOGGER_INIT, exc))
        return 1

    with log:
        return _run(_config_from(args), log)


if __name__ == "__main__":
    raise SystemExit(main())