# steamreview

A command-line tool that downloads user reviews of a Steam game, saves them
to text or JSON files, and prints a short summary of how positive they are,
broken down by language.

## Installation

```
pip install .
```

## Usage

Give either a Steam App ID or a game name (not both):

```
steam-review -appid 440 -max 500 -verbose
steam-review -game "Cyberpunk 2077" -lang english -max 1000 -output ./reviews
```

Options (each may also be written with two dashes, e.g. `--appid`):

| Option | Meaning | Default |
|---|---|---|
| `-appid` | Steam App ID | |
| `-game` | Game name, matched case-insensitively against the Steam app list | |
| `-max` | Maximum number of reviews to fetch (`0` for no limit) | `100` |
| `-lang` | Comma-separated review languages, or `all` | `japanese` |
| `-output` | Output directory (created if missing) | `output` |
| `-filter` | `recent` (by creation date), `updated` (by update date); anything else orders by helpfulness | `all` |
| `-split` | Write one file per language plus an all-languages file | off |
| `-json` | Write `.json` instead of `.txt` | off |
| `-verbose` | Show detailed progress | off |
| `-help`, `-h` | Show help | |
| `-version` | Show the version | |

More examples:

```
steam-review -game "Elden Ring" -lang "japanese,english" -max 300 -split
steam-review -appid 570 -max 2000 -output ./dota2_reviews -json
steam-review -appid 730 -lang all -max 1000 -split
steam-review -appid 730 -filter updated -max 200
```

The command exits with status 1 when neither or both of `-appid` and `-game`
are given, or when the reviews cannot be fetched, and with 0 otherwise.

## Output

Reviews are saved as `<output>/steam_reviews_<appid>.txt` (or `.json`). With
`-split`, one file per review language is written, such as
`steam_reviews_440_english.txt` (reviews without a language go to
`..._unknown`), together with `steam_reviews_440_all_languages.txt`.

When the game's store details can be fetched, text files start with a game
details header (name, App ID, developers, publishers, release date, price,
genres, categories, website, age restriction, whether it is free, and when the
details were retrieved), and JSON files carry them under `game_details`. The
reviews follow, each with its ID, language, vote, vote counts, weighted score,
purchase flag, playtime at review, timestamps, text and any developer reply.
JSON files hold the reviews under `reviews`.

After saving, the tool lists the files written and prints the total number of
reviews, the positive and negative counts and percentages, and the same
figures for each language.

Requests for further pages of reviews are spaced one second apart to respect
Steam's rate limits, so large downloads take time.

## Logs

Each run writes a timestamped log file, `logs/steam-review_<date>_<time>.log`,
in the current directory, in addition to printing to the console. Verbose
messages appear only with `-verbose`.

## Language of messages

Messages are shown in English or Japanese. The language is taken from
`STEAM_REVIEW_LANG`, then from `LC_ALL`, `LC_MESSAGES`, `LANG` and `LANGUAGE`,
and falls back to English:

```
STEAM_REVIEW_LANG=ja steam-review -appid 440
```

## Using it as a library

The package is made of these modules:

- `steamreview.api`: `fetch_all_reviews`, `fetch_reviews_page`,
  `get_app_id_by_name`, `get_reviews_by_game_name`, `get_game_details`,
  `filter_reviews_by_language`; failures raise `SteamAPIError`.
- `steamreview.models`: the `ReviewData`, `AuthorData` and `GameDetails`
  records, `convert_steam_review`, `convert_to_game_details` and
  `flexible_float`.
- `steamreview.storage`: `save_reviews` and `save_reviews_by_language`;
  failures raise `StorageError`.
- `steamreview.stats`: `format_review_stats` and `print_review_stats`.
- `steamreview.i18n`: language detection, the `Localizer` class and the
  `t` / `tf` lookup functions; `steamreview.messages` holds the catalogues.
- `steamreview.logger`: the `Logger` used by the command.
- `steamreview.config`: constants and the `Config` record.
- `steamreview.cli`: `main` and `parse_languages`.

```python
from steamreview.api import fetch_all_reviews
from steamreview.storage import save_reviews
from steamreview.stats import format_review_stats

reviews = fetch_all_reviews("440", 50, False, ["english"], "all", None, 1.0)
save_reviews(reviews, "tf2.json", True, None)
print(format_review_stats(reviews, "Team Fortress 2"))
```

## Running the tests

```
pip install ".[test]"
pytest
```