"""Command line front end for DeepL Search.

Runs a single query through the same pipeline a search host would use and prints the results.

Examples:
    deepl-search "de: Good morning"
    deepl-search "en->ja: See you tomorrow" --copy
    deepl-search --usage
"""

from __future__ import annotations

import argparse
import asyncio
import os
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Final, NoReturn

from config.loader import ConfigFileNotFoundError, ConfigLoader, ConfigLoaderError
from core.plugin import DeepLSearch
from core.trans.interface import ClientFailure
from core.version import VERSION
from models.config_models import Config
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    from models.translation_models import CharacterQuota, PresentedResult

CFG_FILE: Final[str] = "deepl_search.ini"
API_KEY_ENV: Final[str] = "DEEPL_API_OAUTH"


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        print(f"\n{message}\n", file=sys.stderr)
        self.print_help(sys.stderr)
        raise SystemExit(2)


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    parser = _ArgumentParser(
        description="Translate text with DeepL using the '<source> -> <target>: <text>' query syntax",
        epilog='Example: deepl-search "en->de: Hello, world!"',
    )
    parser.add_argument("query", nargs="?", default="", help="query such as 'de: Hello' or 'en->ja: Hello'")
    parser.add_argument("--config", dest="config", default=CFG_FILE, metavar="FILE", help="INI settings file")
    parser.add_argument("--api-key", dest="api_key", metavar="KEY", help=f"DeepL key (default: ${API_KEY_ENV})")
    parser.add_argument("--paid", dest="paid", action="store_true", help="use the paid API host")
    parser.add_argument("--copy", dest="copy", action="store_true", help="copy the first result to the clipboard")
    parser.add_argument("--usage", dest="usage", action="store_true", help="show character usage and exit")
    parser.add_argument("--debug", dest="debug", action="store_true", help="enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return parser.parse_args(argv)


def load_config(args: argparse.Namespace) -> Config:
    """Load the INI file if present, then apply command line overrides and the key environment variable.

    Raises:
        ConfigLoaderError: If the configuration file exists but cannot be loaded.
    """
    overrides: dict[str, object] = {"api_key": args.api_key, "paid": args.paid, "debug": args.debug}
    try:
        config: Config = ConfigLoader(
            config_filename=args.config, script_name=Path(sys.argv[0]).stem, **overrides
        ).config
    except ConfigFileNotFoundError:
        if args.config != CFG_FILE:
            raise
        config = Config()
        config.DEEPL.API_KEY = args.api_key or ""
        config.DEEPL.USE_FREE_TIER = not args.paid
        config.GENERAL.DEBUG = args.debug

    if not config.DEEPL.API_KEY:
        config.DEEPL.API_KEY = os.getenv(API_KEY_ENV, "")
    return config


def show_usage(search: DeepLSearch) -> int:
    quota: CharacterQuota | ClientFailure = asyncio.run(
        search.client.get_usage(search.config.DEEPL.API_KEY, use_free_tier=search.config.DEEPL.USE_FREE_TIER)
    )
    if isinstance(quota, ClientFailure):
        print(f"{quota.title}: {quota.message}", file=sys.stderr)
        return 1

    if quota.limit > 0:
        print(f"Character usage: {quota.count:,}/{quota.limit:,} ({quota.count / quota.limit * 100:.2f}%)")
    else:
        print(f"Character usage: {quota.count:,}/{quota.limit:,} (---%)")

    if quota.limit_reached:
        print("Warning: the character limit for this billing period has been reached.", file=sys.stderr)
    return 0


def show_results(search: DeepLSearch, query: str, *, copy: bool) -> int:
    results: list[PresentedResult] = search.search(query)
    if not results:
        print("No translation.", file=sys.stderr)
        return 1

    for result in results:
        print(result.display_text)
        if result.context:
            print(f"  {result.context}")
        elif result.clipboard_text != result.display_text:
            print("--- clipboard ---")
            print(result.clipboard_text)

    if copy:
        search.execute(results[0])
    return 0


def main(argv: list[str] | None = None) -> int:
    args: argparse.Namespace = parse_arguments(argv)
    try:
        config: Config = load_config(args)
    except ConfigLoaderError as err:
        print("\nError: Failed to load configuration file.", file=sys.stderr)
        print(f"Details: {err}", file=sys.stderr)
        return 2

    logger_utils = LoggerUtils(config.GENERAL.LOG_FILE)
    if config.GENERAL.DEBUG:
        logger_utils.set_level("DEBUG")

    search = DeepLSearch(config=config)
    if args.usage:
        return show_usage(search)
    if not args.query:
        print("\nError: a query is required unless --usage is given.\n", file=sys.stderr)
        return 2
    return show_results(search, args.query, copy=args.copy)


def run() -> None:
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nCancelled by user.", file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    run()
