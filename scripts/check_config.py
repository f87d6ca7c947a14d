#!/usr/bin/env python3
"""Load a partycast config file and print what the server would use."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Ensure project root is on the path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from pydantic import ValidationError

from config.settings import get_settings
from partycast.api.auth.oauth import build_providers
from partycast.core.config import load_config
from partycast.core.exceptions import PartycastBaseError
from partycast.core.logging import get_logger, setup_logging

log = get_logger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(description="partycast config checker")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to the JSON config file (default: PARTYCAST_CONFIG_PATH)",
    )
    parser.add_argument(
        "--scheme",
        choices=["http", "https"],
        default="http",
        help="Scheme used for OAuth callback URLs (default: http)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Entry point."""
    args = parse_args(argv)
    settings = get_settings()
    setup_logging(settings.partycast_log_level, settings.partycast_log_json)

    path = args.config or settings.partycast_config_path
    try:
        config = load_config(path)
        providers = build_providers(config, scheme=args.scheme)
    except OSError as exc:
        log.error("config_unreadable", path=str(path), error=str(exc))
        return 1
    except ValidationError as exc:
        log.error("config_invalid", path=str(path), errors=exc.error_count(), error=str(exc))
        return 1
    except PartycastBaseError as exc:
        log.error("providers_invalid", path=str(path), error=str(exc), **exc.context)
        return 1

    print(config.dump_json(redact=True))
    for name, provider in providers.items():
        print(f"{name}: {provider.callback_url}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
