"""Headless NPSN lookup: same gate and query flow as the app, printed as JSON lines."""

import argparse
import asyncio
import json
import logging
import sys

from config import DEFAULT_SECRETS_PATH, load_settings_from_toml, optional_setting
from infrastructure.observability import setup_observability
from use_cases.app_context import get_app_context, install_app_context
from use_cases.bootstrap import build_app_context
from use_cases.gate_models import MSG_INVALID_CREDENTIAL, MSG_NO_CREDENTIAL

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_GATE_OPEN = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Lookup school data by NPSN.")
    parser.add_argument("keys", nargs="+", metavar="NPSN")
    parser.add_argument("--secrets", default=DEFAULT_SECRETS_PATH, help="Path to secrets.toml")
    parser.add_argument("--cookie", default=None, help="Store this PHPSESSID before querying")
    return parser


async def run_lookup(keys, cookie=None) -> int:
    context = get_app_context()

    if cookie:
        gate_state = await context.credential_entered(cookie)
    else:
        gate_state = await context.check_gate()

    if gate_state == "OPEN":
        message = MSG_NO_CREDENTIAL if context.store.get() is None else MSG_INVALID_CREDENTIAL
        log.warning("Gate is open; pass a valid PHPSESSID with --cookie")
        print(json.dumps({"gate": "OPEN", "error": message}, ensure_ascii=False))
        return EXIT_GATE_OPEN

    exit_code = EXIT_OK
    for key in keys:
        state = await context.orchestrator.submit(key)
        print(json.dumps({
            "q": key,
            "status": state.status,
            "error": state.error.message if state.error else None,
            "identity": context.identity,
        }, ensure_ascii=False))
        if state.status != "SUCCEEDED":
            exit_code = EXIT_FAILED
        if context.show_gate:
            return EXIT_GATE_OPEN
    return exit_code


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_observability()

    settings = load_settings_from_toml(args.secrets)
    install_app_context(build_app_context(settings))
    cookie = args.cookie or optional_setting("HISENSE_COOKIE", args.secrets)
    return asyncio.run(run_lookup(args.keys, cookie))


if __name__ == "__main__":
    sys.exit(main())
