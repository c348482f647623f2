from __future__ import annotations

import logging

QUIET_LOGGERS = ("httpx", "httpcore")


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # request lines from clearag_client are logged at DEBUG ("verbose")
    logging.getLogger("clearag_client").setLevel(level)
    logging.getLogger("clearag_cli").setLevel(level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.INFO if verbose else logging.WARNING)
