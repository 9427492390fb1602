"""Fetch the food offences register and store any new prosecutions."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from food_offences.config import settings
from food_offences.errors import RegisterChangedError, RegisterError
from food_offences.ingestion.pipeline import build_prosecutions
from food_offences.models.prosecution import Prosecution
from food_offences.sources.geocoder import AddressGeocoder
from food_offences.sources.landing import abort_if_updated, fetch_register_pdf
from food_offences.sources.pdf_text import read_pages
from food_offences.sources.store import ProsecutionStore

logger = logging.getLogger(__name__)


def fetch_and_build_prosecutions(pdf_path: Optional[Path] = None) -> List[Prosecution]:
    if pdf_path is not None:
        pdf_bytes = pdf_path.read_bytes()
        link = pdf_path.resolve().as_uri()
    else:
        pdf_bytes = fetch_register_pdf()
        link = settings.register_url
    return build_prosecutions(read_pages(pdf_bytes), link)


def run(skip_change_check: bool = False, pdf_path: Optional[Path] = None) -> None:
    if not skip_change_check and pdf_path is None:
        abort_if_updated()

    prosecutions = fetch_and_build_prosecutions(pdf_path)
    logger.info("Found %s prosecutions", len(prosecutions))

    store = ProsecutionStore(settings.store_path_obj)
    new_prosecutions = store.filter_new(prosecutions)
    logger.info("There are %s new prosecutions", len(new_prosecutions))

    new_prosecutions = AddressGeocoder().geocode_all(new_prosecutions)
    store.upsert(new_prosecutions)
    logger.info("Done")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--skip-change-check",
        action="store_true",
        help="Do not compare the landing page against the last known register link.",
    )
    parser.add_argument("--pdf", type=Path, help="Read a local register PDF instead of downloading it.")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    logging.basicConfig(level=settings.log_level)
    args = parse_args(argv)
    try:
        run(skip_change_check=args.skip_change_check, pdf_path=args.pdf)
    except RegisterChangedError as exc:
        logger.error("%s. Exiting!", exc)
        return exc.exit_code
    except RegisterError as exc:
        logger.error("Aborting without writing any prosecutions: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
