"""Command that regenerates the star cache and the stored constellation."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from interspace.constellation import Constellation
from interspace.stars import fetch_stars, update_stars_cache

DEFAULT_STARS_PATH = "res/state/stars.json"
DEFAULT_CONSTELLATION_PATH = "res/state/constellation.json"


def _no_fetch(url: str) -> None:
    return None


def main(argv: Sequence[str] | None = None) -> int:
    """Refresh star counts, rebuild the constellation and store it."""
    parser = argparse.ArgumentParser(
        prog="interspace-regen-data",
        description="Regenerate the star cache and the stored constellation.",
    )
    parser.add_argument("--stars", default=DEFAULT_STARS_PATH, help="star cache file")
    parser.add_argument(
        "--output", default=DEFAULT_CONSTELLATION_PATH, help="constellation output file"
    )
    parser.add_argument(
        "--offline", action="store_true", help="do not contact the network for star counts"
    )
    args = parser.parse_args(argv)

    constellation = Constellation.generate_skeleton()
    caches = update_stars_cache(
        args.stars,
        constellation.comps,
        _no_fetch if args.offline else fetch_stars,
    )
    constellation.incorporate_stars(caches)

    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    constellation.store(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())