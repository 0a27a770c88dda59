#!/usr/bin/env python3
"""Re-capture the landing page / bundle fixtures the scraping tests pin.

When X changes its web client, `find_bundle_url` or `find_bearer_literal`
stops matching in production. This script fetches the live pages, reports
whether each pattern still matches, and (with --write) stores fresh
fixtures so the tests track the current format.

By default this script is DRY-RUN. It will NOT touch tests/fixtures unless
you pass --write.

Usage:
  python3 scripts/refresh_fixtures.py
  python3 scripts/refresh_fixtures.py --write
"""

from __future__ import annotations

import argparse
from pathlib import Path

import requests

from x_guest_timeline.client.credentials import find_bearer_literal, find_bundle_url
from x_guest_timeline.contract import BROWSER_USER_AGENT, KNOWN_BEARER, LANDING_PAGE_URL
from x_guest_timeline.errors import ExtractionError


def _bundle_excerpt(js: str, radius: int) -> str:
    # The full bundle is megabytes; keep only the region around the bearer.
    i = js.find(KNOWN_BEARER)
    return js[max(0, i - radius) : i + len(KNOWN_BEARER) + radius]


def _fetch(http: requests.Session, url: str, timeout: float, headers: dict[str, str] | None = None) -> str:
    r = http.get(url, headers=headers, timeout=timeout)
    r.raise_for_status()
    return r.text


def main(argv: list[str] | None = None, http: requests.Session | None = None) -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("--out", default="./tests/fixtures", help="Fixture directory (default: %(default)s)")
    ap.add_argument("--timeout", type=float, default=30.0, help="Request timeout in seconds")
    ap.add_argument("--radius", type=int, default=400, help="Bundle chars to keep around the bearer literal")
    ap.add_argument("--write", action="store_true", help="Actually write fixtures (otherwise: dry-run)")
    args = ap.parse_args(argv)

    http = http or requests.Session()
    try:
        html = _fetch(http, LANDING_PAGE_URL, args.timeout, headers={"User-Agent": BROWSER_USER_AGENT})
    except requests.RequestException as e:
        print(f"FAIL landing page: {e}")
        return 1
    print(f"Landing page: {len(html)} chars")

    try:
        bundle_url = find_bundle_url(html)
    except ExtractionError as e:
        print(f"FAIL bundle URL: {e}")
        return 1
    print(f"Bundle URL: {bundle_url}")

    try:
        js = _fetch(http, bundle_url, args.timeout)
    except requests.RequestException as e:
        print(f"FAIL bundle: {e}")
        return 1
    print(f"Bundle: {len(js)} chars")

    try:
        find_bearer_literal(js)
    except ExtractionError as e:
        print(f"FAIL bearer literal: {e}")
        print("Fixtures left untouched.")
        return 1
    print("Bearer literal: found")

    if not args.write:
        print("\nDry-run only. Re-run with --write to update fixtures.")
        return 0

    out = Path(args.out)
    out.mkdir(parents=True, exist_ok=True)
    (out / "landing.html").write_text(html, encoding="utf-8")
    (out / "bundle.js").write_text(_bundle_excerpt(js, args.radius), encoding="utf-8")
    print(f"\nWrote {out / 'landing.html'}")
    print(f"Wrote {out / 'bundle.js'}")
    print("Note: conftest.BUNDLE_URL must match the new bundle URL.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
