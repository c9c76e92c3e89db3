#!/usr/bin/env python3
"""
Generate regression content and download the rendered markup of every entity.
Usage: python scripts/fetch_regression_snapshots.py [--base-url URL] [--out-dir DIR] [--strict]
"""
import sys
import argparse
from pathlib import Path

import httpx

MANIFEST_PATH = "/api/regression/content"


def fetch_snapshots(client: httpx.Client, out_dir: Path) -> dict:
    """Request a fresh manifest and write each endpoint's HTML to out_dir/<file>."""
    response = client.get(MANIFEST_PATH)
    response.raise_for_status()
    manifest = response.json()

    out_dir.mkdir(parents=True, exist_ok=True)
    for endpoint in manifest.get("endpoints", {}).values():
        page = client.get(endpoint["url"])
        page.raise_for_status()
        (out_dir / endpoint["file"]).write_text(page.text, encoding="utf-8")
        print(f"Wrote {endpoint['file']}")

    return manifest


def main():
    parser = argparse.ArgumentParser(description="Download regression content snapshots")
    parser.add_argument("--base-url", default="http://localhost:8080", help="Regression API base URL")
    parser.add_argument("--out-dir", default="regression-snapshots", help="Directory for the HTML files")
    parser.add_argument("--strict", action="store_true", help="Exit non-zero when the manifest reports errors")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url, timeout=120) as client:
        try:
            manifest = fetch_snapshots(client, Path(args.out_dir))
        except httpx.HTTPStatusError as e:
            print(f"Error: {e.request.url} returned {e.response.status_code}")
            sys.exit(1)

    messages = manifest.get("messages", {})
    for warning in messages.get("warnings", []):
        print(f"Warning: {warning}")
    for error in messages.get("errors", []):
        print(f"Error: {error}")

    print(f"Generated at {manifest.get('generated')}: {len(manifest.get('endpoints', {}))} snapshots")

    if args.strict and messages.get("errors"):
        sys.exit(1)


if __name__ == "__main__":
    main()
