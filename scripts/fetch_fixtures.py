#!/usr/bin/env python3
"""
One-time script to fetch real Oura API responses and save as test fixtures.
Run this once with OURA_ACCESS_TOKEN set to capture the actual response shapes.
Bodies are saved as received, including keys the records do not model.
"""

import json
import logging
from pathlib import Path

from ouraring.core.config import get_settings
from ouraring.services.oura import OuraClient, RESOURCES


def main():
    settings = get_settings()
    logging.basicConfig(level=logging.DEBUG if settings.debug else logging.INFO)
    # httpx logs full request URLs, which carry the access token
    logging.getLogger("httpx").setLevel(logging.WARNING)

    fixtures_dir = Path(__file__).parent.parent / "tests" / "fixtures"
    fixtures_dir.mkdir(parents=True, exist_ok=True)

    with OuraClient.from_settings(settings) as client:
        start, end = client.default_window()
        print(f"Fetching Oura data from {start} to {end}...")

        for resource in RESOURCES:
            response = client.request(resource, start, end)
            if response.status_code != 200:
                print(f"No data for {resource}: HTTP {response.status_code}")
                continue

            body = response.json()
            filename = fixtures_dir / f"oura_{resource}.json"
            with open(filename, "w") as f:
                json.dump(body, f, indent=2)
            print(f"Saved {resource} data to {filename}")
            print(f"  Records: {len(body.get(resource) or [])}")

    print("\nDone! Check tests/fixtures/ for captured responses.")


if __name__ == "__main__":
    main()
