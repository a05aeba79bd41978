#!/usr/bin/env python3
"""
Photo Index Integrity Checker
Compares canonical photo records (galleries/{id}/photos) with the
gallery-photos index and reports drift between them.

Usage:
    python scripts/check_photo_index.py [--json]

Environment Variables:
    DOCUMENT_STORE, SUPABASE_URL, SUPABASE_SERVICE_ROLE_KEY (see .env.example)
"""

import argparse
import asyncio
import json
from datetime import datetime

from dotenv import load_dotenv

load_dotenv()

from core.logging import setup_logging
from infrastructure import get_document_store
from repositories import GalleriesRepository, PhotosRepository
from services.index_integrity import check_gallery_index


async def run(as_json: bool) -> int:
    store = get_document_store()
    reports = await check_gallery_index(GalleriesRepository(store), PhotosRepository(store))

    if as_json:
        print(json.dumps([r.model_dump() for r in reports], indent=2))
    else:
        print("=" * 60)
        print("PHOTO INDEX INTEGRITY CHECK")
        print("=" * 60)
        print(f"Started at: {datetime.now().isoformat()}")
        print()
        for report in reports:
            status = "OK" if report.is_consistent else "DRIFT"
            print(f"[{status}] {report.code}: {report.canonical_count} canonical, {report.index_count} indexed")
            for name in report.missing_index:
                print(f"   missing index record: {name}")
            for record_id in report.orphan_index:
                print(f"   orphan index record:  {record_id}")
            for name in report.duplicate_names:
                print(f"   duplicate name:       {name}")

    return 0 if all(r.is_consistent for r in reports) else 1


def main():
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--json", action="store_true", help="Print the reports as JSON")
    args = parser.parse_args()

    setup_logging(level="WARNING")
    raise SystemExit(asyncio.run(run(args.json)))


if __name__ == "__main__":
    main()
