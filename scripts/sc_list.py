#!/usr/bin/env python
"""List a Supercast collection as JSON lines.

Fetches a single page by default; ``--all`` walks every page, fetching each
one only when the previous page has been printed.
"""

from __future__ import annotations

import argparse
import itertools
import json
import logging

from supercast import RequestError, get_default_registry
from supercast.operations import ListableResource

logger = logging.getLogger(__name__)


def main() -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    parser = argparse.ArgumentParser(description="List Supercast resources (/api/v1/<resource>s)")
    parser.add_argument("resource", help="Resource type tag, e.g. episode, subscriber")
    parser.add_argument("--per-page", type=int, default=None, help="Page size to request")
    parser.add_argument("--page", type=int, default=None, help="Page number to start from")
    parser.add_argument("--all", action="store_true", help="Follow pages until exhausted")
    parser.add_argument("--limit", type=int, default=0, help="Stop after N items (0 = no limit)")
    args = parser.parse_args()

    cls = get_default_registry().resolve(args.resource)
    if cls is None or not issubclass(cls, ListableResource):
        parser.error(f"'{args.resource}' is not a listable resource type")

    params = {}
    if args.per_page:
        params["per_page"] = args.per_page
    if args.page:
        params["page"] = args.page

    try:
        page = cls.list(params)
        items = page.auto_paging_iter() if args.all else iter(page)
        if args.limit:
            items = itertools.islice(items, args.limit)
        for item in items:
            print(json.dumps(item.to_dict(), sort_keys=True, default=str))
    except RequestError as e:
        logger.error(f"Listing {args.resource} failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
