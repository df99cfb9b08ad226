#!/usr/bin/env python3
"""
Example script enriching a single company website.

Uses the LLM summary when OPENAI_API_KEY is set, the heuristic summary
otherwise.

    python examples/enrich_company.py https://stripe.com
"""

import asyncio
import json
import sys

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from vcscout import EnrichmentConfig, EnrichmentError, EnrichmentService
from vcscout.core.hooks import EnrichmentHooks
from vcscout.utils.logger import setup_logging


def _report_end(event):
    print(f"⏱️  {event.strategy or 'failed'} in {event.elapsed_seconds:.2f}s")


async def main(url: str) -> int:
    config = EnrichmentConfig.from_env()
    setup_logging(level=config.log_level, format_type="console", include_timestamp=False)

    if not config.has_openai_key:
        print("⚠️  OPENAI_API_KEY not set, using the heuristic summary.")

    service = EnrichmentService(config, hooks=EnrichmentHooks(on_lookup_end=_report_end))

    try:
        result = await service.enrich(url)
    except EnrichmentError as e:
        print(f"❌ {e}")
        return 1

    print(json.dumps(result.to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("usage: enrich_company.py <url>")
        sys.exit(2)
    sys.exit(asyncio.run(main(sys.argv[1])))
