#!/usr/bin/env python3
"""
Serve the enrichment API with uvicorn.

    python examples/serve.py            # http://127.0.0.1:8000/api/enrich?url=...
"""

import os

import uvicorn

from vcscout.api import create_app

app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        app,
        host=os.getenv("VCSCOUT_HOST", "127.0.0.1"),
        port=int(os.getenv("VCSCOUT_PORT", "8000")),
    )
