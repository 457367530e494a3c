"""Fetch a thread and print it as JSON."""

import asyncio
import logging
import sys

from . import threads
from .errors import ThreadsClientError

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


def main():
    """Fetch the thread named on the command line."""
    if len(sys.argv) != 2:
        print("usage: python -m assistant_threads <thread_id>", file=sys.stderr)
        return 2

    thread_id = sys.argv[1]
    try:
        thread = asyncio.run(threads.fetch(thread_id))
    except (ThreadsClientError, ValueError) as e:
        logger.error(f"Failed to fetch thread {thread_id}: {e}")
        return 1

    print(thread.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
