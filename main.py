"""
SOLID Messenger Demo — Entry Point.

Single entry point: `python main.py` prints the five SOLID demonstrations.
"""

import logging

from src.config import settings

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

from src.core.principles import run_demo


def main() -> None:
    run_demo()


if __name__ == "__main__":
    main()
