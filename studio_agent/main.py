"""Entry point for the Pump Studio quant agent."""

import asyncio
import sys

from loguru import logger

from config.settings import settings
from studio_agent.agent import run_agent
from studio_agent.utils.logger import setup_logger


async def _run() -> int:
    setup_logger(json_logs=settings.json_logs, level=settings.log_level)
    logger.info("Starting Pump Studio agent...")
    return await run_agent(settings)


def main() -> None:
    sys.exit(asyncio.run(_run()))


if __name__ == "__main__":
    main()
