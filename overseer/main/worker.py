"""
Worker Entry Point - Main Layer

Runs the version ingestion pipeline: the deployment event source feeds the
correlator until the process receives SIGINT/SIGTERM (exit status 0) or
the pipeline halts on an ambiguous deployment target (exit status 1).
Both API and Worker are application entry points that belong to the Main
layer.
"""

import asyncio
import signal
import sys

from overseer.domain.entities.errors import AmbiguousDeploymentTargetError
from overseer.main.config import get_settings
from overseer.main.container import AppContainer, app_lifespan, init_container
from overseer.shared import configure_logging, get_logger, update_logging_from_settings

configure_logging()

settings = get_settings()

update_logging_from_settings(settings)

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_PIPELINE_HALTED = 1

STOP_SIGNALS = (signal.SIGINT, signal.SIGTERM)


def create_worker() -> AppContainer:
    """Build the container the worker runs from."""
    settings = get_settings()
    container = init_container(settings)

    logger.info(
        "Configuring ingestion worker",
        nomad_enabled=settings.nomad.enabled,
        nomad_address=settings.nomad.address,
        topic=settings.nomad.topic,
        retry_strategy=settings.nomad.retry_strategy.value,
    )
    return container


async def run_worker(container: AppContainer, stop: asyncio.Event) -> int:
    """
    Run the version stream until ``stop`` is set or the pipeline halts.

    Returns:
        The process exit status
    """
    async with app_lifespan():
        use_case = container.run_version_stream_use_case()
        stream_task = asyncio.create_task(use_case.execute())
        stop_task = asyncio.create_task(stop.wait())

        try:
            await asyncio.wait(
                {stream_task, stop_task}, return_when=asyncio.FIRST_COMPLETED
            )
        finally:
            stop_task.cancel()
            if not stream_task.done():
                stream_task.cancel()
                await asyncio.wait([stream_task])

        if stream_task.cancelled():
            logger.info("worker.stopped")
            return EXIT_OK

        try:
            stream_task.result()
        except AmbiguousDeploymentTargetError:
            logger.critical("worker.pipeline_halted")
            return EXIT_PIPELINE_HALTED

        logger.warning("worker.event_source_exhausted")
        return EXIT_OK


async def _serve(container: AppContainer) -> int:
    stop = asyncio.Event()
    loop = asyncio.get_running_loop()
    for sig in STOP_SIGNALS:
        loop.add_signal_handler(sig, stop.set)
    try:
        return await run_worker(container, stop)
    finally:
        for sig in STOP_SIGNALS:
            loop.remove_signal_handler(sig)


def main() -> int:
    """Main entry point for the ingestion worker."""

    logger.info("Starting ingestion worker")

    container = create_worker()
    return asyncio.run(_serve(container))


if __name__ == "__main__":
    sys.exit(main())
