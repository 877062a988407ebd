# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-29
# Updated: 2026-10-16
# Description: corr.py
# -----------------------------------------------------------------------------
import sys

import click
import uvicorn

import settings
from api.main import create_app
from ingestion.EmbeddingFileLoader import EmbeddingFileLoader
from services.CorrelationService import CorrelationService
from utility.logging_utils import get_logger

logger = get_logger("cli.corr")


@click.command(name="corr", help="Compute and visualize correlations between embeddings")
@click.argument("file1", type=click.Path())
@click.argument("file2", required=False, type=click.Path())
@click.option(
    "-p", "--port",
    type=click.IntRange(1, 65535),
    default=settings.CORR_DEFAULT_PORT,
    show_default=True,
    help="Port for the visualization server",
)
@click.option(
    "-m", "--model",
    default=settings.CORR_DEFAULT_MODEL,
    show_default=True,
    help="Embedding model the files were produced with",
)
def main(file1: str, file2: str | None, port: int, model: str) -> None:
    logger.info("corr started (file1=%s, file2=%s, model=%s)", file1, file2, model)

    service = CorrelationService(
        loader=EmbeddingFileLoader(strict_dimensions=settings.CORR_STRICT_DIMENSIONS),
        max_label_len=settings.LABEL_MAX_LEN,
    )

    try:
        payload = service.build_payload(file1, file2)
    except Exception as e:
        logger.error("Failed to build correlation payload: %s", e)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    app = create_app(payload)

    logger.info("Visualization server running at http://localhost:%d", port)
    logger.info("Press Ctrl+C to stop the server")
    uvicorn.run(app, host=settings.CORR_HOST, port=port, log_level="warning")


if __name__ == "__main__":
    main()
