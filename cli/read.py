# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-30
# Description: read.py
# -----------------------------------------------------------------------------
import json
import sys

import click

from config.Config import Config
from reader.JinaReader import JinaReader
from utility.logging_utils import get_logger

logger = get_logger("cli.read")


@click.command(name="read-url", help="Read a web page through the Jina Reader API and print it as JSON")
@click.argument("url")
@click.option(
    "--with-all-links",
    is_flag=True,
    default=False,
    help="Include a summary of all links found on the page",
)
def main(url: str, with_all_links: bool) -> None:
    try:
        reader = JinaReader(Config.from_env())
        response = reader.read_url(url, with_all_links=with_all_links)
    except Exception as e:
        logger.error("read-url failed: %s", e)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(json.dumps(response.data.model_dump(exclude_none=True), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
