"""
Command line entry point.

    python -m bill_gateway [PORT] [--config-path PATH]

Exits with status 1 when the Alipay configuration is missing or
invalid; otherwise serves until killed.
"""

from typing import Optional

import structlog
import typer
import uvicorn

from bill_gateway.core.config import settings
from bill_gateway.core.credentials import load_credentials
from bill_gateway.core.logging import setup_logging
from bill_gateway.domain.exceptions import ConfigurationError
from bill_gateway.main import create_app

logger = structlog.get_logger(__name__)

cli = typer.Typer(add_completion=False, help="Alipay bill gateway")


def resolve_port(raw: Optional[str], default: int) -> int:
    """Parse the port argument, falling back to ``default`` on bad input."""
    if raw is None:
        return default
    try:
        port = int(raw)
    except ValueError:
        port = -1
    if not 0 < port < 65536:
        logger.warning("invalid_port_argument", value=raw, fallback=default)
        return default
    return port


@cli.command()
def serve(
    port: Optional[str] = typer.Argument(None, help="Listen port (default 8080)"),
    config_path: Optional[str] = typer.Option(
        None,
        "--config-path",
        help="Path to alipay.properties; overrides the default search",
    ),
) -> None:
    """Load Alipay credentials and serve /balance, /accountlog and /sign."""
    setup_logging()

    listen_port = resolve_port(port, settings.port)

    try:
        credentials = load_credentials(config_path or settings.config_path)
        app = create_app(credentials)
    except ConfigurationError as e:
        logger.error("startup_aborted", code=e.code, error=e.message)
        raise typer.Exit(code=1)

    logger.info("config_loaded", app_id=credentials.app_id, gateway_url=credentials.gateway_url)
    logger.info(
        "server_starting",
        host=settings.host,
        port=listen_port,
        endpoints=["/balance", "/accountlog", "/sign"],
    )
    uvicorn.run(app, host=settings.host, port=listen_port, log_config=None)


if __name__ == "__main__":
    cli()
