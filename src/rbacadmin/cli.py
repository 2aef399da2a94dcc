"""Command-line interface for RBAC Admin.

This module provides the CLI commands for running and managing
the RBAC Admin application.
"""

import asyncio

import click

from rbacadmin import __version__
from rbacadmin.core.config import get_settings
from rbacadmin.core.logging import configure_logging, get_logger


@click.group()
@click.version_option(version=__version__, prog_name="rbacadmin")
def cli() -> None:
    """RBAC Admin - group administration for role-based access control."""


@cli.command()
@click.option("--host", type=str, default=None, help="Host to bind to (overrides config)")
@click.option("--port", type=int, default=None, help="Port to bind to (overrides config)")
@click.option(
    "--workers",
    type=int,
    default=None,
    help="Number of worker processes (overrides config)",
)
@click.option(
    "--reload/--no-reload",
    default=None,
    help="Enable auto-reload (defaults to on in development)",
)
def serve(host: str | None, port: int | None, workers: int | None, reload: bool | None) -> None:
    """Start the RBAC Admin server."""
    import uvicorn

    settings = get_settings()

    bind_host = host or settings.host
    bind_port = port or settings.port
    bind_workers = workers or settings.workers

    if reload is None:
        reload = settings.is_development

    if bind_workers > 1 and settings.is_sqlite:
        raise click.BadParameter(
            "SQLite does not support multiple worker processes.",
            param_hint="--workers",
        )

    configure_logging(settings)

    logger = get_logger(__name__)
    logger.info(
        "Starting RBAC Admin server",
        host=bind_host,
        port=bind_port,
        workers=bind_workers,
        reload=reload,
        environment=settings.environment,
    )

    uvicorn.run(
        "rbacadmin.infrastructure.api.app:app",
        host=bind_host,
        port=bind_port,
        workers=1 if reload else bind_workers,
        reload=reload,
        log_level=settings.log_level.lower(),
        access_log=True,
    )


@cli.command()
@click.option("--force", is_flag=True, help="Skip confirmation prompt")
def init_db(force: bool) -> None:
    """Create all database tables.

    Intended for development; production schemas are managed separately.
    """
    from rbacadmin.infrastructure.persistence.database import get_db_manager

    settings = get_settings()
    configure_logging(settings)

    if settings.is_production and not force:
        click.echo(
            "ERROR: Running in production mode. Pass --force to create tables anyway.",
            err=True,
        )
        raise SystemExit(1)

    if not force:
        click.confirm(
            "This will create all database tables. Continue?",
            abort=True,
            default=False,
        )

    async def initialize() -> None:
        # Models must be imported so they are registered with Base.metadata
        import rbacadmin.infrastructure.persistence.models  # noqa: F401

        db = get_db_manager()
        try:
            await db.create_tables()
            click.echo("Database initialized successfully.")
        finally:
            await db.disconnect()

    asyncio.run(initialize())


@cli.command()
def info() -> None:
    """Display RBAC Admin configuration."""
    settings = get_settings()

    click.echo(f"""
{settings.app_name} v{settings.app_version}
{'=' * 40}

Configuration:
  Environment:  {settings.environment}
  Debug:        {settings.debug}
  API Prefix:   {settings.api_prefix}

Server:
  Host:         {settings.host}
  Port:         {settings.port}
  Workers:      {settings.workers}

Database:
  URL:          {settings.database_url}
  Echo:         {settings.db_echo}

Pagination:
  Default Size: {settings.default_page_size}
  Max Size:     {settings.max_page_size}

Logging:
  Level:        {settings.log_level}
  Format:       {settings.log_format}
""")


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
