"""Main CLI entry point for the mobile-pack command.

This module provides the Typer application that serves as the entry point
for the mobile-pack command-line tool. Export commands print the JSON
document read by the mobile application on stdout; status and content
commands edit the options file used by later exports.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer

from src.cli.config import ConfigLoader
from src.cli.errors import CLIError
from src.cli.models import AppConfig, ExitCode
from src.cli.output import OutputHandler
from src.content_store.api_wrapper import APIWrapper
from src.content_store.auth import Authenticator
from src.content_store.errors import (
    APIAccessError,
    APIUnreachableError,
    InvalidCredentialsError,
    MobilePackError,
)
from src.content_store.file_store import FileContentStore
from src.content_store.wordpress_store import WordPressContentStore
from src.options.options_store import OptionsStore
from src.options.status_editor import StatusEditor
from src.page_export.export_service import ExportService

__version__ = "0.1.0"

app = typer.Typer(
    name="mobile-pack",
    help="""Export WordPress pages for the mobile application.

QUICK START:
  mobile-pack export-pages                      # Page list as JSON
  mobile-pack export-page 12                    # One page with content
  mobile-pack set-status 12 inactive            # Hide a page from the app
  mobile-pack set-content 12 "<p>Short</p>"     # Mobile-only content
  mobile-pack --source pages.yaml export-pages  # Export from a page dump""",
    add_completion=False,
    rich_markup_mode=None,
    no_args_is_help=True,
)

# Module logger
logger = logging.getLogger(__name__)


def _configure_logging(verbosity: int, logdir: Optional[str] = None) -> None:
    """Configure logging based on verbosity level.

    Configures only the 'src' namespace logger to avoid affecting third-party
    libraries. The root logger is left unchanged.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG)
        logdir: Optional directory for log files (creates timestamped log file)
    """
    if verbosity == 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    app_logger = logging.getLogger("src")
    app_logger.setLevel(level)
    # Repeated invocations in one process must not stack handlers
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)

    date_format = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter("%(asctime)s [%(levelname)8s] %(message)s", datefmt=date_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    app_logger.addHandler(console_handler)

    if logdir:
        log_path = Path(logdir)
        log_path.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_path / f"mobile-pack_{timestamp}.log"

        file_formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt=date_format
        )
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(file_formatter)
        app_logger.addHandler(file_handler)

        logger.info(f"Logging to file: {log_file}")


def _exit_code_for(error: Exception) -> ExitCode:
    """Map a failure to the process exit code."""
    if isinstance(error, InvalidCredentialsError):
        return ExitCode.AUTH_ERROR
    if isinstance(error, (APIUnreachableError, APIAccessError)):
        return ExitCode.NETWORK_ERROR
    return ExitCode.GENERAL_ERROR


def _build_content_store(config: AppConfig):
    """Select the page source: a YAML dump if configured, else the live site."""
    if config.source_path:
        logger.debug(f"Reading pages from {config.source_path}")
        return FileContentStore(config.source_path)

    api = APIWrapper(
        Authenticator(url=config.site_url),
        timeout=config.timeout,
        per_page=config.per_page,
    )
    return WordPressContentStore(api, orderby=config.orderby)


def _build_service(config: AppConfig) -> ExportService:
    return ExportService(
        content_store=_build_content_store(config),
        options_store=OptionsStore(config.options_path),
        post_type=config.post_type,
    )


def _load_state(ctx: typer.Context) -> dict:
    """Return the shared state, loading the configuration on first use."""
    state = ctx.ensure_object(dict)
    output = state['output']

    if 'config' not in state:
        try:
            config = ConfigLoader.load(state.get('config_path'))
        except CLIError as e:
            logger.error(f"Failed to load configuration: {e}")
            output.error(str(e))
            raise typer.Exit(ExitCode.GENERAL_ERROR)

        if state.get('source_path'):
            config.source_path = state['source_path']
        state['config'] = config

    return state


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"mobile-pack version {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Configuration file (default: .mobile-pack/config.yaml)",
        metavar="PATH",
    ),
    source_path: Optional[str] = typer.Option(
        None,
        "--source",
        help="YAML page dump to export instead of the WordPress site",
        metavar="PATH",
    ),
    logdir: Optional[str] = typer.Option(
        None,
        "--logdir",
        help="Directory for log files (creates timestamped log file)",
    ),
    verbosity: int = typer.Option(
        0,
        "--verbosity",
        "-v",
        help="Verbosity level: 0=summary, 1=info, 2=debug",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Export WordPress pages for the mobile application."""
    _configure_logging(verbosity, logdir)
    ctx.obj = {
        'config_path': config_path,
        'source_path': source_path,
        'output': OutputHandler(verbosity=verbosity, no_color=no_color),
    }


@app.command("export-page")
def export_page_command(
    ctx: typer.Context,
    page_id: str = typer.Argument(..., help="Id of the page to export"),
) -> None:
    """Print the JSON document for one page.

    Unknown, hidden or unpublished pages print {"page": {}}; a malformed id
    prints {"error": "Invalid post id"}.
    """
    state = _load_state(ctx)
    output = state['output']

    try:
        service = _build_service(state['config'])
        with output.spinner(f"Fetching page {page_id}..."):
            document = service.export_page(page_id)
    except MobilePackError as e:
        logger.error(f"Page export failed: {e}")
        output.error(f"Page export failed: {e}")
        raise typer.Exit(_exit_code_for(e))

    typer.echo(document)


@app.command("export-pages")
def export_pages_command(
    ctx: typer.Context,
    table: bool = typer.Option(
        False,
        "--table",
        help="Also display the exported tree as a table on stderr",
    ),
) -> None:
    """Print the JSON document listing all visible pages in tree order."""
    state = _load_state(ctx)
    output = state['output']

    try:
        service = _build_service(state['config'])
        with output.spinner("Fetching pages..."):
            data = service.export_pages_data()
    except MobilePackError as e:
        logger.error(f"Page list export failed: {e}")
        output.error(f"Page list export failed: {e}")
        raise typer.Exit(_exit_code_for(e))

    if table:
        output.print_page_table(data['pages'])
    output.info(f"Exported {len(data['pages'])} page(s)")

    typer.echo(service.to_json(data))


@app.command("set-status")
def set_status_command(
    ctx: typer.Context,
    item_id: str = typer.Argument(..., help="Page or category id"),
    status: str = typer.Argument(..., help="active or inactive"),
    item_type: str = typer.Option(
        "page",
        "--type",
        help="Item kind: page or category",
    ),
) -> None:
    """Activate or deactivate a page or category for the mobile app.

    Prints 1 on success and 0 on failure.
    """
    state = _load_state(ctx)
    output = state['output']

    editor = StatusEditor(OptionsStore(state['config'].options_path))
    saved = editor.save_status(item_id, status, item_type)

    typer.echo("1" if saved else "0")
    if not saved:
        output.error(f"Could not set {item_type} {item_id} to '{status}'")
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    output.success(f"{item_type.capitalize()} {item_id} is now {status}")


@app.command("set-content")
def set_content_command(
    ctx: typer.Context,
    page_id: str = typer.Argument(..., help="Page id"),
    content: Optional[str] = typer.Argument(None, help="Content shown in the app instead of the page body"),
    clear: bool = typer.Option(
        False,
        "--clear",
        help="Remove the mobile-only content of the page",
    ),
) -> None:
    """Set or clear the mobile-only content of a page.

    Prints 1 on success and 0 on failure.
    """
    state = _load_state(ctx)
    output = state['output']

    if not clear and content is None:
        output.error("Provide the content to store, or --clear to remove it")
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    editor = StatusEditor(OptionsStore(state['config'].options_path))
    if clear:
        saved = editor.clear_content(page_id)
    else:
        saved = editor.save_content(page_id, content)

    typer.echo("1" if saved else "0")
    if not saved:
        output.error(f"Could not update the content of page {page_id}")
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    output.success(f"Content of page {page_id} {'cleared' if clear else 'saved'}")


def main() -> None:
    """Main entry point for the CLI application.

    This function is called when the module is executed directly or
    when the console script is invoked.
    """
    app()


# Allow running as: python -m src.cli.main
if __name__ == "__main__":
    main()
