import os
from datetime import datetime
from pathlib import Path
from typing import Any

import structlog
import typer
from dotenv import load_dotenv
from pydantic import ValidationError

from .core.access import article_url, include_access_urls
from .core.config import get_config, set_test_mode
from .core.models import BibliographicRecord
from .format.rfc1807 import RFC1807_FORMAT, serialize
from .io_.load import find_record_files, load_record
from .utils.log import get_logger, setup_logging

# Load environment variables from .env file
load_dotenv()

# Global state for logging configuration
_log_state: dict[str, Any] = {
    "session_id": datetime.now().strftime("%Y%m%d_%H%M%S"),
    "log_file": None,
    "logger": None,
}

app = typer.Typer()


@app.callback()
def callback(
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress console log output (logs still written to file)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose (DEBUG) logging"),
    test: bool = typer.Option(
        False, "--test", help="Use test environment (separate log and output directories)"
    ),
) -> None:
    """Convert bibliographic records to RFC 1807 metadata for OAI-PMH harvesting."""
    if test:
        set_test_mode()

    log_level = "DEBUG" if verbose else os.getenv("LOG_LEVEL", "INFO")

    _log_state["log_file"] = setup_logging(
        session_id=_log_state["session_id"],
        log_level=log_level,
        console_output=not quiet,
        log_dir=get_config().log_dir,
    )
    _log_state["logger"] = get_logger(__name__)
    _log_state["logger"].info(
        "application_started",
        session_id=_log_state["session_id"],
        log_file=str(_log_state["log_file"]),
        test_mode=test,
        environment=get_config().mode,
    )


def _get_logger() -> structlog.BoundLogger | Any:
    """Get the application logger."""
    if _log_state["logger"] is None:
        _log_state["log_file"] = setup_logging(
            session_id=_log_state["session_id"], log_dir=get_config().log_dir
        )
        _log_state["logger"] = get_logger(__name__)
    return _log_state["logger"]


class _LogProxy:
    """Proxy class that forwards all attribute access to the lazily-initialized logger."""

    def __getattr__(self, name: str) -> Any:
        return getattr(_get_logger(), name)


log = _LogProxy()


def _render(record: BibliographicRecord, base_url: str | None, subscribed: bool) -> str:
    url = article_url(base_url or get_config().base_url, record.journal, record.article)
    return serialize(record, url, include_access_urls(record.journal, subscribed))


@app.command()
def convert(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Record JSON file"),
    out: Path | None = typer.Option(None, "--out", "-o", help="Write XML here instead of stdout"),
    base_url: str | None = typer.Option(
        None, "--base-url", help="Journal site base URL (default: OAI_BASE_URL)"
    ),
    subscribed: bool = typer.Option(
        False, "--subscribed", help="Requesting user holds access to the article"
    ),
) -> None:
    """Convert one JSON record to an RFC 1807 document."""
    log.info("convert_started", path=str(path))
    try:
        xml = _render(load_record(path), base_url, subscribed)
    except (ValueError, ValidationError) as e:
        log.error("convert_failed", path=str(path), error=str(e))
        typer.echo(f"Failed to convert {path}: {e}", err=True)
        raise typer.Exit(code=1) from e

    if out is None:
        typer.echo(xml, nl=False)
    else:
        try:
            out.parent.mkdir(parents=True, exist_ok=True)
            out.write_text(xml, encoding="utf-8")
        except OSError as e:
            log.error("output_write_failed", path=str(path), out=str(out), error=str(e))
            typer.echo(f"Failed to write {out}: {e}", err=True)
            raise typer.Exit(code=1) from e
        typer.echo(f"Wrote {out}")
    log.info("convert_completed", path=str(path), out=str(out) if out else "stdout")


@app.command()
def convert_dir(
    directory: Path = typer.Argument(
        ..., exists=True, file_okay=False, help="Directory of record JSON files"
    ),
    out_dir: Path | None = typer.Option(
        None, "--out-dir", help="Output directory (default: configured output_dir)"
    ),
    base_url: str | None = typer.Option(
        None, "--base-url", help="Journal site base URL (default: OAI_BASE_URL)"
    ),
    subscribed: bool = typer.Option(
        False, "--subscribed", help="Requesting user holds access to every article"
    ),
) -> None:
    """Convert every JSON record in a directory, one XML file per record."""
    if out_dir is None:
        get_config().ensure_directories()
    target = out_dir or get_config().output_dir
    try:
        target.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        log.error("output_dir_unusable", out_dir=str(target), error=str(e))
        typer.echo(f"Cannot use output directory {target}: {e}", err=True)
        raise typer.Exit(code=1) from e
    log.info("convert_dir_started", directory=str(directory), out_dir=str(target))

    converted = 0
    failed = 0
    for path in find_record_files(directory):
        try:
            xml = _render(load_record(path), base_url, subscribed)
        except (ValueError, ValidationError) as e:
            log.error("record_conversion_failed", path=str(path), error=str(e))
            typer.echo(f"Failed: {path.name}: {e}", err=True)
            failed += 1
            continue
        out = target / f"{path.stem}.xml"
        try:
            out.write_text(xml, encoding="utf-8")
        except OSError as e:
            log.error("output_write_failed", path=str(path), out=str(out), error=str(e))
            typer.echo(f"Failed: {path.name}: {e}", err=True)
            failed += 1
            continue
        converted += 1

    log.info("convert_dir_completed", converted=converted, failed=failed, out_dir=str(target))
    typer.echo(f"Converted {converted} record(s), {failed} failed. Output: {target}")
    if failed:
        raise typer.Exit(code=1)


@app.command()
def formats() -> None:
    """Show the metadata format descriptor served to harvesters."""
    typer.echo(f"metadataPrefix: {RFC1807_FORMAT.prefix}")
    typer.echo(f"schema: {RFC1807_FORMAT.schema}")
    typer.echo(f"metadataNamespace: {RFC1807_FORMAT.namespace}")
