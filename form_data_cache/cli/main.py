from __future__ import annotations

from pathlib import Path

import typer
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from ..core.factory import FormDataFactory
from ..core.logging_utils import configure_logging
from ..core.types import FORM_FILE_NAMES, FormId, LoadStatus, form_key

app = typer.Typer()


@app.callback()
def main(log_file: Path = None) -> None:
    """Inspect the form templates served by the form data cache."""
    if log_file is not None:
        configure_logging(log_file)


def _factory(app_id: str = None) -> FormDataFactory:
    if app_id is not None:
        FormDataFactory.configure(app_id=app_id)
    return FormDataFactory.get_instance()


def _parse_form_id(value: str) -> FormId:
    try:
        return FormId(value.upper())
    except ValueError:
        known = ", ".join(f.value for f in FormId)
        typer.echo(f"❌ Unknown form id '{value}'. Known ids: {known}", err=True)
        raise typer.Exit(2)


@app.command("forms:list")
def forms_list() -> None:
    """List every known form with its cache key and file name."""
    for form_id in FormId:
        typer.echo(f"{form_id.value:<10} {form_key(form_id):<10} {FORM_FILE_NAMES[form_id]}")


@app.command("forms:check")
def forms_check(app_id: str = None) -> None:
    """Load the forms and report which ones could not be read."""
    report = _factory(app_id).load_report
    typer.echo(f"📁 Application: {report.app_id}")
    typer.echo(f"📁 Base path: {report.base_path or '(not found)'}")
    for result in report.results.values():
        if result.status is LoadStatus.LOADED:
            typer.echo(f"  ✅ {result.form_id.value} ({result.length} chars)")
        else:
            typer.echo(f"  ❌ {result.form_id.value} {result.status.value}: {result.error}")

    typer.echo(f"Loaded {len(report.loaded)}/{len(report.results)} forms")
    if not report.ok:
        raise typer.Exit(1)


@app.command("forms:show")
def forms_show(form_id: str, app_id: str = None) -> None:
    """Print the raw content of one form."""
    parsed = _parse_form_id(form_id)
    factory = _factory(app_id)
    if not factory.has_form_data(parsed):
        result = factory.load_report.result_for(parsed)
        reason = result.error if result else "not loaded"
        typer.echo(f"❌ {parsed.value} is not available: {reason}", err=True)
        raise typer.Exit(1)
    typer.echo(factory.get_form_data(parsed))


if __name__ == "__main__":
    app()
