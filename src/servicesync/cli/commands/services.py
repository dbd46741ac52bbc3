from __future__ import annotations

import json

import typer

from ...infra.settings import settings
from ...usecases import removed_services as _uc_removed_services

app = typer.Typer(name="services", help="Checks between the legacy services document and the services folder")


@app.command("check-removed")
def check_removed(
    services_dir: str = typer.Option(settings.services_dir, "--services-dir", help="Folder with one YAML file per service"),
    json_file: str = typer.Option(settings.services_json, "--json-file", help="Legacy services JSON document"),
    extension: str = typer.Option(settings.file_extension, "--extension", help="Extension of the service files"),
    collection_key: str = typer.Option(settings.collection_key, "--collection-key", help="Key of the services array in the JSON document"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Only report removed services, write nothing"),
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
):
    """Rewrite service files that exist only in the legacy JSON document.

    Every service in the legacy document whose normalized id has no file in
    the services folder gets its file regenerated from the legacy record.
    Failures are logged; the command always exits 0.

    Examples:
        servicesync services check-removed --services-dir services --json-file assets/services.json
        servicesync services check-removed --dry-run --json
    """
    report = _uc_removed_services.check_removed_services(
        services_dir,
        json_file,
        extension=extension,
        collection_key=collection_key,
        dry_run=dry_run,
    )

    if json_output:
        typer.echo(json.dumps({"status": "ok" if report.ok else "error", "report": report.to_dict()}, indent=2))
        return

    if not report.missing:
        if report.error:
            typer.echo(f"Error while checking services: {report.error}", err=True)
        else:
            typer.echo("No removed services found.")
        return

    typer.echo(f"Removed services: {', '.join(report.missing)}")
    if report.dry_run:
        typer.echo("Dry run: no files written.")
        return
    for path in report.written:
        typer.echo(f"  Rewrote: {path}")
    if report.error:
        typer.echo(f"Error while rewriting files: {report.error}", err=True)
