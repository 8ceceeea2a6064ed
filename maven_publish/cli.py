"""Command line entry point: ``maven-publish publish PATH``."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import typer
from pydantic import ValidationError

from .bootstrap import ServiceContainer
from .errors import PublishError
from .logging_config import configure_logging
from .secrets import registry
from .settings import Settings

log = logging.getLogger(__name__)

app = typer.Typer(
    name="maven-publish",
    help="Publish locally built Maven artifacts to a remote repository.",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def main() -> None:
    """Publish locally built Maven artifacts to a remote repository."""


def _build_settings(overrides: Dict[str, Any]) -> Settings:
    values = {key: value for key, value in overrides.items() if value is not None}
    return Settings(**values)


@app.command(name="publish", help="Deploy every POM family found under PATH.")
def publish_cmd(
    path: Optional[str] = typer.Argument(
        None, help="Local repository path searched for *.pom files."
    ),
    url: Optional[str] = typer.Option(None, "--url", help="Remote repository URL."),
    username: Optional[str] = typer.Option(None, "--username", help="Remote repository username."),
    password: Optional[str] = typer.Option(None, "--password", help="Remote repository password."),
    temp_dir: Optional[str] = typer.Option(
        None, "--temp-dir", help="Directory for the generated maven-settings.xml."
    ),
    maven: Optional[str] = typer.Option(None, "--maven", help="Maven executable."),
    retry_count: Optional[int] = typer.Option(
        None, "--retry-count", min=0, help="Deploy retries requested from Maven."
    ),
    no_cache: bool = typer.Option(False, "--no-cache", help="Skip cache restore and save."),
    dry_run: bool = typer.Option(False, "--dry-run", help="Log the deploy commands without running them."),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Root log level."),
) -> None:
    overrides: Dict[str, Any] = {
        "local_repository_path": path,
        "remote_repository_url": url,
        "remote_repository_username": username,
        "remote_repository_password": password,
        "temp_dir": temp_dir,
        "maven_executable": maven,
        "deploy_retry_count": retry_count,
        "log_level": log_level,
    }
    if no_cache:
        overrides["cache_enabled"] = False

    try:
        settings = _build_settings(overrides)
    except ValidationError as exc:
        registry.register(password)
        typer.echo(registry.redact(f"Invalid configuration: {exc}"), err=True)
        raise typer.Exit(code=1) from exc

    registry.register(settings.remote_repository_password, github_actions=settings.github_actions)
    configure_logging(settings.log_level, github_actions=settings.github_actions)

    container = ServiceContainer(settings)
    try:
        report = container.publisher.publish(dry_run=dry_run)
    except PublishError as exc:
        log.error("%s", exc)
        raise typer.Exit(code=1) from exc
    except Exception as exc:  # noqa: BLE001
        log.error("Publish failed: %s", exc)
        log.debug("Publish failure details", exc_info=True)
        raise typer.Exit(code=1) from exc
    finally:
        container.close()
    typer.echo(report.summary())
