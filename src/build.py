"""Static build — pre-renders every static post page to HTML files."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import typer

from src.config import get_settings
from src.logging_config import setup_logging
from src.pages import (
    PageRenderer,
    RenderOutcome,
    build_default_renderer,
    generate_static_params,
)

logger = logging.getLogger(__name__)

app = typer.Typer(no_args_is_help=True, help="Pre-render the static post pages.")

PAGES_SUBDIR = "ssg"


def page_path(out_dir: Path, identifier: str) -> Path:
    return out_dir / PAGES_SUBDIR / f"{identifier}.html"


async def prerender_site(renderer: PageRenderer, out_dir: Path) -> list[RenderOutcome]:
    """Render all static parameters concurrently and write the successful pages.

    Outcomes are returned in parameter order. Failed pages are logged and
    produce no file.
    """
    params = generate_static_params()
    logger.info(
        "prerender started",
        extra={"page_count": len(params), "base_url": renderer.base_url},
    )

    outcomes: list[RenderOutcome] = await asyncio.gather(
        *(renderer.try_render(param) for param in params)
    )

    for outcome in outcomes:
        if not outcome.ok:
            logger.error(
                "page skipped",
                extra={"identifier": outcome.parameter.id, "failure_kind": outcome.kind},
                exc_info=outcome.error,
            )
            continue
        path = page_path(out_dir, outcome.parameter.id)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(outcome.document.html, encoding="utf-8")
        logger.debug("page written", extra={"identifier": outcome.parameter.id, "path": str(path)})

    failed = sum(1 for outcome in outcomes if not outcome.ok)
    logger.info(
        "prerender complete",
        extra={"pages_written": len(outcomes) - failed, "pages_failed": failed},
    )
    return outcomes


@app.command()
def build(
    out_dir: Path | None = typer.Option(None, "--out-dir", help="Directory to write pages into."),
    base_url: str | None = typer.Option(None, "--base-url", help="Override the remote post endpoint."),
) -> None:
    """Fetch and render every static post page."""
    settings = get_settings()
    setup_logging(settings.log_level)

    if base_url:
        settings = settings.model_copy(update={"base_url": base_url})
    target = out_dir or Path(settings.output_dir)

    renderer = build_default_renderer(settings)
    outcomes = asyncio.run(prerender_site(renderer, target))

    failures = [outcome for outcome in outcomes if not outcome.ok]
    if failures:
        typer.echo(
            f"{len(failures)} page(s) failed: "
            + ", ".join(f"{f.parameter.id} ({f.kind})" for f in failures),
            err=True,
        )
        raise typer.Exit(code=1)
    typer.echo(f"wrote {len(outcomes)} page(s) to {target / PAGES_SUBDIR}")


@app.command("params")
def list_params() -> None:
    """Print the static route parameters, one per line."""
    for param in generate_static_params():
        typer.echo(param.id)


if __name__ == "__main__":
    app()
