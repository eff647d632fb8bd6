from typing import List, Optional

import typer

from asset_build.cdn.rewriter import CdnPrefixRewriter
from asset_build.compression.file_pipeline import build_file_pipeline
from asset_build.compression.models import AssetKind, CompressionOptions
from asset_build.config.settings import Settings
from asset_build.logging.logger import Log
from asset_build.tasks.models import PipelineResult

app = typer.Typer(help="Asset minification and CDN preparation build steps.")


def _report(result: PipelineResult) -> None:
    for output in result.outputs:
        typer.echo(output)
    if not result.success:
        raise typer.Exit(code=1)


@app.command()
def compress(
    files: List[str] = typer.Argument(..., help="Script or stylesheet files to compress."),
    type_: str = typer.Option(..., "--type", "-t", help="Asset kind: js or css."),
    minify_only: bool = typer.Option(
        False, "--minify-only", help="Minify only, do not obfuscate local symbols."
    ),
    preserve_semicolons: bool = typer.Option(
        False, "--preserve-semicolons", help="Preserve all semicolons."
    ),
    disable_optimizations: bool = typer.Option(
        False, "--disable-optimizations", help="Disable all micro optimizations."
    ),
    charset: Optional[str] = typer.Option(
        None, "--charset", help="Character set of the input files."
    ),
    line_break: Optional[int] = typer.Option(
        None, "--line-break", help="Insert a line break after the given column."
    ),
    show_warnings: Optional[bool] = typer.Option(
        None,
        "--show-warnings/--hide-warnings",
        help="Ask the compressor for verbose warnings (default: SHOW_WARNINGS).",
    ),
) -> None:
    """Compress each file to its -min counterpart and print the produced paths."""
    try:
        settings = Settings()
        Log.configure(settings.log_level)
        options = CompressionOptions(
            kind=AssetKind.parse(type_),
            minify_only=minify_only,
            preserve_semicolons=preserve_semicolons,
            disable_optimizations=disable_optimizations,
            charset=charset,
            line_break=line_break,
            verbose=settings.show_warnings if show_warnings is None else show_warnings,
        )
        pipeline = build_file_pipeline(settings, options)
    except ValueError as e:
        typer.echo(f"[!] Configuration error: {e}", err=True)
        raise typer.Exit(code=2)

    _report(pipeline.execute(files))


@app.command()
def cdn(
    files: List[str] = typer.Argument(..., help="Files to rewrite in place."),
    host: Optional[str] = typer.Option(
        None, "--host", help="Delivery-network host prefix (default: CDN_HOST)."
    ),
) -> None:
    """Prefix asset-loader URLs with the CDN host and print the processed paths."""
    try:
        settings = Settings()
        Log.configure(settings.log_level)
        rewriter = CdnPrefixRewriter(host or settings.cdn_host)
    except ValueError as e:
        typer.echo(f"[!] Configuration error: {e}", err=True)
        raise typer.Exit(code=2)

    _report(rewriter.execute(files))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
