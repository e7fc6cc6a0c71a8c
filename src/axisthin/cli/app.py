"""CLI application entry point for axisthin.

This module provides the command-line interface using Typer.
"""

from pathlib import Path
from typing import Annotated, NoReturn

import typer
from pydantic import ValidationError

from axisthin import __version__
from axisthin.cli.output import (
    SYM_DOT,
    console,
    print_error,
    print_forest_info,
    print_header,
    print_path,
    print_render_state,
    print_step,
)
from axisthin.config import AxisThinSettings, LoggingConfig, ThinningConfig
from axisthin.core import (
    ThinningSession,
    erosion_radius,
    get_axis_paths,
    get_thinned_path,
    max_radius,
    percent_to_fraction,
    polygon_path_str,
)
from axisthin.exceptions import AxisThinError, FontLoadError
from axisthin.io import FontReader, load_forest
from axisthin.utils import configure_logging

app = typer.Typer(
    name="axisthin",
    help="Thin glyph and polygon outlines along their scale axis.",
    add_completion=False,
    no_args_is_help=True,
)

ThinPercent = Annotated[
    float,
    typer.Option("--percent", "-p", help="Thinning amount (0-100)", min=0.0, max=100.0),
]
ErodePercent = Annotated[
    float,
    typer.Option("--erode-percent", "-e", help="Erosion amount (0-100)", min=0.0, max=100.0),
]
ScaleFactor = Annotated[
    float,
    typer.Option("--scale", "-s", help="Scale-axis factor s (>= 1)", min=1.0),
]
Raw = Annotated[
    bool,
    typer.Option("--raw", help="Print only the thinned path string"),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]axisthin[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_options(
    ctx: typer.Context,
    log_file: Annotated[
        Path | None,
        typer.Option("--log-file", help="Write detailed logs to file"),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Logging level (DEBUG|INFO|WARNING|ERROR)"),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Minimal console output"),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Compare scale-axis thinning with morphological erosion."""
    try:
        logging_config = LoggingConfig(log_file=log_file, log_level=log_level)
    except ValidationError as e:
        raise typer.BadParameter(
            f"unknown level '{log_level}'", param_hint="--log-level"
        ) from e
    configure_logging(
        log_file=logging_config.log_file,
        console_level=logging_config.log_level,
        file_level=logging_config.file_log_level,
        quiet=quiet,
    )
    ctx.obj = {"logging": logging_config, "quiet": quiet}


def _settings(ctx: typer.Context, percent: float, erode_percent: float, scale: float) -> AxisThinSettings:
    obj = ctx.obj or {}
    return AxisThinSettings(
        thinning=ThinningConfig(
            thin_percent=percent,
            erode_percent=erode_percent,
            scale_factor=scale,
        ),
        logging=obj.get("logging", LoggingConfig()),
    )


def _quiet(ctx: typer.Context) -> bool:
    return bool((ctx.obj or {}).get("quiet", False))


def _run_session(
    ctx: typer.Context,
    path_str: str,
    percent: float,
    erode_percent: float,
    scale: float,
    raw: bool,
) -> None:
    """Load an outline into a session and print the result."""
    quiet = _quiet(ctx) or raw
    session = ThinningSession(settings=_settings(ctx, percent, erode_percent, scale))

    if not quiet:
        print_step("Building transforms")

    session.on_shape_changed(path_str)
    session.on_erode_percent_changed(erode_percent)
    state = session.on_thin_percent_changed(percent)

    if raw:
        typer.echo(state.thinned)
        return

    if not quiet:
        console.print(f"  {len(session.sats)} loops {SYM_DOT} max radius {session.max_radius:.4g}")
        print_step("Thinning")
    print_render_state(state, percent, erode_percent)


def _guard(func_name: str, exc: Exception) -> NoReturn:
    """Report an error and exit with a non-zero status."""
    if isinstance(exc, FontLoadError):
        print_error(f"Could not load font: {exc.reason}")
    elif isinstance(exc, AxisThinError):
        print_error(str(exc))
    elif isinstance(exc, FileNotFoundError):
        print_error(str(exc))
    else:
        print_error(f"Unexpected error in {func_name}: {exc}")
    raise typer.Exit(code=1) from exc


@app.command()
def thin(
    ctx: typer.Context,
    tree_file: Annotated[
        Path,
        typer.Argument(help="Transform forest JSON file", show_default=False),
    ],
    percent: ThinPercent = 50.0,
    raw: Raw = False,
) -> None:
    """Print the thinned path of a transform forest read from JSON."""
    try:
        forest = load_forest(tree_file)
        path_str = get_thinned_path(forest, percent_to_fraction(percent))
    except Exception as e:  # noqa: BLE001
        _guard("thin", e)

    if raw or _quiet(ctx):
        typer.echo(path_str)
        return
    print_header(__version__)
    print_path(f"thinned at {percent:g}%", path_str)


@app.command()
def info(
    tree_file: Annotated[
        Path,
        typer.Argument(help="Transform forest JSON file", show_default=False),
    ],
    erode_percent: ErodePercent = 50.0,
) -> None:
    """Summarize a transform forest and its erosion radius."""
    try:
        forest = load_forest(tree_file)
        radius = max_radius(forest)
        eroded = erosion_radius(forest, percent_to_fraction(erode_percent))
    except Exception as e:  # noqa: BLE001
        _guard("info", e)

    print_forest_info(
        source=str(tree_file),
        roots=len(forest),
        nodes=sum(len(tree) for tree in forest),
        edges=sum(tree.edge_count() for tree in forest),
        max_radius=radius,
        erosion_radius=eroded,
    )


@app.command()
def axis(
    ctx: typer.Context,
    tree_file: Annotated[
        Path,
        typer.Argument(help="Transform forest JSON file", show_default=False),
    ],
    raw: Raw = False,
) -> None:
    """Print the axis curves of a transform forest, one path per line."""
    try:
        paths = get_axis_paths(load_forest(tree_file))
    except Exception as e:  # noqa: BLE001
        _guard("axis", e)

    if raw or _quiet(ctx):
        for path_str in paths:
            typer.echo(path_str)
        return
    print_header(__version__)
    console.print(f"  {len(paths)} axis curves")
    for path_str in paths:
        print_path(None, path_str)


@app.command()
def polygon(
    ctx: typer.Context,
    sides: Annotated[int, typer.Argument(help="Number of vertices", min=3)],
    radius: Annotated[
        float,
        typer.Option("--radius", "-r", help="Circumradius", min=0.0),
    ] = 75.0,
    percent: ThinPercent = 50.0,
    erode_percent: ErodePercent = 50.0,
    scale: ScaleFactor = 2.5,
    raw: Raw = False,
) -> None:
    """Thin a regular polygon."""
    try:
        path_str = polygon_path_str(sides, (0.0, 0.0), radius)
    except ValueError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if not (_quiet(ctx) or raw):
        print_header(__version__)
    try:
        _run_session(ctx, path_str, percent, erode_percent, scale, raw)
    except Exception as e:  # noqa: BLE001
        _guard("polygon", e)


@app.command()
def outline(
    ctx: typer.Context,
    path_str: Annotated[str, typer.Argument(help="Path description string", show_default=False)],
    percent: ThinPercent = 50.0,
    erode_percent: ErodePercent = 50.0,
    scale: ScaleFactor = 2.5,
    raw: Raw = False,
) -> None:
    """Thin an outline given as a path string."""
    if not (_quiet(ctx) or raw):
        print_header(__version__)
    try:
        _run_session(ctx, path_str, percent, erode_percent, scale, raw)
    except Exception as e:  # noqa: BLE001
        _guard("outline", e)


def _read_glyph(font_file: Path, char: str) -> tuple[str | None, str | None]:
    """Look up a character's glyph name and outline path string.

    Raises:
        FileNotFoundError: If the font file does not exist
        FontLoadError: If the font cannot be read
    """
    try:
        with FontReader(font_file) as reader:
            glyph_name = reader.glyph_name_for_char(char)
            path_str = reader.glyph_path_str(glyph_name) if glyph_name else None
    except FileNotFoundError:
        raise
    except Exception as e:
        raise FontLoadError(str(font_file), str(e)) from e
    return glyph_name, path_str


@app.command()
def glyph(
    ctx: typer.Context,
    font_file: Annotated[Path, typer.Argument(help="Path to TTF/OTF font", show_default=False)],
    char: Annotated[str, typer.Argument(help="Character to thin", show_default=False)],
    percent: ThinPercent = 50.0,
    erode_percent: ErodePercent = 50.0,
    scale: ScaleFactor = 2.5,
    raw: Raw = False,
) -> None:
    """Thin the glyph of a single character from a font."""
    if len(char) != 1:
        print_error(f"Expected a single character, got '{char}'")
        raise typer.Exit(code=1)

    try:
        glyph_name, path_str = _read_glyph(font_file, char)

        if not path_str:
            print_error(f"No outline for '{char}' in {font_file}")
            raise typer.Exit(code=1)

        if not (_quiet(ctx) or raw):
            print_header(__version__)
            console.print(f"  glyph [bold]{glyph_name}[/bold]")
        _run_session(ctx, path_str, percent, erode_percent, scale, raw)
    except typer.Exit:
        raise
    except Exception as e:  # noqa: BLE001
        _guard("glyph", e)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
