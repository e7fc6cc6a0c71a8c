"""Rich console output helpers for the CLI.

Path strings go to stdout unstyled so they can be piped; everything else
is decoration printed through the shared console.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from axisthin.core.session import RenderState

console = Console()
err_console = Console(stderr=True)

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]axisthin[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_path(label: str | None, path_str: str) -> None:
    """Print a path string, optionally preceded by a label.

    Path data is wrapped in Text so that brackets and other markup-like
    characters are printed as-is.
    """
    if label:
        console.print(f"  [dim]{label}[/dim]")
    console.print(Text(path_str or "(empty)"), soft_wrap=True)


def print_render_state(state: RenderState, thin_percent: float, erode_percent: float) -> None:
    """Print the outcome of a thinning session.

    Args:
        state: Rendered state
        thin_percent: Thinning slider value
        erode_percent: Erosion slider value
    """
    if state.view_box:
        console.print(f"  view box {state.view_box}")
    console.print(
        f"  thinning {thin_percent:g}% {SYM_DOT} erosion {erode_percent:g}% "
        f"{SYM_DOT} erosion radius {state.erosion_radius:.4g}"
    )
    print_path("outline", state.outline)
    print_path("thinned", state.thinned)


def print_forest_info(
    source: str,
    roots: int,
    nodes: int,
    edges: int,
    max_radius: float,
    erosion_radius: float,
) -> None:
    """Print a summary table of a transform forest."""
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="dim")
    table.add_column()
    table.add_row("Source", Text(source))
    table.add_row("Trees", str(roots))
    table.add_row("Nodes", str(nodes))
    table.add_row("Edges", str(edges))
    table.add_row("Max radius", f"{max_radius:.6g}")
    table.add_row("Erosion radius", f"{erosion_radius:.6g}")
    console.print(table)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    err_console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        err_console.print(f"  {details}")
