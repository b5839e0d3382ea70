from __future__ import annotations

import pathlib
from typing import List, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from cornerpath._color import _normalize_color, to_svg_color
from cornerpath._config import get_output_settings
from cornerpath.geometry import CORNER_ORDER, Corner, CornerRadii, Rect
from cornerpath.path import BezierPath
from cornerpath.segments import ArcTo, LineTo, MoveTo

console = Console()
app = typer.Typer(help="Build rounded-rectangle outlines and inspect their path segments.")

_RADIUS_HELP = (
    "Corner radius as CORNERS=RADIUS (e.g. top-left=10, tl+br=4, all=6) or a bare number for every corner. "
    "Repeatable; the first option naming a corner wins."
)


def _parse_radius_option(text: str) -> tuple[Corner, float]:
    if "=" in text:
        names, _, value = text.partition("=")
        try:
            corners = Corner.parse(names)
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--radius") from exc
    else:
        corners, value = Corner.ALL, text
    try:
        return corners, float(value)
    except ValueError as exc:
        raise typer.BadParameter(f"Radius {value!r} is not a number.", param_hint="--radius") from exc


def _build_path(x: float, y: float, width: float, height: float, radius: List[str] | None) -> BezierPath:
    entries = [_parse_radius_option(item) for item in radius or []]
    try:
        rect = Rect(x, y, width, height)
        radii = CornerRadii.from_entries(entries)
        return BezierPath.rounded_rect(rect, radii)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _next_available_path(path: pathlib.Path) -> pathlib.Path:
    """Return a non-conflicting path by appending ' (n)' before the suffix."""

    if not path.exists():
        return path

    parent = path.parent
    stem = path.stem
    suffix = path.suffix
    n = 1
    while True:
        candidate = parent / f"{stem} ({n}){suffix}"
        if not candidate.exists():
            return candidate
        n += 1


def _fmt_point(point: tuple[float, float]) -> str:
    return f"({point[0]:.4g}, {point[1]:.4g})"


def _segment_table(path: BezierPath) -> Table:
    table = Table(title="Segments")
    table.add_column("#", justify="right")
    table.add_column("Segment")
    table.add_column("Point / center")
    table.add_column("Radius", justify="right")
    table.add_column("Angles (deg)", justify="right")
    table.add_column("Direction")
    for idx, segment in enumerate(path.segments):
        if isinstance(segment, MoveTo):
            table.add_row(str(idx), "move", _fmt_point(segment.point), "", "", "")
        elif isinstance(segment, LineTo):
            table.add_row(str(idx), "line", _fmt_point(segment.point), "", "", "")
        elif isinstance(segment, ArcTo):
            table.add_row(
                str(idx),
                "arc",
                _fmt_point(segment.center),
                f"{segment.radius:.4g}",
                f"{segment.start_angle_deg:g} -> {segment.end_angle_deg:g}",
                "clockwise" if segment.clockwise else "counterclockwise",
            )
    return table


@app.command()
def segments(
    x: float = typer.Argument(..., help="Left edge of the rectangle."),
    y: float = typer.Argument(..., help="Top edge of the rectangle."),
    width: float = typer.Argument(..., help="Rectangle width (>= 0)."),
    height: float = typer.Argument(..., help="Rectangle height (>= 0)."),
    radius: Optional[List[str]] = typer.Option(None, "--radius", "-r", help=_RADIUS_HELP),
    segments_per_circle: Optional[int] = typer.Option(
        None,
        "--segments-per-circle",
        min=3,
        help="Arc flattening resolution for the sampled point count (defaults to cornerpath.cfg).",
    ),
) -> None:
    """
    Print the ordered path segments for a rounded rectangle.
    """

    path = _build_path(x, y, width, height, radius)
    console.print(_segment_table(path))

    effective = path.metadata["corner_radii"]
    summary = ", ".join(f"{corner.name.lower()}={effective[corner.name.lower()]:.4g}" for corner in CORNER_ORDER)
    console.print(f"[magenta]Effective radii: {summary}[/magenta]")
    console.print(f"[cyan]Outline length: {path.length():.6g}[/cyan]")

    resolution = get_output_settings().segments_per_circle if segments_per_circle is None else segments_per_circle
    sampled = path.sample(segments_per_circle=resolution)
    console.print(f"[cyan]Sampled points: {sampled.shape[0]} at {resolution} segments per circle[/cyan]")


@app.command()
def svg(
    x: float = typer.Argument(..., help="Left edge of the rectangle."),
    y: float = typer.Argument(..., help="Top edge of the rectangle."),
    width: float = typer.Argument(..., help="Rectangle width (>= 0)."),
    height: float = typer.Argument(..., help="Rectangle height (>= 0)."),
    radius: Optional[List[str]] = typer.Option(None, "--radius", "-r", help=_RADIUS_HELP),
    output: pathlib.Path = typer.Option(
        pathlib.Path("outline.svg"),
        "--output",
        "-o",
        help="Path to the SVG file that will be produced.",
    ),
    overwrite: bool = typer.Option(False, "--overwrite", help="Allow replacing an existing SVG."),
    stroke: str = typer.Option("black", "--stroke", help="Stroke colour (name, hex, or 'none')."),
    fill: str = typer.Option("none", "--fill", help="Fill colour (name, hex, or 'none')."),
    stroke_width: float = typer.Option(1.0, "--stroke-width", min=0.0, help="Stroke width in user units."),
    precision: Optional[int] = typer.Option(
        None, "--precision", min=0, max=12, help="Decimal places in path data (defaults to cornerpath.cfg)."
    ),
) -> None:
    """
    Write the rounded-rectangle outline to an SVG document.
    """

    path = _build_path(x, y, width, height, radius)
    settings = get_output_settings()
    digits = settings.svg_precision if precision is None else precision

    try:
        stroke_value = "none" if stroke == "none" else to_svg_color(_normalize_color(stroke))
        fill_value = "none" if fill == "none" else to_svg_color(_normalize_color(fill))
    except ValueError as exc:
        raise typer.BadParameter(f"Invalid colour: {exc}") from exc

    final_output = output
    if output.exists() and not overwrite:
        final_output = _next_available_path(output)
        console.print(f"[yellow]Output {output} exists; writing to {final_output} instead.[/yellow]")

    min_x, max_x, min_y, max_y = path.bounds
    margin = stroke_width
    view_box = " ".join(
        str(v) for v in (min_x - margin, min_y - margin, (max_x - min_x) + 2 * margin, (max_y - min_y) + 2 * margin)
    )
    document = (
        '<svg xmlns="http://www.w3.org/2000/svg" '
        f'viewBox="{view_box}">\n'
        f'  <path d="{path.to_svg_path_data(precision=digits)}" '
        f'fill="{fill_value}" stroke="{stroke_value}" stroke-width="{stroke_width:g}"/>\n'
        "</svg>\n"
    )

    final_output.parent.mkdir(parents=True, exist_ok=True)
    try:
        final_output.write_text(document)
    except OSError as exc:
        raise typer.BadParameter(f"Failed to write SVG: {exc}") from exc

    console.print(
        Panel(
            f"Wrote {len(path.segments)} segments to [green]{final_output}[/green].",
            title="Export complete",
            border_style="green",
        )
    )
