"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress bars, tables, and formatted messages.
"""

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table
from rich.text import Text

from sketchshape.domain import ClassificationResult, ShapeLabel
from sketchshape.utils import BatchStats

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info

SHAPE_STYLES = {
    ShapeLabel.CIRCLE: "bold cyan",
    ShapeLabel.TRIANGLE: "bold magenta",
    ShapeLabel.UNKNOWN: "dim",
}


def create_progress() -> Progress:
    """Create a rich progress bar for batch classification.

    Returns:
        Configured Progress instance with bar and time elapsed.
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Sketchshape[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_image_info(image_path: str, image_format: str, width: int, height: int) -> None:
    """Print image information.

    Args:
        image_path: Path to the image file
        image_format: Format reported by Pillow
        width: Image width in pixels
        height: Image height in pixels
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(image_path)
    line.append(f" ({image_format})")
    console.print(line)
    console.print(f"  {width}x{height} px")


def _format_optional(value: float | None, digits: int = 3) -> str:
    return "n/a" if value is None else f"{value:.{digits}f}"


def print_result(result: ClassificationResult, verbose: bool = False) -> None:
    """Print a classification result.

    Args:
        result: Result to display
        verbose: Whether to show the full metrics table
    """
    style = SHAPE_STYLES[result.shape]
    console.print(
        f"\n[{style}]{result.shape.value}[/{style}] "
        f"{SYM_DOT} {result.confidence * 100:.1f}% confidence"
    )
    console.print(f"  {result.message}")

    metrics = result.metrics
    if metrics is None:
        return

    if not verbose:
        console.print(
            f"  circularity {metrics.circularity:.3f} {SYM_DOT} "
            f"solidity {_format_optional(metrics.solidity)} {SYM_DOT} "
            f"{metrics.corner_count} corners"
        )
        return

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_row("Area", f"{metrics.area:.1f} px²")
    table.add_row("Perimeter", f"{metrics.perimeter:.1f} px")
    table.add_row("Circularity", f"{metrics.circularity:.3f}")
    table.add_row("Solidity", _format_optional(metrics.solidity))
    table.add_row("Centroid", f"({metrics.centroid[0]:.1f}, {metrics.centroid[1]:.1f})")
    table.add_row("Corners", str(metrics.corner_count))
    console.print(table)


def print_debug_image(path: str) -> None:
    """Print where the debug overlay was written."""
    line = Text("  Debug overlay ")
    line.append(path, style="bold")
    console.print(line)


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_processing_info(images: int, workers: int, is_auto: bool = False) -> None:
    """Print batch configuration.

    Args:
        images: Number of images to classify
        workers: Number of parallel workers
        is_auto: Whether the count was auto-detected
    """
    auto_suffix = " (auto)" if is_auto else ""
    console.print(f"  {images} images {SYM_DOT} {workers} workers{auto_suffix} {SYM_DOT} Ctrl+C to cancel")


def print_batch_results(results: dict[str, ClassificationResult]) -> None:
    """Print one line per classified image.

    Args:
        results: Results keyed by image path
    """
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Image")
    table.add_column("Shape")
    table.add_column("Confidence", justify="right")
    table.add_column("Corners", justify="right")

    for image, result in sorted(results.items()):
        style = SHAPE_STYLES[result.shape]
        corners = str(result.metrics.corner_count) if result.metrics else "–"
        table.add_row(
            image,
            f"[{style}]{result.shape.value}[/{style}]",
            f"{result.confidence * 100:.1f}%",
            corners,
        )
    console.print(table)


def print_batch_summary(stats: BatchStats) -> None:
    """Print batch completion summary.

    Args:
        stats: Statistics of the finished run
    """
    time_str = _format_time(stats.duration_seconds)
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    shapes = f" {SYM_DOT} ".join(
        f"{stats.shape_counts.get(label.value, 0)} {label.value}" for label in ShapeLabel
    )
    console.print(f"  {shapes}")

    error_style = "red" if stats.error_count > 0 else "green"
    console.print(
        f"  {stats.processed_count} images {SYM_DOT} "
        f"[{error_style}]{stats.error_count} errors[/{error_style}]"
    )

    if stats.avg_time_ms is not None:
        timing_str = f"{stats.avg_time_ms:.1f}ms avg"
        if stats.min_time_ms is not None and stats.max_time_ms is not None:
            timing_str += f" ({stats.min_time_ms:.1f}–{stats.max_time_ms:.1f}ms range)"
        console.print(f"  {timing_str}")

    for image, error in stats.errors:
        console.print(f"  [red]{SYM_ERR}[/red] {image}: {error}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")


def print_cancellation_summary(processed: int, cancelled: int) -> None:
    """Print cancellation summary.

    Args:
        processed: Number of images classified before cancellation
        cancelled: Number of pending tasks that were cancelled
    """
    console.print(f"\n{SYM_DOT} [bold]Cancelled[/bold]")
    console.print(f"  {processed} images completed {SYM_DOT} {cancelled} tasks cancelled")
