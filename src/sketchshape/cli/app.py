"""CLI application entry point for sketchshape.

This module provides the main CLI interface using Typer.
"""

import json
import os
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from sketchshape import __version__
from sketchshape.cli.output import (
    console,
    create_progress,
    print_batch_results,
    print_batch_summary,
    print_cancellation_summary,
    print_debug_image,
    print_error,
    print_header,
    print_image_info,
    print_processing_info,
    print_result,
    print_step,
)
from sketchshape.config import (
    BinarizeConfig,
    ClassifierConfig,
    ContourConfig,
    DebugConfig,
    DetectorSettings,
    LoggingConfig,
    ProcessingConfig,
    TracerConfig,
)
from sketchshape.core import BatchClassifier, ShapeDetector
from sketchshape.exceptions import (
    ImageLoadError,
    ProcessingCancelledError,
    SketchShapeError,
)
from sketchshape.io import ImageReader, get_debug_path, write_debug_image
from sketchshape.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="sketchshape",
    help="Classify hand-drawn sketches as circles or triangles.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Sketchshape[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def classify(
    images: Annotated[
        list[Path],
        typer.Argument(
            help="Image files to classify (PNG, JPEG, ... any format Pillow reads)",
            show_default=False,
        ),
    ],
    threshold: Annotated[
        float,
        typer.Option(
            "--threshold",
            "-t",
            help="Gray level a pixel must exceed to count as ink (0-255)",
            min=0.0,
            max=255.0,
        ),
    ] = 5.0,
    invert: Annotated[
        bool,
        typer.Option(
            "--invert",
            help="Treat dark ink on a light background as foreground",
        ),
    ] = False,
    min_area: Annotated[
        float,
        typer.Option(
            "--min-area",
            help="Minimum contour area in square pixels",
            min=0.0,
        ),
    ] = 20.0,
    circularity: Annotated[
        float,
        typer.Option(
            "--circularity",
            help="Circularity a contour must exceed to be a circle (0-1)",
            min=0.0,
            max=0.99,
        ),
    ] = 0.6,
    triangle_solidity: Annotated[
        float,
        typer.Option(
            "--triangle-solidity",
            help="Solidity a contour must exceed to be a triangle (0-1)",
            min=0.0,
            max=1.0,
        ),
    ] = 0.85,
    triangle_tolerance: Annotated[
        float,
        typer.Option(
            "--triangle-tolerance",
            help="Simplification tolerance as a fraction of the perimeter",
            min=0.0,
            max=1.0,
        ),
    ] = 0.25,
    stroke_walk: Annotated[
        bool,
        typer.Option(
            "--stroke-walk",
            help="Walk whole strokes instead of their boundary pixels",
        ),
    ] = False,
    debug_image: Annotated[
        Path | None,
        typer.Option(
            "--debug-image",
            "-d",
            help="Write a debug overlay to this path (single image only)",
        ),
    ] = None,
    debug: Annotated[
        bool,
        typer.Option(
            "--debug",
            help="Write debug overlays next to each image ({name}-debug.png)",
        ),
    ] = False,
    as_json: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Print results as JSON",
        ),
    ] = False,
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            "-j",
            help="Number of parallel workers for several images (default: auto)",
            min=1,
        ),
    ] = None,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
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
    """Classify hand-drawn sketches as circle, triangle, or unknown.

    The dominant stroke of each image is traced, measured and scored with
    circularity, corner count and solidity. No learned model is involved.

    Example:
        sketchshape drawing.png --invert --debug-image overlay.png
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if debug_image is not None and len(images) > 1:
        print_error(
            "--debug-image takes a single image",
            details="Use --debug to write one overlay next to each image.",
        )
        raise typer.Exit(code=1)

    # Validate input files exist
    for image in images:
        if not image.is_file():
            print_error(
                f"Input file not found: {image}",
                details=f"The file '{image}' does not exist or is not a file.",
            )
            raise typer.Exit(code=1)

    try:
        settings = DetectorSettings(
            binarize=BinarizeConfig(threshold=threshold, invert=invert),
            tracer=TracerConfig(boundary_only=not stroke_walk),
            contour=ContourConfig(min_area=min_area),
            classifier=ClassifierConfig(
                circularity_threshold=circularity,
                triangle_min_solidity=triangle_solidity,
                triangle_tolerance=triangle_tolerance,
            ),
            debug=DebugConfig(enabled=debug or debug_image is not None),
            processing=ProcessingConfig(max_workers=workers),
            logging=LoggingConfig(
                log_file=log_file,
                log_level=log_level if not quiet else "WARNING",
            ),
        )
    except ValidationError as e:
        print_error(
            "Invalid settings",
            details="; ".join(
                f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
                for err in e.errors()
            ),
        )
        raise typer.Exit(code=1) from None

    show = not (quiet or as_json)
    if show:
        print_header(__version__)

    try:
        if len(images) == 1:
            _classify_single(images[0], settings, debug_image, as_json, show, verbose)
        else:
            _classify_batch(images, settings, as_json, show)

    except ImageLoadError as e:
        print_error(f"Could not load image: {e.reason}")
        raise typer.Exit(code=1)
    except ProcessingCancelledError as e:
        if show:
            print_cancellation_summary(processed=e.processed_count, cancelled=e.pending_count)
        raise typer.Exit(code=130) from None  # Standard Unix SIGINT exit code
    except SketchShapeError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def _classify_single(
    image_path: Path,
    settings: DetectorSettings,
    debug_image: Path | None,
    as_json: bool,
    show: bool,
    verbose: bool,
) -> None:
    """Classify one image in-process.

    Args:
        image_path: Image to classify
        settings: Detector settings
        debug_image: Explicit overlay path, if any
        as_json: Print the result as JSON
        show: Print rich progress output
        verbose: Show the full metrics table
    """
    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=not show,
    )

    if show:
        print_step("Loading image")

    reader = ImageReader(image_path)
    reader.load()
    try:
        buffer = reader.to_buffer()
        if show:
            print_image_info(str(image_path), reader.format, buffer.width, buffer.height)
    finally:
        reader.close()

    if show:
        print_step("Classifying")

    result = ShapeDetector(settings).detect(buffer)

    if as_json:
        console.print_json(json.dumps(result.to_dict()))
    elif show:
        print_result(result, verbose=verbose)
    else:
        console.print(f"{result.shape.value} {result.confidence:.3f}")

    if result.debug_image is not None:
        output = write_debug_image(result.debug_image, debug_image or get_debug_path(image_path))
        if show:
            print_debug_image(str(output))


def _classify_batch(
    images: list[Path],
    settings: DetectorSettings,
    as_json: bool,
    show: bool,
) -> None:
    """Classify several images with worker processes.

    Args:
        images: Images to classify
        settings: Detector, processing and logging settings
        as_json: Print the results as JSON
        show: Print rich progress output
    """
    classifier = BatchClassifier(settings)
    workers = settings.processing.max_workers

    if show:
        actual_workers = workers if workers else os.cpu_count() or 1
        print_step("Classifying")
        print_processing_info(len(images), actual_workers, is_auto=(workers is None))

        with create_progress() as progress:
            task_id = progress.add_task(f"Classifying {len(images)} images", total=len(images))

            def update_progress(completed: int, *_: object) -> None:
                progress.update(task_id, completed=completed)

            results, stats = classifier.classify(images, progress_callback=update_progress)
    else:
        results, stats = classifier.classify(images)

    by_name = {str(path): result for path, result in results.items()}

    if as_json:
        console.print_json(
            json.dumps({name: result.to_dict() for name, result in sorted(by_name.items())})
        )
    elif show:
        print_step("Results")
        print_batch_results(by_name)
        print_batch_summary(stats)
    else:
        for name, result in sorted(by_name.items()):
            console.print(f"{name} {result.shape.value} {result.confidence:.3f}")

    if stats.error_count > 0:
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
