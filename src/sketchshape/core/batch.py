"""Parallel batch classification of image files.

This module classifies many sketches at once with ProcessPoolExecutor. Each
worker runs the full pipeline on its own image with its own scratch buffers.

Key components:
- classify_image: Top-level picklable function for parallel execution
- BatchClassifier: Orchestrates a batch run and collects statistics
"""

import time
import traceback
from collections.abc import Callable
from concurrent.futures import ProcessPoolExecutor, as_completed
from pathlib import Path
from typing import Any

from sketchshape.config import DetectorSettings
from sketchshape.core.detector import ShapeDetector
from sketchshape.domain import ClassificationResult
from sketchshape.exceptions import ProcessingCancelledError
from sketchshape.io import get_debug_path, read_image, write_debug_image
from sketchshape.utils import BatchLogger, BatchStats, configure_logging


def classify_image(image_path: str, settings_dict: dict[str, Any]) -> dict[str, Any]:
    """Classify a single image file.

    Top-level function designed to be picklable for use with ProcessPoolExecutor.

    Args:
        image_path: Path to the image file
        settings_dict: Serialized detector settings

    Returns:
        Dictionary containing either:
        - Success: {"result": result_dict, "debug_image": bytes | None, "duration_ms": float}
        - Error: {"error": str, "image": str, "traceback": str, "duration_ms": float}
    """
    start_time = time.time()

    try:
        settings = DetectorSettings.model_validate(settings_dict)
        buffer = read_image(Path(image_path))
        result = ShapeDetector(settings).detect(buffer)

        duration_ms = (time.time() - start_time) * 1000
        return {
            "result": result.to_dict(),
            "debug_image": result.debug_image,
            "duration_ms": duration_ms,
        }

    except Exception as e:
        duration_ms = (time.time() - start_time) * 1000
        return {
            "error": str(e),
            "image": image_path,
            "traceback": traceback.format_exc(),
            "duration_ms": duration_ms,
        }


class BatchClassifier:
    """Orchestrates parallel classification of many image files.

    Example:
        classifier = BatchClassifier(DetectorSettings())
        results, stats = classifier.classify([Path("a.png"), Path("b.png")])
    """

    def __init__(self, settings: DetectorSettings) -> None:
        """Initialize the batch classifier.

        Args:
            settings: Detector, processing and logging settings
        """
        self.settings = settings
        self.logger = configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
        )

    def classify(
        self,
        image_paths: list[Path],
        max_workers: int | None = None,
        progress_callback: Callable[[int, int, str, bool], None] | None = None,
    ) -> tuple[dict[Path, ClassificationResult], BatchStats]:
        """Classify image files in parallel.

        Args:
            image_paths: Images to classify
            max_workers: Maximum worker processes (None = configured default)
            progress_callback: Optional callback(completed, total, image, success)
                for progress updates

        Returns:
            Tuple of (results keyed by path, batch statistics). Images that
            failed are missing from the results and recorded in the stats.

        Raises:
            ProcessingCancelledError: If the run is interrupted with Ctrl+C
        """
        batch_logger = BatchLogger(self.logger)
        stats = batch_logger.stats
        stats.start_time = time.time()

        if max_workers is None:
            max_workers = self.settings.processing.max_workers

        settings_dict = self.settings.model_dump(mode="json")
        results: dict[Path, ClassificationResult] = {}
        total = len(image_paths)
        completed = 0

        self.logger.info(
            "Starting batch classification",
            image_count=total,
            max_workers=max_workers,
        )

        pending_futures: dict = {}
        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            for path in image_paths:
                batch_logger.log_image_start(str(path))
                future = executor.submit(classify_image, str(path), settings_dict)
                pending_futures[future] = path

            try:
                for future in as_completed(pending_futures):
                    path = pending_futures.pop(future)
                    success = False

                    try:
                        outcome = future.result()

                        if "error" in outcome:
                            batch_logger.log_image_error(
                                image=outcome["image"],
                                error=Exception(outcome["error"]),
                                traceback=outcome.get("traceback"),
                            )
                        else:
                            success = True
                            result = ClassificationResult.from_dict(outcome["result"])
                            results[path] = result
                            batch_logger.log_image_complete(
                                image=str(path),
                                shape=result.shape.value,
                                confidence=result.confidence,
                                duration_ms=outcome.get("duration_ms", 0.0),
                            )
                            if outcome.get("debug_image") is not None:
                                self._save_debug_image(path, outcome["debug_image"])

                    except Exception as e:
                        # Executor-level error
                        batch_logger.log_image_error(
                            image=str(path),
                            error=e,
                            traceback=traceback.format_exc(),
                        )

                    completed += 1
                    if progress_callback is not None:
                        progress_callback(completed, total, str(path), success)

            except KeyboardInterrupt:
                self.logger.info("Cancellation requested by user")
                stats.was_cancelled = True
                stats.cancelled_count = len(pending_futures)
                executor.shutdown(wait=True, cancel_futures=True)
                raise ProcessingCancelledError(
                    processed_count=stats.processed_count,
                    pending_count=stats.cancelled_count,
                ) from None

        stats.end_time = time.time()
        self.logger.info(
            "Batch classification complete",
            processed=stats.processed_count,
            errors=stats.error_count,
            shapes=dict(stats.shape_counts),
            duration_seconds=round(stats.duration_seconds, 2),
        )

        return results, stats

    def _save_debug_image(self, image_path: Path, data: bytes) -> None:
        """Write a worker's debug overlay next to its source image."""
        output = write_debug_image(data, get_debug_path(image_path))
        self.logger.debug("Debug overlay written", image=str(image_path), output=str(output))
