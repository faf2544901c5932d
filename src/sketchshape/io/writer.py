"""Writing debug overlays next to their source images."""

from pathlib import Path

DEBUG_SUFFIX = "-debug"


def get_debug_path(image_path: Path) -> Path:
    """Generate the default overlay path for an input image.

    Args:
        image_path: Path to the source image

    Returns:
        Path with "-debug" appended to the stem and a .png extension

    Examples:
        >>> get_debug_path(Path("sketches/circle.jpg"))
        PosixPath('sketches/circle-debug.png')
    """
    return image_path.with_name(f"{image_path.stem}{DEBUG_SUFFIX}.png")


def write_debug_image(data: bytes, output_path: Path) -> Path:
    """Write encoded overlay bytes to disk, creating parent directories.

    Args:
        data: Encoded image from a debug renderer
        output_path: Destination file

    Returns:
        The path written
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(data)
    return output_path
