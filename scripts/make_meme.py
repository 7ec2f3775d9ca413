#!/usr/bin/env python3
"""
Command-line front end for the meme editor.

Modes:
- list: List photos in the library
- compose: Pick a photo, caption it and save the meme to the output directory
- preview: Same as compose, but preview the meme in a window before saving
- caption: Caption the photo at its full resolution, without the editor screen
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from loguru import logger

from mememe.data import ImageLibrary
from mememe.editor import (
    Caption,
    EditorView,
    FileShareService,
    ImagePicker,
    ImageSource,
    MemeEditorController,
    PreviewShareSheet,
    ShareConfig,
    ViewConfig,
)
from mememe.meme import MemeComposer
from mememe.vision import CameraCapture, CaptureConfig


def setup_logging(verbose: bool) -> None:
    """Configure logging level."""
    logger.remove()
    level = "DEBUG" if verbose else "INFO"
    logger.add(sys.stderr, level=level, format="<level>{message}</level>")


def list_library(library_dir: str) -> None:
    """List photos available in the library."""
    library = ImageLibrary(library_dir)
    images = library.images

    print(f"\nPhotos ({len(images)}):")
    for i, image in enumerate(images):
        print(f"  {i}. {image.name} ({image.width}x{image.height})")
    print()


def parse_selection(value: str):
    """Library selections that look like integers are indices."""
    if value is None:
        return None
    digits = value[1:] if value.startswith('-') else value
    return int(value) if digits.isdigit() else value


def make_meme(args: argparse.Namespace, preview: bool) -> None:
    """Run the editor flow once: pick, caption, share."""
    picker = ImagePicker(
        library=ImageLibrary(args.library_dir),
        camera=CameraCapture(CaptureConfig(device_id=args.camera_device)),
    )
    file_service = FileShareService(ShareConfig(output_dir=args.output_dir, image_format=args.format))
    share_service = PreviewShareSheet(file_service) if preview else file_service
    view = EditorView(ViewConfig(width=args.width, height=args.height))

    controller = MemeEditorController(picker, share_service, view=view)
    controller.load()
    controller.appear()

    try:
        if args.camera:
            controller.select_image(ImageSource.CAMERA)
        else:
            controller.select_image(ImageSource.LIBRARY, parse_selection(args.image))

        if not controller.state.share_enabled:
            logger.error("No photo selected, nothing to share")
            return

        for caption, text in ((Caption.TOP, args.top), (Caption.BOTTOM, args.bottom)):
            if text is not None:
                controller.type_text(caption, text)
                controller.submit()

        meme = controller.share_current_meme()
        if meme is not None:
            print(meme)
    finally:
        controller.disappear()


def caption_photo(args: argparse.Namespace) -> None:
    """Caption a library photo at its own resolution and save it."""
    picker = ImagePicker(library=ImageLibrary(args.library_dir))
    result = picker.pick(ImageSource.LIBRARY, parse_selection(args.image))
    if not result.ok:
        logger.error("No photo selected, nothing to caption")
        return

    meme = MemeComposer().compose(result.image, args.top, args.bottom)
    shared = FileShareService(ShareConfig(output_dir=args.output_dir, image_format=args.format)).share(meme)
    if shared.error is not None:
        logger.error(f"Error while saving: {shared.error}")


def main():
    parser = argparse.ArgumentParser(
        description="Caption a photo image-macro style and share it",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List photos in the library
  python scripts/make_meme.py --mode list

  # Caption the first library photo and save it
  python scripts/make_meme.py --mode compose --image 0 --top "ONE" --bottom "TWO"

  # Take a photo with the camera and preview before saving
  python scripts/make_meme.py --mode preview --camera --top "POV"

  # Caption a photo at full resolution
  python scripts/make_meme.py --mode caption --image cat --top "ONE" --bottom "TWO"
"""
    )

    parser.add_argument(
        "--mode", "-m",
        choices=["list", "compose", "preview", "caption"],
        default="compose",
        help="Operation mode (default: compose)"
    )
    parser.add_argument(
        "--library-dir",
        default="data/library",
        help="Directory containing photos"
    )
    parser.add_argument(
        "--image", "-i",
        default=None,
        help="Library photo name, index or file path"
    )
    parser.add_argument(
        "--camera",
        action="store_true",
        help="Take the photo with the camera instead of the library"
    )
    parser.add_argument(
        "--camera-device",
        type=int,
        default=0,
        help="Camera device index"
    )
    parser.add_argument(
        "--top",
        default=None,
        help="Top caption (default: leave the placeholder)"
    )
    parser.add_argument(
        "--bottom",
        default=None,
        help="Bottom caption (default: leave the placeholder)"
    )
    parser.add_argument(
        "--output-dir", "-o",
        default="output",
        help="Directory shared memes are written to"
    )
    parser.add_argument(
        "--format",
        default="PNG",
        choices=["PNG", "JPEG"],
        help="Image format of shared memes"
    )
    parser.add_argument(
        "--width",
        type=int,
        default=375,
        help="Editor view width in pixels"
    )
    parser.add_argument(
        "--height",
        type=int,
        default=667,
        help="Editor view height in pixels"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )

    args = parser.parse_args()
    setup_logging(args.verbose)

    try:
        if args.mode == "list":
            list_library(args.library_dir)
        elif args.mode == "caption":
            caption_photo(args)
        else:
            make_meme(args, preview=args.mode == "preview")

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception as e:
        logger.error(f"Error: {e}")
        if args.verbose:
            raise


if __name__ == "__main__":
    main()
