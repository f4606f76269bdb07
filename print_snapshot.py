"""
Print the latest video snapshot.

Reads the newest file in the snapshot directory, crops the black borders
around the picture, lightens it by the requested amount, writes it next to
the source and sends it to the default printer. Printing currently only
works on Windows.

Usage:
    print-snapshot -d ~/Pictures/vlc -l 40
    print-snapshot -d ~/Pictures/vlc -l 0 --no-print
"""

import argparse
import logging
import sys
from typing import List, Optional

from tqdm import tqdm

from config import get_settings
from core.constants import LevelsConstants, SystemConstants
from core.enums import PipelineStage
from core.exceptions import SnapshotFlowError, SnapshotProcessingError
from core.snapshot_store import SnapshotStore
from services.snapshot_service import SnapshotService


def luma_offset(value: str) -> int:
    """argparse type for a luma offset in [0, 255]."""
    try:
        offset = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid luma offset: {value!r}") from None
    if not LevelsConstants.MIN_LUMA_OFFSET <= offset <= LevelsConstants.MAX_LUMA_OFFSET:
        raise argparse.ArgumentTypeError(f"luma offset must be between 0 and 255, got {offset}")
    return offset


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()

    parser = argparse.ArgumentParser(
        prog="print-snapshot",
        description=(
            "Crop black borders from the latest video snapshot, lighten it and "
            "send it to the default printer."
        ),
    )
    parser.add_argument(
        "-d",
        "--snapshot-dir",
        default=settings.snapshot.directory,
        required=settings.snapshot.directory is None,
        help="directory to look for snapshots in; usually the one VLC saves snapshots to",
    )
    parser.add_argument(
        "-l",
        "--luma",
        type=luma_offset,
        required=True,
        help="brightness lift from 0 (unchanged) to 255 (white)",
    )
    parser.add_argument(
        "--no-print",
        action="store_true",
        help="write the processed image but don't send it to the printer",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging verbosity (default: WARNING)",
    )
    return parser


def report_error(error: SnapshotFlowError) -> None:
    """Print an error and its chain of causes."""
    print(f"\n\nerror: {error}\n", file=sys.stderr)

    causes = list(error.chain())[1:]
    if causes:
        print("caused by:", file=sys.stderr)
        for cause in causes:
            print(f"\t{cause}", file=sys.stderr)
        print("", file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()

    logging.basicConfig(level=getattr(logging, args.log_level), format=SystemConstants.LOG_FORMAT)

    send_to_printer = not args.no_print and settings.printing.enabled
    service = SnapshotService(
        store=SnapshotStore(
            output_suffix=settings.snapshot.output_suffix,
            prefix=settings.snapshot.prefix,
        )
    )

    stages = list(PipelineStage) if send_to_printer else list(PipelineStage)[:-1]

    with tqdm(total=len(stages), bar_format="{desc:<20}[{bar:20}] {n_fmt}/{total_fmt}") as bar:
        started = []

        def progress(stage: PipelineStage) -> None:
            if started:
                bar.update(1)
            started.append(stage)
            bar.set_description(stage.description)

        try:
            result = service.process(
                args.snapshot_dir,
                args.luma,
                send_to_printer=send_to_printer,
                progress=progress,
            )
        except SnapshotProcessingError as e:
            bar.close()
            report_error(e)
            return 1

        bar.update(1)
        bar.set_description("done")

    print(f"wrote {result.output_path}")
    if result.printed:
        print("sent to printer")
    return 0


if __name__ == "__main__":
    sys.exit(main())
