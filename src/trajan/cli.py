import argparse
import logging
from pathlib import Path

from tqdm import tqdm

from trajan.core.errors import TrajanError
from trajan.io.loader import XYZReader
from trajan.io.writer import XYZWriter
from trajan.utils.config_manager import ConfigManager
from trajan.utils.helpers import configure_logging, ensure_directory

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Read an XYZ trajectory and print or rewrite its frames.')
    parser.add_argument('trajectory', type=str, help='Path to the XYZ trajectory file.')
    parser.add_argument('--kind', type=str, choices=['position', 'velocity', 'force'],
                        help='Quantity stored in the file (overrides config).')
    parser.add_argument('--dtype', type=str, choices=['float32', 'float64'],
                        help='Scalar precision of the components (overrides config).')
    parser.add_argument('--config', type=str, help='Path to YAML configuration file.')
    parser.add_argument('--strict', action='store_true', help='Fail on a malformed frame instead of stopping.')
    parser.add_argument('--output', type=str, help='Rewrite the frames to this XYZ file instead of printing.')
    parser.add_argument('--log-level', type=str, help='Logging level (overrides config).')
    return parser


def print_frames(reader: XYZReader) -> int:
    n_frames = 0
    for snapshot in reader:
        n_frames += 1
        print(f"found {len(snapshot)} particles")
        for particle in snapshot:
            print(particle)
    return n_frames


def rewrite_frames(reader: XYZReader, output: Path, writer_cfg: dict) -> int:
    ensure_directory(output.parent)
    with XYZWriter.open(output, **writer_cfg) as writer:
        for snapshot in tqdm(reader, desc=f"Writing frames to {output.name}", unit="fr"):
            writer.write_snapshot(snapshot)
        return writer.frames_written


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = ConfigManager(args.config)
        overrides = {'reader': {}, 'logging': {}}
        if args.kind is not None: overrides['reader']['kind'] = args.kind
        if args.dtype is not None: overrides['reader']['dtype'] = args.dtype
        if args.strict: overrides['reader']['strict'] = True
        if args.log_level is not None: overrides['logging']['level'] = args.log_level
        config.update_config(overrides)
    except (FileNotFoundError, ValueError, OSError) as e:
        configure_logging()
        logger.error(f"Config Error: {e}")
        raise SystemExit(1)

    configure_logging(config.get_logging_config()['level'])
    reader_cfg = config.get_reader_config()

    try:
        logger.info(f"Reading {args.trajectory} as {reader_cfg['kind'].value} ({reader_cfg['dtype'].__name__})")
        with XYZReader.open(args.trajectory, **reader_cfg) as reader:
            if args.output:
                n_frames = rewrite_frames(reader, Path(args.output), config.get_writer_config())
            else:
                n_frames = print_frames(reader)
        logger.info(f"Processed {n_frames} frames.")
    except TrajanError as e:
        logger.error(f"Trajectory Error: {e}")
        raise SystemExit(1)
    return 0


if __name__ == "__main__":
    main()
