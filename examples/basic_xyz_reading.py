#!/usr/bin/env python3
"""
Basic XYZ Reading Example

This script writes a short velocity trajectory, then streams it back frame
by frame and prints the per-frame mean velocity.
"""

from pathlib import Path

from trajan import Coordinate, CoordKind, XYZParticle, XYZSnapshot, XYZReader, XYZWriter


def main():
    output_dir = Path("xyz_output")
    output_dir.mkdir(exist_ok=True)
    path = output_dir / "velocities.xyz"

    print("Writing trajectory...")
    with XYZWriter.open(path) as writer:
        for step in range(3):
            snapshot = XYZSnapshot(f"step {step}", [
                XYZParticle("O", Coordinate.build(CoordKind.VELOCITY, 0.1 * step, 0.0, 0.0)),
                XYZParticle("H", Coordinate.build(CoordKind.VELOCITY, 0.0, 0.2 * step, 0.0)),
                XYZParticle("H", Coordinate.build(CoordKind.VELOCITY, 0.0, 0.0, 0.3 * step)),
            ])
            writer.write_snapshot(snapshot)

    # The file does not say what its vectors are; the reader has to be told.
    print("Reading trajectory...")
    with XYZReader.open(path, CoordKind.VELOCITY) as reader:
        for snapshot in reader:
            velocities = snapshot.velocities()
            print(f"{snapshot.comment}: {len(snapshot)} particles, mean velocity {velocities.mean(axis=0)}")
            assert snapshot.positions() is None

    print(f"Done. Trajectory saved in {path}")


if __name__ == "__main__":
    main()
