"""
A uniform interface to trajectories of any file format.

A Trajectory is an indexable sequence of Snapshot objects.
"""
from abc import abstractmethod
from collections.abc import Sequence


class Trajectory(Sequence):

    @abstractmethod
    def __len__(self) -> int:
        ...

    @abstractmethod
    def __getitem__(self, idx):
        ...

    @property
    def n_frames(self) -> int:
        return len(self)
