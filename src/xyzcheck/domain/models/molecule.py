#!/usr/bin/env python3
# src/xyzcheck/domain/models/molecule.py

"""
Domain model for a parsed molecule: an ordered, immutable sequence of atoms.
"""

from dataclasses import dataclass
from typing import Iterator, List, Tuple

import numpy as np

from .atom import Atom


@dataclass(frozen=True)
class Molecule:
    """Ordered collection of atoms as they appear in the source file."""

    atoms: Tuple[Atom, ...] = ()

    def __post_init__(self):
        # Accept any iterable of atoms but always store a tuple
        object.__setattr__(self, "atoms", tuple(self.atoms))

    def __len__(self) -> int:
        return len(self.atoms)

    def __iter__(self) -> Iterator[Atom]:
        return iter(self.atoms)

    def __getitem__(self, index: int) -> Atom:
        return self.atoms[index]

    @property
    def atom_count(self) -> int:
        """Number of atoms in the molecule."""
        return len(self.atoms)

    @property
    def elements(self) -> List[str]:
        """Element labels in file order."""
        return [atom.element for atom in self.atoms]

    @property
    def coordinates(self) -> np.ndarray:
        """
        Cartesian coordinates as an array.

        Returns:
            Array of shape (n_atoms, 3) with dtype float64
        """
        if not self.atoms:
            return np.zeros((0, 3), dtype=np.float64)
        return np.array([atom.coordinates for atom in self.atoms], dtype=np.float64)
