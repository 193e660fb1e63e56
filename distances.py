'''
Pairwise distances between the keys of a keyboard, in physical and in matrix space.

Two keys can sit next to each other on the desk and still be far apart in the
switch matrix (a split board's inner columns), or be matrix neighbours across a
physical gap. `divergent_pairs` lists the pairs where the two spaces disagree.
'''

from dataclasses import dataclass
from typing import List

import numpy as np

from hardware import Key, KeyboardHardware


@dataclass(frozen=True)
class DivergentPair:
    a: Key
    b: Key
    physical: float
    matrix: int


def physical_distances(hardware: KeyboardHardware) -> np.ndarray:
    '''
    D[i,j] = euclidean distance between hardware.keys[i].position and hardware.keys[j].position
    '''
    P = np.array([(key.position.x, key.position.y) for key in hardware.keys], dtype=np.float64).reshape(-1, 2)
    delta = P[:, np.newaxis, :] - P[np.newaxis, :, :]
    return np.sqrt(np.sum(delta ** 2, axis=-1))


def matrix_distances(hardware: KeyboardHardware) -> np.ndarray:
    '''
    D[i,j] = manhattan distance between hardware.keys[i].matrix_position and hardware.keys[j].matrix_position
    '''
    M = np.array([(key.matrix_position.x, key.matrix_position.y) for key in hardware.keys], dtype=np.int64).reshape(-1, 2)
    delta = M[:, np.newaxis, :] - M[np.newaxis, :, :]
    return np.sum(np.abs(delta), axis=-1)


def divergent_pairs(hardware: KeyboardHardware, near: float = 1.5, far: int = 3) -> List[DivergentPair]:
    '''
    Return the key pairs that are physically near (<= near) but matrix far (>= far),
    or matrix neighbours (exactly 1 step) but physically far (> near).

    Sorted with the strongest disagreement first.
    '''
    if near < 0:
        raise ValueError(f"near must be non-negative, got {near}")
    if far < 1:
        raise ValueError(f"far must be at least 1, got {far}")

    D = physical_distances(hardware)
    M = matrix_distances(hardware)

    close_but_wired_far = (D <= near) & (M >= far)
    wired_close_but_far = (M == 1) & (D > near)
    i_idx, j_idx = np.nonzero(np.triu(close_but_wired_far | wired_close_but_far, k=1))

    pairs = [
        DivergentPair(hardware.keys[i], hardware.keys[j], float(D[i, j]), int(M[i, j]))
        for i, j in zip(i_idx, j_idx)
    ]
    return sorted(pairs, key=lambda p: -abs(p.matrix - p.physical))
