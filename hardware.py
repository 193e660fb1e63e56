'''
These classes define the physical attributes of keyboard hardware
'''

import dataclasses
import importlib
import logging
import math
import numbers
import pkgutil
from collections import defaultdict
from dataclasses import dataclass
from enum import Enum, unique
from typing import Any, Iterator, List, Mapping

logger = logging.getLogger(__name__)


class InvalidKeyDefinition(ValueError):
    """
    Raised when a key is constructed from missing or malformed values.

    Attributes
    ----------
    field : str
        The (dotted) name of the offending field, e.g. ``position.x``.
    """
    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"invalid key definition: {field}: {message}")


@unique
class Hand(Enum):
    """
    Represent the hand of a keyboard user.
    """
    LEFT = 'Left'
    RIGHT = 'Right'


@unique
class Finger(Enum):
    """
    Represent the finger assigned to press a key, regardless of hand.
    """
    THUMB = 'Thumb'
    POINTER = 'Pointer'
    MIDDLE = 'Middle'
    RING = 'Ring'
    PINKY = 'Pinky'


def _enum_value(enum_cls, value, field: str):
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        for member in enum_cls:
            if value == member.value or value.upper() == member.name:
                return member
    choices = ', '.join(member.value for member in enum_cls)
    raise InvalidKeyDefinition(field, f"expected one of {choices}, got {value!r}")


def _coordinate(value, field: str, integral: bool):
    # bool is an int subclass but never a coordinate
    if isinstance(value, bool):
        raise InvalidKeyDefinition(field, f"expected a number, got {value!r}")
    if integral:
        if not isinstance(value, numbers.Integral):
            raise InvalidKeyDefinition(field, f"expected an integer, got {value!r}")
        return int(value)
    if not isinstance(value, numbers.Real):
        raise InvalidKeyDefinition(field, f"expected a number, got {value!r}")
    try:
        value = float(value)
    except OverflowError:
        raise InvalidKeyDefinition(field, f"number too large, got {value!r}") from None
    if not math.isfinite(value):
        raise InvalidKeyDefinition(field, f"expected a finite number, got {value!r}")
    return value


@dataclass(frozen=True)
class Position:
    """
    Represent the physical location of a key, in the units of the keyboard definition.

    Attributes
    ----------
    x : float
        The X-coordinate of the key (e.g., key units or millimeters).
    y : float
        The Y-coordinate of the key.
    """
    x: float
    y: float

    def __post_init__(self):
        object.__setattr__(self, 'x', _coordinate(self.x, 'position.x', integral=False))
        object.__setattr__(self, 'y', _coordinate(self.y, 'position.y', integral=False))

    def to_dict(self) -> dict[str, float]:
        return {'x': self.x, 'y': self.y}


@dataclass(frozen=True)
class MatrixPosition:
    """
    Represent the logical location of a key in the switch matrix.

    Attributes
    ----------
    x : int
        The column index of the key.
    y : int
        The row index of the key.
    """
    x: int
    y: int

    def __post_init__(self):
        object.__setattr__(self, 'x', _coordinate(self.x, 'matrix_position.x', integral=True))
        object.__setattr__(self, 'y', _coordinate(self.y, 'matrix_position.y', integral=True))

    @property
    def col(self) -> int:
        return self.x

    @property
    def row(self) -> int:
        return self.y

    def to_dict(self) -> dict[str, int]:
        return {'x': self.x, 'y': self.y}


def _pair(cls, value, field: str):
    if isinstance(value, cls):
        return value
    if isinstance(value, Mapping):
        missing = [axis for axis in ('x', 'y') if axis not in value]
        if missing:
            raise InvalidKeyDefinition(f"{field}.{missing[0]}", "missing coordinate")
        extra = sorted(set(value) - {'x', 'y'})
        if extra:
            raise InvalidKeyDefinition(field, f"unexpected coordinates {extra}")
        return cls(value['x'], value['y'])
    if isinstance(value, (tuple, list)) and len(value) == 2:
        return cls(value[0], value[1])
    raise InvalidKeyDefinition(field, f"expected {cls.__name__} or an {{x, y}} pair, got {value!r}")


KEY_FIELDS = ('hand', 'finger', 'position', 'matrix_position')


@dataclass(frozen=True)
class Key:
    """
    Represent one physical key: the hand and finger that press it, where it sits
    physically, and where it sits in the switch matrix.

    All four fields are required and independent of each other. Convenience inputs
    (enum value strings, ``{x, y}`` mappings, ``(x, y)`` pairs) are normalized on
    construction; anything else raises InvalidKeyDefinition.
    """
    # None marks a missing argument so the error can name the field
    hand: Hand = None  # type: ignore[assignment]
    finger: Finger = None  # type: ignore[assignment]
    position: Position = None  # type: ignore[assignment]
    matrix_position: MatrixPosition = None  # type: ignore[assignment]

    def __post_init__(self):
        for name in KEY_FIELDS:
            if getattr(self, name) is None:
                raise InvalidKeyDefinition(name, "missing required field")

        object.__setattr__(self, 'hand', _enum_value(Hand, self.hand, 'hand'))
        object.__setattr__(self, 'finger', _enum_value(Finger, self.finger, 'finger'))
        object.__setattr__(self, 'position', _pair(Position, self.position, 'position'))
        object.__setattr__(self, 'matrix_position', _pair(MatrixPosition, self.matrix_position, 'matrix_position'))

    def replace(self, **changes) -> 'Key':
        '''
        Return a new key with the given fields changed.
        '''
        unknown = sorted(set(changes) - set(KEY_FIELDS))
        if unknown:
            raise InvalidKeyDefinition(unknown[0], "unknown field")
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        return {
            'hand': self.hand.value,
            'finger': self.finger.value,
            'position': self.position.to_dict(),
            'matrix_position': self.matrix_position.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Key':
        '''
        Build a key from its dict shape, as produced by `to_dict`.
        '''
        if not isinstance(data, Mapping):
            raise InvalidKeyDefinition('key', f"expected a mapping, got {data!r}")
        for name in KEY_FIELDS:
            if name not in data:
                raise InvalidKeyDefinition(name, "missing required field")
        unknown = sorted(set(data) - set(KEY_FIELDS))
        if unknown:
            raise InvalidKeyDefinition(unknown[0], "unknown field")
        return cls(**{name: data[name] for name in KEY_FIELDS})


FINGER_LETTER = {
    Finger.THUMB: 'T',
    Finger.POINTER: 'P',
    Finger.MIDDLE: 'M',
    Finger.RING: 'R',
    Finger.PINKY: 'K',
}

LABELS = ('none', 'finger', 'hand', 'both')


class KeyboardHardware:
    """
    Represent the physical layout of a keyboard.

    Attributes
    ----------
    name : str
        The name of the keyboard.
    keys : List[Key]
        The keys of the keyboard, sorted by matrix row then column.
    rows : List[int]
        The matrix rows in use.
    cols : List[int]
        The matrix columns in use.
    grid : Dict[int, Dict[int, Key]]
        The keys indexed by matrix row then column.
    """
    def __init__(self, name: str, keys: List[Key]):
        self.name = name
        self.keys = sorted(keys, key=lambda k: (k.matrix_position.row, k.matrix_position.col))

        self.grid: dict[int, dict[int, Key]] = defaultdict(dict)
        self._key_at: dict[MatrixPosition, Key] = {}
        for key in self.keys:
            if key.matrix_position in self._key_at:
                raise ValueError(
                    f"Keys must have unique matrix positions, found two keys at "
                    f"({key.matrix_position.x}, {key.matrix_position.y}) in {name}"
                )
            self._key_at[key.matrix_position] = key
            self.grid[key.matrix_position.row][key.matrix_position.col] = key

        self.rows = sorted(self.grid)
        self.cols = sorted(set(key.matrix_position.col for key in self.keys))

    def __len__(self) -> int:
        return len(self.keys)

    def __iter__(self) -> Iterator[Key]:
        return iter(self.keys)

    def __repr__(self) -> str:
        return f"KeyboardHardware(name='{self.name}', keys={len(self.keys)})"

    def key_at(self, matrix_position: MatrixPosition | tuple[int, int]) -> Key:
        """Return the key at the given matrix position, raise KeyError if there is none."""
        if not isinstance(matrix_position, MatrixPosition):
            matrix_position = MatrixPosition(*matrix_position)
        return self._key_at[matrix_position]

    def keys_for_hand(self, hand: Hand) -> List[Key]:
        return [key for key in self.keys if key.hand == hand]

    def keys_for_finger(self, hand: Hand, finger: Finger) -> List[Key]:
        return [key for key in self.keys if key.hand == hand and key.finger == finger]

    @classmethod
    def names(cls) -> List[str]:
        """Return the names of the keyboard modules in the keebs directory."""
        import keebs
        return sorted(info.name for info in pkgutil.iter_modules(keebs.__path__) if not info.ispkg)

    @classmethod
    def from_name(cls, name: str) -> 'KeyboardHardware':
        """
        Create a KeyboardHardware instance from a name.

        Parameters
        ----------
        name : str
            The name of the keyboard hardware module in the keebs directory.

        Returns
        -------
        KeyboardHardware
            The keyboard hardware instance from the specified module.
        """
        if name not in cls.names():
            raise ValueError(f"Unknown keyboard hardware '{name}'")
        module = importlib.import_module('keebs.' + name)
        logger.debug("loaded keyboard hardware %s from %s", name, module.__name__)
        return module.KEYBOARD

    def str(self, label: str = 'finger') -> str:
        '''
        Show the keyboard in a human-readable format, one line per matrix row.

        Parameters
        ----------
        label : str
            What to show for each key: 'none', 'finger', 'hand' or 'both'.
        '''
        if label not in LABELS:
            raise ValueError(f"Unknown label '{label}', expected one of {', '.join(LABELS)}")

        def _str_key(key: Key) -> str:
            s = ''
            if label in ('hand', 'both'):
                s += key.hand.value[0]
            if label in ('finger', 'both'):
                s += FINGER_LETTER[key.finger]
            return s or '.'

        if not self.keys:
            return ''

        width = 2 if label == 'both' else 1
        lines = []
        for row in self.rows:
            s = ''
            prev_hand = None
            for i, col in enumerate(range(self.cols[0], self.cols[-1] + 1)):
                key = self.grid[row].get(col)
                if i > 0:
                    s += ' '
                if key is None:
                    s += ' ' * width
                    continue
                if prev_hand is not None and key.hand != prev_hand:
                    s += '  '
                s += _str_key(key)
                prev_hand = key.hand
            lines.append(s.rstrip())

        return '\n'.join(lines)
