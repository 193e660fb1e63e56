r'''
Standard Ortho hardware, with 30 keys in 3 rows of 10 columns, plus one thumb key per hand.

The thumb keys sit on their own matrix row under the inner columns. Thumbs are
assigned per hand like every other finger; nothing here ties a thumb to a side.

ortho_thumb:
 K R M P P   P P M R K
 K R M P P   P P M R K
 K R M P P   P P M R K
         T   T
'''

from hardware import Finger, Hand, Key, MatrixPosition, Position
from keebs.ansi import standard_hardware

KEYBOARD = standard_hardware('ortho_thumb', stagger_at_row={}, additional_keys=[
    Key(hand=Hand.LEFT, finger=Finger.THUMB, position=Position(4, 3), matrix_position=MatrixPosition(4, 3)),
    Key(hand=Hand.RIGHT, finger=Finger.THUMB, position=Position(5, 3), matrix_position=MatrixPosition(5, 3)),
])

if __name__ == "__main__":
    print(KEYBOARD.str(label='finger'))
