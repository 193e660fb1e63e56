r'''
Standard ANSI hardware, with 30 keys in 3 rows of 10 columns.

Positions are in key units, with the origin at the top-left key. Each row is
shifted right by its stagger, the way a row-staggered board is built.

ansi:
 LK LR LM LP LP   RP RP RM RR RK
 LK LR LM LP LP   RP RP RM RR RK
 LK LR LM LP LP   RP RP RM RR RK
'''

from hardware import Finger, Hand, Key, KeyboardHardware, MatrixPosition, Position

hand_finger_at_col = {
    0: (Hand.LEFT, Finger.PINKY),
    1: (Hand.LEFT, Finger.RING),
    2: (Hand.LEFT, Finger.MIDDLE),
    3: (Hand.LEFT, Finger.POINTER),
    4: (Hand.LEFT, Finger.POINTER),
    5: (Hand.RIGHT, Finger.POINTER),
    6: (Hand.RIGHT, Finger.POINTER),
    7: (Hand.RIGHT, Finger.MIDDLE),
    8: (Hand.RIGHT, Finger.RING),
    9: (Hand.RIGHT, Finger.PINKY),
}

stagger_at_row = {
    0: 0,
    1: 0.25,
    2: 0.75
}

def standard_hardware(
    name,
    stagger_at_row = stagger_at_row,
    offset_at_col = {},
    hand_finger_at_row_col = {},
    additional_keys = [],
):
    '''Creates KeyboardHardware with a standard 30 keys arranged in 3 rows of 10 columns
    This is the typical setup for keyboard layout work.
    '''
    keys = []
    for row in range(3):
        for col in range(10):
            hand, finger = hand_finger_at_row_col.get((row, col), hand_finger_at_col[col])
            keys.append(Key(
                hand=hand,
                finger=finger,
                position=Position(col + stagger_at_row.get(row, 0) + offset_at_col.get(col, 0), row),
                matrix_position=MatrixPosition(col, row),
            ))
    return KeyboardHardware(name=name, keys=keys + list(additional_keys))

# export the standard ansi keyboard
KEYBOARD = standard_hardware('ansi')

if __name__ == "__main__":
    print(KEYBOARD.str(label='both'))
