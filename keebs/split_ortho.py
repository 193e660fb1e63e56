r'''
Split Ortho hardware: the Ortho 3x10 matrix, with the right half moved 4 key units
away from the left half.

The switch matrix is unchanged, so the inner columns 4 and 5 are still matrix
neighbours while being far apart on the desk. Useful to see where physical and
matrix distances disagree (try `distances split_ortho`).

split_ortho:
 K R M P P   P P M R K
 K R M P P   P P M R K
 K R M P P   P P M R K
'''

from keebs.ansi import standard_hardware

SPLIT_GAP = 4

KEYBOARD = standard_hardware(
    'split_ortho',
    stagger_at_row={},
    offset_at_col={col: SPLIT_GAP for col in range(5, 10)},
)

if __name__ == "__main__":
    print(KEYBOARD.str(label='finger'))
