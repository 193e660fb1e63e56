r'''
Standard Ortho hardware, with 30 keys in 3 rows of 10 columns.

This is the ANSI standard hardware without row stagger, so physical and matrix
positions line up exactly (one key unit per matrix step).

ortho:
 K R M P P   P P M R K
 K R M P P   P P M R K
 K R M P P   P P M R K
'''

from keebs.ansi import standard_hardware

KEYBOARD = standard_hardware('ortho', stagger_at_row={})

if __name__ == "__main__":
    print(KEYBOARD.str(label='finger'))
