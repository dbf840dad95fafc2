"""Estimate how often a constrained random fill would start unplayable.

Counts layouts with no legal move and dumps each one so it can be pasted into
a test fixture.

Run with: ``python generation_odds.py [count] [seed]``
"""
import sys, os
ROOT = os.path.dirname(__file__)
SRC = os.path.join(ROOT, 'src')
if SRC not in sys.path:
    sys.path.insert(0, SRC)
import random

from swapmatch.systems.generator import sample_unplayable_starts


def main(argv):
    count = int(argv[1]) if len(argv) > 1 else 10000
    rng = random.Random(int(argv[2])) if len(argv) > 2 else random.Random()
    stats = sample_unplayable_starts(count, rng)
    print(f"{stats.without_moves} out of {stats.samples} starts were unplayable")
    for board in stats.unplayable:
        print(board.format())


if __name__ == '__main__':
    main(sys.argv)
