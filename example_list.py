# example_list.py
"""
Demo: a list built from nothing but closures, printed one element per line.
"""

from closure_pi import EMPTY, make_pair, print_all


def main() -> int:
    lst = make_pair(1, make_pair(2, make_pair(3, make_pair(4, EMPTY))))
    print_all(lst)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
