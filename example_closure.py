# example_closure.py
"""
Demo: a closure that remembers its first operand.
"""

from closure_pi import make_adder, render


def main() -> int:
    print(render(make_adder(40)(2)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
