# example_fibonacci.py
"""
Demo: plain doubly recursive Fibonacci, fib(25).
"""

from closure_pi import render
from closure_pi.programs import fib


def main() -> int:
    print(render(fib(25)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
