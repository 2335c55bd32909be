# example_let.py
"""
Demo: main() reads two bindings from the enclosing scope.
"""

from closure_pi import render

a = 1
b = 2


def main() -> int:
    print(render(a + b))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
