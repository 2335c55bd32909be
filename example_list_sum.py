# example_list_sum.py
from closure_pi import EMPTY, make_pair, render, sum_all


def main() -> int:
    lst = make_pair(1, make_pair(2, make_pair(3, make_pair(4, EMPTY))))
    print(render(sum_all(lst)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
