from __future__ import annotations

from _infra import banner, run

from arrows import Arrow, KlArrow, cases, fork, sync


async def main() -> None:
    banner("01_quickstart: then / after / map / bind / cases")

    inc = Arrow(lambda x: x + 1)
    double = Arrow(lambda x: x * 2)

    # Left to right vs mathematical order: both give (3 + 1) * 2
    print(sync.compose(inc, double)(3), double.after(inc)(3))

    # Reader bind: the next arrow sees the original input too
    described = double.bind(lambda doubled: Arrow(lambda x: f"{x} -> {doubled}"))
    print(described(21))

    sign = cases(lambda x: x > 0, then=Arrow.pure("pos"), otherwise=Arrow.pure("neg"))
    print(sign(5), sign(-1))

    print(fork(inc, double)(5))

    # Kleisli: construction of the next step depends on the previous result
    scale = KlArrow(lambda factor: Arrow(lambda base: factor * base))
    shift = KlArrow(lambda value: Arrow(lambda base: value + base))
    print((scale * shift)(3)(10))


if __name__ == "__main__":
    run(main)
