import functools
import operator
import time

import floating_duration
from floating_duration import TimeFormat


@floating_duration.measure("factorial")
def factorial(n: int):
    return functools.reduce(operator.mul, range(1, n + 1), 1)


def main():
    with floating_duration.measure() as watch:
        result = factorial(12)

    elapsed = watch.elapsed
    print(f"Needed {TimeFormat(elapsed)} ({TimeFormat(elapsed):#})")
    print(f"In seconds: {elapsed.as_fractional_secs()}")
    print(f"Result: {result}")

    start = time.perf_counter_ns()
    time.sleep(0.01)
    print("Slept", TimeFormat(time.perf_counter_ns() - start, ascii=True))


if __name__ == "__main__":
    main()
