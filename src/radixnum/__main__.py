"""Прогон встроенных эталонных сценариев: python -m radixnum"""

import logging
import sys

from radixnum.harness import load_reference_scenarios, run_scenarios


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    results = run_scenarios(load_reference_scenarios())
    for result in results:
        status = "PASS" if result.passed else "FAIL"
        print(f"{status} {result.name}: {result.actual}")

    if not all(result.passed for result in results):
        return 1

    print("Done")
    return 0


if __name__ == "__main__":
    sys.exit(main())
