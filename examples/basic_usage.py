#!/usr/bin/env python3
"""
Example: Arithmetic far beyond the float range

Walks through parsing, exact arithmetic, rounded division, powers and the
two text formats with values around 1e1000.
"""

import os
import sys

# Add the package to the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from bignumbers import BigNum, DivisionByZeroError, from_value
from bignumbers.config import get_config
from bignumbers.logging_config import setup_logging


def main():
    print("bignumbers - arbitrary-range decimal example")
    print("=" * 60)

    # 1. Configuration
    print("\n1. Configuration")
    config = get_config()
    print(f"   Division precision: {config.division_precision}")
    print(f"   Guard digits: {config.guard_digits}")
    print(f"   Float overflow policy: {config.float_overflow}")
    setup_logging()

    # 2. Parsing
    print("\n2. Parsing")
    a = from_value("9.99e999")
    b = from_value("2.5e998")
    print(f"   a = {a.to_string(10)}")
    print(f"   b = {b.to_string(10)}")
    print(f"   1e1000 = {from_value('1e1000').to_string(8)}")

    # 3. Exact arithmetic
    print("\n3. Exact arithmetic")
    print(f"   a + b = {a.add(b).to_string(15)}")
    print(f"   a * b = {a.mul(b).to_string(15)}")
    print(f"   1.23e400 + 4.56e399 = {(BigNum.from_string('1.23e400') + '4.56e399'):.3e}")

    # 4. Rounded division and powers
    print("\n4. Division and powers")
    print(f"   a / b = {a.div(b, 30).to_string(20)}")
    print(f"   1 / 3 = {BigNum.one().div(3, 25)}")
    print(f"   2 ** 3000 = {BigNum.from_int(2).pow(3000).to_string(12)}")
    print(f"   2 ** -10 = {BigNum.from_int(2).pow(-10).to_fixed(12)}")
    try:
        a.div(0)
    except DivisionByZeroError as e:
        print(f"   a / 0 -> {e}")

    # 5. Fixed-point and float conversion
    print("\n5. Fixed-point output")
    print(f"   12345.6789 -> {from_value('12345.6789').to_fixed(6)}")
    print(f"   0 -> {from_value(0).to_fixed(3)}")
    print(f"   float(1.5e300) = {float(from_value('1.5e300'))}")
    print(f"   float(a) = {float(a)}")


if __name__ == "__main__":
    main()
