"""
Basic example of using the shapeunits simplifier.
"""

import logging

from shapeunits import (
    Degree,
    Kilometer,
    Meter,
    MeterPerSecond,
    Millimeter,
    Second,
    UnreachableShapeError,
    format_script,
    print_trace,
    setup_logging,
    simplify,
)


def main():
    setup_logging(logging.INFO)

    print("=" * 80)
    print("shapeunits - Basic Example")
    print("=" * 80)

    # Build a compound value
    print("\nBuilding a compound value...")
    speed = Meter(10.0) / Second(2.0)
    goal = speed * Second(3.0)
    print(f"speed = {speed} ({type(speed).__name__})")
    print(f"goal  = {goal}")

    # Prove the simplification
    print("\n" + "-" * 80)
    print("Simplifying...")
    shape, script = simplify(goal.shape)
    print(f"Canonical shape: {shape}")
    print(f"Script: {format_script(script)}")
    print_trace(goal.shape)
    print(f"Result: {goal.request_shape(Meter)}")

    # A nested example
    print("\n" + "-" * 80)
    nested = (Second(3.0) * Meter(1.0)) / Second(1.0) / Second(1.0)
    print_trace(nested.shape)
    print(f"{nested} -> {nested.request_shape(MeterPerSecond)}")

    # Requesting the wrong shape fails loudly
    print("\n" + "-" * 80)
    try:
        goal.request_shape(Second)
    except UnreachableShapeError as err:
        print(f"Rejected: {err}")

    # Conversions and angles
    print("\n" + "-" * 80)
    print(f"{Meter(1.0)} + {Millimeter(1.0)} = {Meter(1.0) + Millimeter(1.0)}")
    print(f"{Kilometer(1.5)} = {Kilometer(1.5).convert(Meter)}")
    print(f"{Degree(540.0)} normalizes to {Degree(540.0).normalize()}")

    print("\n" + "=" * 80)
    print("Example completed!")
    print("=" * 80)


if __name__ == "__main__":
    main()
