"""Interactive polygon transformation tool."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from typing import TextIO

from rastergeom.transform import reflect, rotate, scale, translate

_MENU = (
    "\n \t Enter 1) Scaling "
    "\n \t Enter 2) Rotation about arbitrary point"
    "\n \t Enter 3) Reflection"
    "\n \t Enter 4) Translation  \n \t"
)


class _InputError(Exception):
    pass


class _Reader:
    """Reads whitespace-separated values from a text stream."""

    def __init__(self, stream: TextIO):
        self._tokens = self._split(stream)

    @staticmethod
    def _split(stream: TextIO) -> Iterator[str]:
        for line in stream:
            yield from line.split()

    def _next(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise _InputError("unexpected end of input") from None

    def integer(self) -> int:
        token = self._next()
        try:
            return int(token)
        except ValueError:
            raise _InputError(f"expected an integer, got {token!r}") from None

    def number(self) -> float:
        token = self._next()
        try:
            return float(token)
        except ValueError:
            raise _InputError(f"expected a number, got {token!r}") from None

    def char(self) -> str:
        return self._next()[0]


def _read_polygon(reader: _Reader) -> list[tuple[int, int]]:
    print("Enter No of edges ")
    edges = reader.integer()
    print(f" Enter{edges} point of polygon ")
    points = []
    for i in range(edges):
        print(f"Enter {i} Point ")
        points.append((reader.integer(), reader.integer()))
    return points


def _scaling(reader, points):
    print("\n\tIn Scaling whole screen is 1st Qudrant ")
    print("\t Enter sx, sy ")
    sx, sy = reader.integer(), reader.integer()
    return scale(points, sx, sy)


def _rotation(reader, points):
    print("\n Enter Ar point x , y ")
    pivot = (reader.integer(), reader.integer())
    print("\n Enter thetha ")
    degrees = reader.number()
    return rotate(points, pivot, degrees)


def _reflection(reader, points):
    print("Enter Reflection Axis ")
    axis = reader.char()
    if axis.lower() not in ("x", "y"):
        return []
    return reflect(points, axis)


def _translation(reader, points):
    print("\t Enter Tx, Ty ")
    tx, ty = reader.integer(), reader.integer()
    return translate(points, tx, ty)


_ACTIONS = {1: _scaling, 2: _rotation, 3: _reflection, 4: _translation}


def main(argv=None) -> int:
    """Ask for a transformation and a polygon on standard input and print the result."""
    parser = argparse.ArgumentParser(
        prog="rastergeom",
        description="Apply a 2D transformation to a polygon read from standard input.",
    )
    parser.parse_args(argv)

    print(_MENU)
    reader = _Reader(sys.stdin)
    try:
        choice = reader.integer()
    except _InputError:
        choice = 0
    action = _ACTIONS.get(choice)
    if action is None:
        print("\n \t Check Input run again")
        return 0

    try:
        points = _read_polygon(reader)
        result = action(reader, points)
    except _InputError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print("Transformed polygon:")
    for x, y in result:
        print(f"{x} {y}")
    return 0