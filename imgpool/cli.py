"""Command line entry point for running an operation on an image."""

from __future__ import annotations

import sys
from typing import Callable, Dict, List, Optional, Sequence

from .image import Image
from .pipeline import Actor, Convolution

DEFAULT_ARGS = ("DEVICE", "Min_pooling", "./wall-e.png")

ACTORS: Dict[str, Actor] = {
    "HOST": Actor.HOST,
    "DEVICE": Actor.DEVICE,
}

OPERATIONS: Dict[str, Callable[[Convolution, Actor], Image]] = {
    "Prewitt_Edge_detection": Convolution.conv_calc,
    "Max_pooling": Convolution.max_pool,
    "Min_pooling": Convolution.min_pool,
}


class UsageError(ValueError):
    """Raised when the command line arguments are not understood."""


def usage(program: str) -> str:
    return (
        f"Usage: {program}\n"
        " <medium> [HOST or DEVICE]\n"
        " <type>   [Prewitt_Edge_detection | Max_pooling | Min_pooling]\n"
        " <path>   [input image file path]"
    )


def select(argv: Sequence[str]) -> Image:
    """Run the operation named by ``argv``: program, medium, type and image path."""
    program = argv[0] if argv else "imgpool"
    if len(argv) != 4:
        raise UsageError(usage(program))
    _, medium, kind, path = argv
    if medium not in ACTORS or kind not in OPERATIONS:
        raise UsageError(usage(program))
    conv = Convolution.instance(path)
    return OPERATIONS[kind](conv, ACTORS[medium])


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments and run the requested operation; defaults to min pooling."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        args = list(DEFAULT_ARGS)
    try:
        select(["imgpool", *args])
    except UsageError as exc:
        print(exc, file=sys.stderr)
        return 2
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())