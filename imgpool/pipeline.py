"""Image pipeline that runs edge detection and pooling on a loaded image."""

from __future__ import annotations

import enum
from pathlib import Path
from typing import Callable, ClassVar, Optional, Union
import os

from .image import Image
from .operations import PREWITT_KERNEL, convolve, max_pool, min_pool

PathLike = Union[str, "os.PathLike[str]"]


class Actor(enum.Enum):
    """Where an operation is performed."""

    HOST = "HOST"
    DEVICE = "DEVICE"

    @property
    def prefix(self) -> str:
        """Prefix used for the output file name, e.g. ``Host`` or ``Device``."""
        return self.value.capitalize()


class Convolution:
    """Holds an input image and writes the results of operations on it as PNG files."""

    _instance: ClassVar[Optional["Convolution"]] = None

    def __init__(self, image_path: PathLike, output_dir: Optional[PathLike] = None) -> None:
        print("Loading image file...")
        self.image = Image.load(image_path)
        self.output_dir = Path(output_dir) if output_dir is not None else Path()
        self.kernel = PREWITT_KERNEL
        self.result: Optional[Image] = None

    @classmethod
    def instance(cls, path: Optional[PathLike] = None) -> "Convolution":
        """Return the shared pipeline, creating it from ``path`` on first use."""
        if cls._instance is None:
            if path is None:
                raise RuntimeError("Convolution.instance() needs a path on first call")
            cls._instance = cls(path)
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Forget the shared pipeline so the next ``instance`` call creates a new one."""
        cls._instance = None

    def _run(self, actor: Union[Actor, str], name: str, operation: Callable[[Image], Image]) -> Image:
        try:
            chosen = Actor(actor)
        except ValueError:
            raise ValueError(f"unsupported actor: {actor!r}") from None
        label = f"{chosen.prefix}{name}"
        print(f"{label} being performed")
        result = operation(self.image)
        result.save(self.output_dir / f"{label}.png")
        print("DONE")
        self.result = result
        return result

    def conv_calc(self, actor: Union[Actor, str]) -> Image:
        """Run Prewitt edge detection and write ``<Actor>ConvCalc.png``."""
        return self._run(actor, "ConvCalc", lambda image: convolve(image, self.kernel))

    def max_pool(self, actor: Union[Actor, str]) -> Image:
        """Run 2x2 max pooling and write ``<Actor>MaxP.png``."""
        return self._run(actor, "MaxP", max_pool)

    def min_pool(self, actor: Union[Actor, str]) -> Image:
        """Run 2x2 min pooling and write ``<Actor>MinP.png``."""
        return self._run(actor, "MinP", min_pool)