from __future__ import annotations

import shutil
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

EXAMPLES_ROOT = Path("examples/cli")
PIXELS = "320x240"


@dataclass
class Example:
    name: str
    upper_left: str
    lower_right: str
    pixels: str = PIXELS

    @property
    def output(self) -> Path:
        return EXAMPLES_ROOT / self.name / f"{self.name}.png"

    def full_args(self) -> list[str]:
        return [sys.executable, "mandel.py", str(self.output), self.pixels, self.upper_left, self.lower_right]


EXAMPLES: list[Example] = [
    Example(name="full-set", upper_left="-2.5,1.2", lower_right="1,-1.2"),
    Example(name="seahorse-valley", upper_left="-0.80,0.20", lower_right="-0.70,0.10"),
    Example(name="elephant-valley", upper_left="0.25,0.05", lower_right="0.35,-0.05"),
    Example(name="period-three", upper_left="-1.80,0.02", lower_right="-1.72,-0.02"),
    Example(name="antenna", upper_left="-1.20,0.35", lower_right="-1,0.20", pixels="400x300"),
]


def _ensure_clean(paths: Iterable[Path]) -> None:
    for path in paths:
        if path.exists():
            if path.is_dir():
                shutil.rmtree(path)
            else:
                path.unlink()


def _verify(example: Example) -> None:
    if not example.output.is_file():
        raise RuntimeError(f"Expected file {example.output} was not created")


def main() -> None:
    EXAMPLES_ROOT.mkdir(parents=True, exist_ok=True)
    for example in EXAMPLES:
        print(f"\n[cli-example] {example.name}")
        _ensure_clean([example.output.parent])
        completed = subprocess.run(example.full_args(), check=True)
        if completed.returncode != 0:
            raise RuntimeError(f"Example {example.name} failed with {completed.returncode}")
        _verify(example)
    print("\nAll CLI examples generated successfully.")


if __name__ == "__main__":
    main()
