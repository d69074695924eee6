from __future__ import annotations

from contextlib import ContextDecorator
from importlib import metadata
import sys
from typing import (
    Any,
    Final,
    Iterable,
    List,
    Optional,
    Sequence,
    Tuple,
)

from tabulate import tabulate

from lazyviews.scenarios import SCENARIOS


# Constants
PROGRAM_NAME: Final[str] = "lazyviews"
PROGRAM_VERSION: Final[str] = (
    f" {PROGRAM_NAME} v{metadata.version('lazyviews')} "
)
USAGE: Final[str] = f"usage: {PROGRAM_NAME} [demo]"


# ========
# Run demo
# ========


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = list(sys.argv[1:] if argv is None else argv)
    if args not in ([], ["demo"]):
        print(USAGE, file=sys.stderr)
        raise SystemExit(2)
    run_demo()


def run_demo() -> None:
    """Run every scenario, print its elements and a summary table."""
    print(starting_header(PROGRAM_VERSION))

    results: List[Tuple[str, List[Any]]] = []
    for title, scenario in SCENARIOS:
        values = scenario()
        results.append((title, values))
        print()
        with cli_window(title):
            print(format_values(values))

    print(f"\n{summary_table(results)}")


def starting_header(title: str) -> str:
    line = "=" * len(title)
    return f"{line}\n{title}\n{line}"


# =========
# CLI tools
# =========


class cli_window(ContextDecorator):
    """Print `header` between wings on enter and closing line on exit."""

    def __init__(
            self,
            header: str,
            fillchar: str = "=",
            wing_size: int = 5,
    ) -> None:
        self.header = header
        self.fillchar = fillchar
        self.wing_size = wing_size
        self.width = len(header) + 2 * (wing_size + 1)  # +1 is for space

    def __enter__(self):
        wing = self.fillchar * self.wing_size
        print(f"{wing} {self.header} {wing}")
        return self

    def __exit__(self, *exc):
        print(self.fillchar * self.width)
        return False


def format_values(values: Iterable[Any]) -> str:
    text = " ".join(map(str, values))
    return text if text else "(empty)"


def summary_table(results: Sequence[Tuple[str, Sequence[Any]]]) -> str:
    return tabulate(
        [(title, len(values)) for title, values in results],
        headers=("Key", "Scenario", "Elements"),
        colalign=("right", "left", "center"),
        showindex=range(1, len(results) + 1),
    )


if __name__ == "__main__":
    main()
