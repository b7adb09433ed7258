"""Build the analyzer and run the example queries.

Steps run strictly in sequence: one build, then each example. By default a
failing step does not stop the run (continue-on-error mode); pass
`--fail-fast` to stop at the first failure instead.
"""

import argparse
import logging
import subprocess
import sys
from typing import Callable, NamedTuple, Sequence


logger = logging.getLogger(__name__)


class Example(NamedTuple):
    """A titled analyzer invocation with literal arguments."""

    title: str
    args: tuple[str, ...]


BUILD_COMMAND: tuple[str, ...] = (sys.executable, "-m", "pip", "install", "--quiet", "-e", ".")

ANALYZER_COMMAND: tuple[str, ...] = (sys.executable, "-m", "precip_analyzer")

EXAMPLES: tuple[Example, ...] = (
    Example(
        "Seattle next 7 days with ensemble",
        ("--city", "Seattle, WA", "--start", "2026-02-09", "--end", "2026-02-16", "--unit", "inch"),
    ),
    Example(
        "New York with verbose output",
        ("--city", "New York", "--start", "2026-02-09", "--end", "2026-02-13", "--verbose"),
    ),
    Example(
        "Coordinates (Miami)",
        ("--lat", "25.7617", "--lon", "-80.1918", "--start", "2026-02-09", "--end", "2026-02-16"),
    ),
)

Runner = Callable[[Sequence[str]], subprocess.CompletedProcess]


def _run_step(runner: Runner, command: Sequence[str]) -> int:
    logger.debug(f"Running: {' '.join(command)}")
    result = runner(list(command))
    if result.returncode != 0:
        logger.warning(f"Command exited with {result.returncode}: {' '.join(command)}")
    return result.returncode


def run_examples(
    runner: Runner = subprocess.run,
    continue_on_error: bool = True,
    echo: Callable[[str], None] = print,
) -> int:
    """
    Build once, then run every example in order.

    Args:
        runner: Executes one command and returns its completed process
        continue_on_error: Keep going after a failed step
        echo: Receives progress lines

    Returns:
        0 once the run reaches the end, or the failing step's return code
        when continue_on_error is off
    """
    echo("Building precip-analyzer...")
    code = _run_step(runner, BUILD_COMMAND)
    if code != 0 and not continue_on_error:
        return code

    echo("")
    echo("Running example queries...")
    echo("")

    for number, example in enumerate(EXAMPLES, start=1):
        echo(f"=== Example {number}: {example.title} ===")
        code = _run_step(runner, ANALYZER_COMMAND + example.args)
        if code != 0 and not continue_on_error:
            return code
        echo("")

    echo("All examples completed successfully!")
    return 0


def main() -> None:
    """CLI entry point for running the examples."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    parser = argparse.ArgumentParser(description="Build precip-analyzer and run example queries")
    parser.add_argument(
        "--fail-fast",
        action="store_true",
        help="Stop at the first failing step instead of continuing",
    )
    args = parser.parse_args()

    sys.exit(run_examples(continue_on_error=not args.fail_fast))


if __name__ == "__main__":
    main()
