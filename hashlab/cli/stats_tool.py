"""
Interactive menu for the statistical hash tests.

    1. Uniformity Test
    2. Avalanche Effect Test
    3. Both Tests

Each choice asks for a file, prints the results and saves the detailed
results file under the configured output directory. A failing test
(missing file, no usable lines) is reported and the menu returns.

Usage:
    hash8-stats
    python -m hashlab.cli.stats_tool
"""

from typing import Callable

from hashlab.analysis.run_tests import run_avalanche_test, run_uniformity_test
from hashlab.reporting.reports import format_avalanche, format_uniformity
from hashlab.utils.config import get_config
from hashlab.utils.errors import HashLabError
from hashlab.utils.logger import get_logger

logger = get_logger(__name__)


def uniformity(filename: str, config: dict, output_dir=None) -> bool:
    """Run and print one uniformity test. Returns False if it failed."""
    try:
        report = run_uniformity_test(filename, config, output_dir=output_dir)
    except HashLabError as e:
        logger.warning(f"Uniformity test aborted: {e}")
        print(f"Error: {e}")
        return False
    print()
    print(format_uniformity(report))
    saved = config.get("reporting", {}).get("uniformity_file", "uniformity_results.txt")
    print(f"\nDetailed results saved to: {saved}")
    return True


def avalanche(filename: str, config: dict, output_dir=None) -> bool:
    """Run and print one avalanche test. Returns False if it failed."""
    try:
        report = run_avalanche_test(filename, config, output_dir=output_dir)
    except HashLabError as e:
        logger.warning(f"Avalanche test aborted: {e}")
        print(f"Error: {e}")
        return False
    print()
    print(format_avalanche(report))
    saved = config.get("reporting", {}).get("avalanche_file", "avalanche_results.txt")
    print(f"\nDetailed results saved to: {saved}")
    return True


def main(input_fn: Callable[[str], str] = input, config: dict | None = None, output_dir=None) -> None:
    if config is None:
        config = get_config()

    print("=== Hash Function Statistical Tests ===\n")
    print("Choose test:")
    print("1. Uniformity Test")
    print("2. Avalanche Effect Test")
    print("3. Both Tests")

    choice = input_fn("\nEnter choice (1-3): ").strip()

    if choice == "1":
        filename = input_fn("Enter filename for uniformity test: ").strip()
        uniformity(filename, config, output_dir)
    elif choice == "2":
        filename = input_fn("Enter filename for avalanche test: ").strip()
        avalanche(filename, config, output_dir)
    elif choice == "3":
        uniform_file = input_fn("Enter filename for uniformity test: ").strip()
        uniformity(uniform_file, config, output_dir)
        avalanche_file = input_fn("\nEnter filename for avalanche test: ").strip()
        avalanche(avalanche_file, config, output_dir)
    else:
        print("Invalid choice.")


if __name__ == "__main__":
    main()
