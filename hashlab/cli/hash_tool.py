"""
Interactive menu for the 8-bit hash.

    1. Test hash function      (built-in demo inputs)
    2. Hash a file             (one hash per line)
    3. Hash a custom string

Usage:
    hash8
    python -m hashlab.cli.hash_tool
"""

from typing import Callable

from hashlab.hashing.simple_hash import hash_lines, self_test_cases, simple_hash
from hashlab.io.sources import read_lines
from hashlab.utils.errors import HashLabError
from hashlab.utils.logger import get_logger

logger = get_logger(__name__)


def print_self_test():
    print("=== Simple Hash Function Test ===\n")
    current = None
    for group, text, value in self_test_cases():
        if group != current:
            if current is not None:
                print()
            print(group)
            current = group
        print(f'"{text}" -> {value}')
    print()


def print_file_hashes(filename: str):
    lines = read_lines(filename)
    print(f"Hash values for file: {filename}")
    print("Line\tHash\tContent")
    print("----\t----\t-------")
    for number, value, content in hash_lines(lines, simple_hash):
        print(f"{number}\t{value}\t{content}")
    logger.info(f"Hashed {len(lines)} lines from {filename}")


def main(input_fn: Callable[[str], str] = input) -> None:
    print("=== 8-bit Hash Function ===\n")
    print("Choose an option:")
    print("1. Test hash function")
    print("2. Hash a file")
    print("3. Hash a custom string")

    choice = input_fn("\nEnter choice (1-3): ").strip()

    try:
        if choice == "1":
            print_self_test()
        elif choice == "2":
            filename = input_fn("Enter filename: ").strip()
            print_file_hashes(filename)
        elif choice == "3":
            text = input_fn("Enter string to hash: ")
            print(f'\nInput: "{text}"')
            print(f"Hash value: {simple_hash(text)}")
        else:
            print("Invalid choice.")
    except HashLabError as e:
        logger.warning(str(e))
        print(f"Error: {e}")


if __name__ == "__main__":
    main()
