import argparse
import logging
import sys

from src.dary_heap.dary_heap import INT64_MAX, INT64_MIN, DAryHeap
from src.dary_heap.errors import HeapError
from src.dary_heap.loader import MAX_DATASETS, load_datasets

logger = logging.getLogger(__name__)

MENU = """
Choose an operation:
1. Insert Key
2. Increase Key
3. Extract Max
4. Delete Key
5. Exit"""

INSERT, INCREASE, EXTRACT, DELETE, EXIT = range(1, 6)


def format_values(values) -> str:
    return " ".join(str(v) for v in values)


def format_heap(heap: DAryHeap) -> str:
    """Keys in storage order, space separated."""
    return format_values(heap.to_list())


def read_int(prompt: str, min_value: int, max_value: int) -> int:
    """
    Prompt until the user enters an integer within ``[min_value, max_value]``.

    Raises
    ------
    EOFError
        If the input runs out before a valid answer is given.
    """
    while True:
        reply = input(prompt).strip()
        try:
            number = int(reply)
        except ValueError:
            number = None
        if number is not None and min_value <= number <= max_value:
            return number
        print(
            f"Invalid input. Please enter a number between "
            f"{min_value} and {max_value}."
        )


class HeapSession:
    """Menu loop running one operation at a time on a built heap."""

    def __init__(self, heap: DAryHeap):
        self.heap = heap

    def show(self) -> None:
        print(
            f"\nYour array with the d={self.heap.branching_factor} "
            f"is now heaped like this:"
        )
        print(format_heap(self.heap))

    def run(self) -> None:
        while True:
            self.show()
            print(MENU)
            choice = read_int("Enter your choice: ", INSERT, EXIT)
            if choice == EXIT:
                print("Exiting program.")
                return
            try:
                self.dispatch(choice)
            except HeapError as e:
                logger.warning("Operation %d failed: %s", choice, e)
                print(f"Error: {e}")

    def dispatch(self, choice: int) -> None:
        if choice == INSERT:
            self.insert()
        elif choice == INCREASE:
            self.increase_key()
        elif choice == EXTRACT:
            self.extract_max()
        elif choice == DELETE:
            self.delete()
        else:
            raise ValueError(f"Unknown menu choice: {choice}")

    def _read_index(self, prompt: str) -> int:
        # an empty heap has no valid index, let the heap report it
        return read_int(prompt, 0, max(len(self.heap) - 1, 0))

    def insert(self) -> None:
        key = read_int("Enter the key to insert: ", INT64_MIN, INT64_MAX)
        self.heap.insert(key)
        logger.debug("Inserted %d", key)

    def increase_key(self) -> None:
        index = self._read_index("Enter the index: ")
        key = read_int("Enter the new key: ", INT64_MIN, INT64_MAX)
        self.heap.increase_key(index, key)
        logger.debug("Increased key at %d to %d", index, key)

    def extract_max(self) -> None:
        if self.heap.is_empty():
            print("Heap is empty!")
            return
        print(f"Extracted Max: {self.heap.extract_max()}")

    def delete(self) -> None:
        index = self._read_index("Enter the index of the key to delete: ")
        removed = self.heap.delete(index)
        logger.debug("Deleted %d at index %d", removed, index)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Build a d-ary max heap from a dataset file and run "
                    "heap operations on it interactively."
    )
    parser.add_argument(
        "path",
        nargs="?",
        help="File with up to %d arrays, one per line, integers separated "
             "by spaces. Prompted for when omitted." % MAX_DATASETS
    )
    parser.add_argument(
        "--degree",
        type=int,
        help="Degree (branching factor) of the heap. Prompted for when "
             "omitted."
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level, by default WARNING."
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="[%(asctime)s %(levelname)s]: %(message)s"
    )

    try:
        path = args.path
        if path is None:
            path = input(
                "Enter the name of the file containing heap data: "
            ).strip()

        try:
            datasets = load_datasets(path)
        except HeapError as e:
            logger.error("Could not load %s: %s", path, e)
            print(f"Error: {e}", file=sys.stderr)
            return 1
        if not datasets:
            print(f"Error: no arrays found in {path}", file=sys.stderr)
            return 1

        print("Available arrays:")
        for i, values in enumerate(datasets, start=1):
            print(f"array {i}: {format_values(values)}")

        selected = read_int(
            f"\nSelect an array number (1 to {len(datasets)}): ",
            1, len(datasets)
        ) - 1
        degree = args.degree
        if degree is None or not 1 <= degree <= sys.maxsize:
            degree = read_int(
                "Enter the degree (d) of the heap (at least 1): ",
                1, sys.maxsize
            )

        heap = DAryHeap.max_heap(datasets[selected], branching_factor=degree)
        logger.info(
            "Built heap from array %d with d=%d and %d keys",
            selected + 1, degree, len(heap)
        )
        HeapSession(heap).run()
    except EOFError:
        print("\nExiting program.")
    return 0
