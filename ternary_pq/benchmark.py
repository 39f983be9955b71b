"""
Ternary heap benchmark command-line interface.

Times the queue operations over exponentially growing input sizes and
writes one CSV row per (size, operation) pair.

Usage examples:
    python -m ternary_pq.benchmark
    python -m ternary_pq.benchmark --output heap.csv --base-input 1000 --rounds 8
    python -m ternary_pq.benchmark --seed 42 --verbose
"""

import argparse
import csv
import logging
import random
import statistics
import sys
import time

from .datastructures import Element, TernaryHeapMinPriorityQueue

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_CSV = "ternary_heap_performance.csv"
DEFAULT_BASE_INPUT = 100
DEFAULT_ROUNDS = 12
DEFAULT_ITERATIONS = 5

CSV_HEADER = [
    "Input Size",
    "Operation",
    "Average Time (ms)",
    "Standard Deviation (ms)",
]


# ----------------------------
# Helper Functions
# ----------------------------

def generate_random_elements(size: int, rng: random.Random):
    """Generate `size` elements with random integer priorities."""
    return [Element(i, rng.randint(0, 1000000)) for i in range(size)]


def filled_queue(elements):
    queue = TernaryHeapMinPriorityQueue()
    for element in elements:
        queue.insert(element)
    return queue


# ----------------------------
# Operations to Benchmark
# ----------------------------
# Each returns the elapsed time in ms of the timed part only.

def time_insert(elements):
    queue = TernaryHeapMinPriorityQueue()
    start = time.perf_counter()
    for element in elements:
        queue.insert(element)
    return (time.perf_counter() - start) * 1000


def time_extract_minimum(elements):
    queue = filled_queue(elements)
    start = time.perf_counter()
    while queue:
        queue.extract_minimum()
    return (time.perf_counter() - start) * 1000


def time_decrease_priority(elements):
    queue = filled_queue(elements)
    start = time.perf_counter()
    for element in elements:
        queue.decrease_priority(element, element.priority - 1000001)
    return (time.perf_counter() - start) * 1000


def time_minimum(elements):
    queue = filled_queue(elements)
    start = time.perf_counter()
    for _ in range(len(elements)):
        queue.minimum()
    return (time.perf_counter() - start) * 1000


OPERATIONS = {
    "insert": time_insert,
    "extract_minimum": time_extract_minimum,
    "decrease_priority": time_decrease_priority,
    "minimum": time_minimum,
}


def measure_operation_time(operation, input_size: int, iterations: int, rng: random.Random):
    """Run the operation `iterations` times; return average + std deviation (ms)."""
    times = [
        operation(generate_random_elements(input_size, rng))
        for _ in range(iterations)
    ]
    avg_time = statistics.mean(times)
    std_dev = statistics.stdev(times) if len(times) > 1 else 0.0
    return avg_time, std_dev


# ----------------------------
# Benchmark Runner
# ----------------------------

def run_benchmarks(output_file: str, base_input: int = DEFAULT_BASE_INPUT,
                   rounds: int = DEFAULT_ROUNDS, iterations: int = DEFAULT_ITERATIONS,
                   seed=None):
    """Run exponential performance tests and return the rows written."""
    if base_input < 1 or rounds < 1 or iterations < 1:
        raise ValueError("base_input, rounds and iterations must all be >= 1")

    rng = random.Random(seed)
    input_sizes = [base_input * (2 ** i) for i in range(rounds)]
    rows = []

    with open(output_file, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(CSV_HEADER)

        for op_name, op_func in OPERATIONS.items():
            for size in input_sizes:
                logger.debug("timing %s at size %d", op_name, size)
                avg_time, std_time = measure_operation_time(op_func, size, iterations, rng)
                row = [size, op_name, f"{avg_time:.3f}", f"{std_time:.3f}"]
                writer.writerow(row)
                rows.append(row)
                print(f"{op_name:<18} | Size: {size:<8} | Avg Time: {avg_time:.3f} ms | "
                      f"Std: {std_time:.3f} ms")

    logger.info("benchmark results saved to %s", output_file)
    return rows


# -------------------------------------------------------------------
# Entry point
# -------------------------------------------------------------------
def build_parser():
    p = argparse.ArgumentParser(description="Benchmark the ternary heap priority queue")
    p.add_argument("--output", default=DEFAULT_OUTPUT_CSV, help="CSV file to write")
    p.add_argument("--base-input", type=int, default=DEFAULT_BASE_INPUT,
                   help="smallest input size; doubles each round")
    p.add_argument("--rounds", type=int, default=DEFAULT_ROUNDS)
    p.add_argument("--iterations", type=int, default=DEFAULT_ITERATIONS,
                   help="runs averaged per (size, operation)")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--verbose", action="store_true", help="enable debug logging")
    return p


def main(argv=None):
    """CLI entry point when invoked via `python -m ternary_pq.benchmark`."""
    argv = sys.argv[1:] if argv is None else argv
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run_benchmarks(args.output, args.base_input, args.rounds, args.iterations, args.seed)


if __name__ == "__main__":
    main()
