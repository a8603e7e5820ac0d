"""
Test harness for the densepack codec.

Runs a fixed set of sample sequences through encode/decode, and reports
the encoded text, the compression ratio and whether the round trip was
exact. Every report line goes to the console and to a caller-supplied
text sink (normally the log file opened in append mode).
"""

import random
from typing import List, NamedTuple, Optional, Sequence, TextIO, Tuple

from .codec import compression_ratio, decode, encode, trivial_encoding
from .config_loader import load_config

SEPARATOR = "-" * 54


class CaseResult(NamedTuple):
    description: str
    numbers: List[int]
    encoded: str
    ratio: float
    round_trip_ok: bool


def build_cases(rng: random.Random, random_sizes: Sequence[int] = (50, 100, 500, 1000)) -> List[Tuple[str, List[int]]]:
    """
    Build the list of (description, data) sample cases.

    Parameters:
    rng (random.Random): Source for the random cases.
    random_sizes (Sequence[int]): Lengths of the random cases.

    Returns:
    List[Tuple[str, List[int]]]: The cases, in the order they should run.
    """
    cases = [
        ("Simple short 1", [1, 2, 3]),
        ("Simple short 2", [1, 2, 3, 4, 5, 6, 7, 8, 9]),
    ]
    for size in random_sizes:
        cases.append((f"Random {size} numbers", [rng.randint(1, 300) for _ in range(size)]))
    cases += [
        ("Boundary: all one-digit (1..9)", [(i % 9) + 1 for i in range(300)]),
        ("Boundary: all two-digit (10..99)", [10 + (i % 90) for i in range(300)]),
        ("Boundary: all three-digit (100..300)", [100 + (i % 201) for i in range(300)]),
        (
            "Boundary: every number three times (1 to 300, 900 numbers total)",
            [n for n in range(1, 301) for _ in range(3)],
        ),
    ]
    return cases


def run_case(description: str, numbers: List[int]) -> CaseResult:
    encoded = encode(numbers)
    decoded = decode(encoded)
    return CaseResult(description, numbers, encoded, compression_ratio(numbers), decoded == numbers)


class Reporter:
    def __init__(self, sink: Optional[TextIO] = None, preview_length: int = 60) -> None:
        """
        Parameters:
        sink (TextIO, optional): Where log lines are written besides the console.
        preview_length (int): How many characters of the trivial string to show.
        """
        self.sink = sink
        self.preview_length = preview_length

    def log(self, message: str) -> None:
        print(message)
        if self.sink is not None:
            self.sink.write(message + "\n")

    def preview(self, numbers: Sequence[int]) -> str:
        trivial = trivial_encoding(numbers)
        if len(trivial) > self.preview_length:
            return trivial[:self.preview_length] + "..."
        return trivial

    def report(self, result: CaseResult) -> None:
        self.log(f"Test: {result.description}")
        self.log(f"Source string (trivial): {self.preview(result.numbers)}")
        self.log(f"Encoded string: {result.encoded}")
        self.log(f"Compression ratio: {result.ratio:.3f}")
        self.log(f"Decoded array correct? {'Yes' if result.round_trip_ok else 'No'}")
        self.log(SEPARATOR)


def run_tests(config: dict, sink: Optional[TextIO] = None) -> List[CaseResult]:
    harness_config = config.get("harness", {})
    rng = random.Random(harness_config.get("seed"))
    reporter = Reporter(sink, harness_config.get("preview_length", 60))

    results = []
    for description, data in build_cases(rng, harness_config.get("random_sizes", (50, 100, 500, 1000))):
        result = run_case(description, data)
        reporter.report(result)
        results.append(result)
    return results


def main(config_path=None) -> int:
    config = load_config(config_path)
    log_file = config.get("harness", {}).get("log_file", "output.txt")
    with open(log_file, "a", encoding="utf-8") as sink:
        results = run_tests(config, sink)
    return 0 if all(r.round_trip_ok for r in results) else 1
