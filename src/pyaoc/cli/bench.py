"""``pyaoc bench`` subcommand — time neighbourhood generation.

For each context file, samples random objects, introduces their
object-concepts and computes both covers, skipping the top concept.
"""

from __future__ import annotations

import argparse
import logging
import random
import time
from pathlib import Path

from pyaoc.cli.exitcodes import EXIT_ERROR, EXIT_SUCCESS
from pyaoc.cli.output import bench_response, emit_error, emit_json, open_context
from pyaoc.concept import Concept
from pyaoc.context import FormalContext
from pyaoc.localgen import LocalGenerator

logger = logging.getLogger(__name__)


def bench_context(
    context: FormalContext,
    samples: int,
    rng: random.Random,
) -> tuple[int, float, int]:
    """Run *samples* neighbourhood computations on random object-concepts.

    Returns (generated concepts, average milliseconds per step, top concepts
    skipped). Each non-top sample contributes its pivot and both covers; the
    total starts at 1 for the top concept.
    """
    generator = LocalGenerator(context)
    generated = 1
    skipped = 0
    start = time.perf_counter()
    for _ in range(samples):
        object_id = rng.randint(1, context.object_count)
        concept = Concept.introduce_object(object_id, context)
        if not concept.intent:
            logger.debug("TOP, dodged.")
            skipped += 1
            continue
        generated += generator.neighborhood(concept).size
    elapsed_ms = (time.perf_counter() - start) * 1000
    average_ms = elapsed_ms / samples if samples else 0.0
    return generated, average_ms, skipped


def run_bench(args: argparse.Namespace) -> int:
    """Execute the ``bench`` subcommand."""
    json_mode = getattr(args, "json", False)
    if args.samples < 1:
        emit_error("--samples must be at least 1.", json_mode=json_mode)
        return EXIT_ERROR
    rng = random.Random(args.seed)

    had_error = False
    for path_str in args.context:
        context = open_context(path_str, json_mode=json_mode)
        if context is None:
            had_error = True
            continue
        if context.object_count == 0:
            emit_error(f"Context {path_str} has no objects.", json_mode=json_mode)
            had_error = True
            continue

        generated, average_ms, skipped = bench_context(context, args.samples, rng)
        name = Path(path_str).name
        attributes = len(context.attribute_domain)

        if json_mode:
            emit_json(bench_response(
                name, context.object_count, attributes, generated, average_ms, skipped,
            ))
        else:
            if skipped:
                print(f"TOP, dodged. ({skipped}x)")
            print(f"Name:\t\t\t\t\t{name}")
            print(f"Number of objects:\t\t\t{context.object_count}")
            print(f"Number of attributes:\t\t\t{attributes}")
            print(f"Number of generated concepts:\t\t{generated}")
            print(f"Average time of computation / step:\t{average_ms:.3f} ms")

        logger.info("Benchmarked %s: %d concepts, %.3f ms/step", name, generated, average_ms)

    return EXIT_ERROR if had_error else EXIT_SUCCESS
