"""``pyaoc cover`` subcommand — upper and lower covers of one concept."""

from __future__ import annotations

import argparse
import logging

from pyaoc.cli.exitcodes import EXIT_ERROR, EXIT_SUCCESS
from pyaoc.cli.output import emit_error, emit_json, open_context
from pyaoc.errors import PyAOCError
from pyaoc.localgen import LocalGenerator

logger = logging.getLogger(__name__)


def run_cover(args: argparse.Namespace) -> int:
    """Execute the ``cover`` subcommand."""
    json_mode = getattr(args, "json", False)
    context = open_context(args.context, json_mode=json_mode)
    if context is None:
        return EXIT_ERROR

    generator = LocalGenerator(context)
    try:
        if args.object is not None:
            result = generator.object_neighborhood(args.object)
        else:
            result = generator.attribute_neighborhood(args.attribute)
    except PyAOCError as e:
        emit_error(str(e), json_mode=json_mode)
        return EXIT_ERROR

    if json_mode:
        d = result.to_dict()
        if args.trace:
            d["trace"] = result.trace
        emit_json(d)
    else:
        print(f"Concept: {result.concept}")
        print(f"\n[{len(result.upper)}] Upper cover:")
        for concept in result.upper.sorted_concepts():
            print(f"  {concept}")
        print(f"\n[{len(result.lower)}] Lower cover:")
        for concept in result.lower.sorted_concepts():
            print(f"  {concept}")
        if args.trace:
            print("\nTrace:")
            for line in result.trace:
                print(f"  {line}")

    logger.info(
        "Covers of %s: %d upper, %d lower",
        result.concept, len(result.upper), len(result.lower),
    )
    return EXIT_SUCCESS
