"""``pyaoc info`` subcommand — describe a formal context."""

from __future__ import annotations

import argparse
import logging

from pyaoc.cli.exitcodes import EXIT_ERROR, EXIT_SUCCESS
from pyaoc.cli.output import emit_json, info_response, open_context

logger = logging.getLogger(__name__)


def run_info(args: argparse.Namespace) -> int:
    """Execute the ``info`` subcommand."""
    json_mode = getattr(args, "json", False)
    context = open_context(args.context, json_mode=json_mode)
    if context is None:
        return EXIT_ERROR

    if json_mode:
        emit_json(info_response(context, args.context))
    else:
        print(f"Number of objects:\t{context.object_count}")
        print(f"Number of attributes:\t{len(context.attribute_domain)}")
        print(context)

    logger.info(
        "Context %s: %d objects, %d attributes",
        args.context, context.object_count, len(context.attribute_domain),
    )
    return EXIT_SUCCESS
