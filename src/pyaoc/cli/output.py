"""Structured JSON output for the pyAOC CLI."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

from pyaoc.context import FormalContext
from pyaoc.errors import PyAOCError
from pyaoc.loader import load_context

logger = logging.getLogger(__name__)


def emit_json(data: dict) -> None:
    """Print compact single-line JSON to stdout."""
    print(json.dumps(data, separators=(",", ":")))


def info_response(context: FormalContext, context_file: str) -> dict:
    """Build an info response dict."""
    return {
        "context_file": context_file,
        "objects": context.object_count,
        "attributes": len(context.attribute_domain),
        "rows": context.to_dict()["objects"],
    }


def bench_response(
    name: str,
    objects: int,
    attributes: int,
    generated: int,
    average_ms: float,
    skipped: int,
) -> dict:
    """Build a bench response dict for one context file."""
    return {
        "name": name,
        "objects": objects,
        "attributes": attributes,
        "generated_concepts": generated,
        "average_ms": average_ms,
        "top_skipped": skipped,
    }


def error_response(message: str) -> dict:
    """Build an error response dict."""
    return {"error": message}


def emit_error(message: str, *, json_mode: bool = False) -> None:
    """Print an error message to stderr, or as JSON to stdout."""
    if json_mode:
        emit_json(error_response(message))
    else:
        print(f"Error: {message}", file=sys.stderr)


def open_context(path_str: str, *, json_mode: bool = False) -> FormalContext | None:
    """Load a context for a subcommand, reporting failures. Returns None on error."""
    path = Path(path_str)
    if not path.exists():
        emit_error(f"Context file {path} does not exist.", json_mode=json_mode)
        return None
    try:
        return load_context(path)
    except (PyAOCError, OSError, ValueError) as e:
        emit_error(str(e), json_mode=json_mode)
        return None
