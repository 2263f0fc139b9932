"""
Line-oriented read loop for tramp.

Each input line holds one expression. Results are printed with the printer,
errors are reported and the loop carries on; only end of input stops it.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from tramp.config import get_prompt
from tramp.interpreter import Interpreter
from tramp.printer import to_string
from tramp.types.errors import TrampError

logger = logging.getLogger(__name__)


def run_repl(
    interp: Interpreter,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    prompt: str | None = None,
) -> None:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    if prompt is None:
        prompt = get_prompt()
    while True:
        stdout.write(prompt)
        stdout.flush()
        line = stdin.readline()
        if not line:
            # end of stream
            stdout.write("\n")
            break
        if not line.strip():
            continue
        try:
            result = interp.eval(line)
        except TrampError as ex:
            logger.debug("error evaluating %r", line, exc_info=True)
            stdout.write(f"error: {ex}\n")
            continue
        if result is not None:
            stdout.write(to_string(result) + "\n")
