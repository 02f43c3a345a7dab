import logging
import sys
from typing import Callable

from lsp.config import BANNER, EXIT_HINT, LOG_FORMAT, PROMPT
from lsp.runtime import evaluate_and_render

try:
    import readline  # noqa: F401  line editing and history for input()
except ImportError:  # not available on Windows, input() still works
    pass


def main(input_fn: Callable[[str], str] = input, output_fn: Callable[[str], None] = print) -> int:
    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT)

    output_fn(BANNER)
    output_fn(EXIT_HINT + "\n")

    while True:
        try:
            code = input_fn(PROMPT)
        except (EOFError, KeyboardInterrupt):
            output_fn("")
            return 0

        output_fn(evaluate_and_render(code))


if __name__ == "__main__":
    sys.exit(main())
