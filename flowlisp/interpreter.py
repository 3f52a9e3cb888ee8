import logging

from flowlisp import Value
from flowlisp.config import get_history_path, get_log_level
from flowlisp.errors import FlowError
from flowlisp.evaluation.evaluator import evaluate
from flowlisp.reader.parser import parse_all
from flowlisp.types.render import render
from flowlisp.types.scope import INITIAL_SCOPE, Scope
from flowlisp.types.unit import Unit

logger = logging.getLogger(__name__)


class Interpreter:
    """
    An evaluation session for flow source text.
    Keeps the scope between calls so definitions persist across inputs.
    """
    def __init__(self, scope: Scope | None = None):
        self.scope: Scope = scope if scope is not None else INITIAL_SCOPE

    def eval(self, source: str) -> Value:
        """Evaluate every expression in `source`, in order, and return the last value.

        Each completed expression commits its scope, so definitions made
        before a failing expression are kept.
        """
        result: Value = Unit
        for expr in parse_all(source):
            logger.debug("Evaluating %s", render(expr))
            self.scope, result = evaluate(self.scope, expr)
        return result

    def reset(self) -> None:
        """Drop every definition made in this session."""
        self.scope = INITIAL_SCOPE


def main() -> None:
    """Minimal line loop: read a line, evaluate it, print the result."""
    logging.basicConfig(level=get_log_level())

    try:
        import readline
    except ImportError:
        readline = None

    history_path = get_history_path()
    if readline is not None:
        try:
            readline.read_history_file(str(history_path))
        except OSError:
            logger.debug("No history file at %s", history_path)

    interp = Interpreter()
    while True:
        try:
            line = input("> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if not line.strip():
            continue
        try:
            result = interp.eval(line)
        except FlowError as e:
            print(f"Error: {e}")
            continue
        if result is not Unit:
            print(render(result))

    if readline is not None:
        try:
            readline.write_history_file(str(history_path))
        except OSError as e:
            logger.warning("Could not save history to %s: %s", history_path, e)


if __name__ == "__main__":
    main()
