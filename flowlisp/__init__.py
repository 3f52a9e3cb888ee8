# Core type aliases for flow's data model.
# Values double as syntax: the reader produces them and the evaluator consumes
# and returns them. Plain Python types are used wherever one fits:
# - Number   -> int (never bool)
# - Boolean  -> bool
# - Text     -> str
# - Sequence -> list (never mutated once built)
# Symbol, Quoted, Function and Unit have their own classes in flowlisp.types.

from typing import Any, Callable

# Runtime value alias
Value = Any

# Evaluator function type passed to special forms and natives:
# (scope, expression, budget) -> (scope, value), where budget is the
# number of nested list evaluations still allowed
EvaluatorFn = Callable[..., tuple[Any, Value]]

from flowlisp.errors import FlowError, EvalError, ParseError  # noqa: E402
from flowlisp.evaluation.evaluator import evaluate  # noqa: E402
from flowlisp.interpreter import Interpreter  # noqa: E402
from flowlisp.reader.parser import parse, parse_all  # noqa: E402
from flowlisp.types.render import render  # noqa: E402
from flowlisp.types.scope import INITIAL_SCOPE, Scope  # noqa: E402

__all__ = [
    "Value",
    "EvaluatorFn",
    "FlowError",
    "EvalError",
    "ParseError",
    "evaluate",
    "Interpreter",
    "parse",
    "parse_all",
    "render",
    "INITIAL_SCOPE",
    "Scope",
]
