# Core type aliases for tramp's data model.
# Values are plain Python objects where Python already has the type (float, bool)
# plus the small set of classes in tramp.types (Symbol, Empty, Pair, Procedure).
#
# Naming guidance:
# - SExpression: use in reader/printer code to denote syntactic forms (code-as-data).
# - LispValue:  use in evaluator/runtime code to denote evaluated values.
# Both resolve to `Any`; the reader produces pairs and atoms, so any form is also a value.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Forms alias (code is data)
SExpression = LispValue

# Evaluator function type: the full evaluator handed to special forms
EvaluatorFn = Callable[..., LispValue]
