"""
Class-name fragments shared by the encoder and the decoder.
"""

from typing import Sequence

from .types import GenerationError, TypeToken

ARITY_PREFIXES = {
    1: "Single",
    2: "Twice",
    3: "Triple",
    4: "Quadruple",
}

# Run length -> marker placed before the type name of a run
COUNT_MARKERS = {
    1: "",
    2: "Tw",
    3: "Tri",
    4: "Quad",
}

RETURN_PREFIX = "To"
THROW_SUFFIX = "Throw"

MAX_ARITY = max(ARITY_PREFIXES)


def arity_prefix(arity: int) -> str:
    if arity not in ARITY_PREFIXES:
        raise GenerationError(f"The number of parameters is incorrect: {arity}")
    return ARITY_PREFIXES[arity]


def count_marker(run_length: int) -> str:
    if run_length not in COUNT_MARKERS:
        raise GenerationError(f"Run length out of range: {run_length}")
    return COUNT_MARKERS[run_length]


def group_runs(tokens: Sequence[TypeToken]) -> list[tuple[TypeToken, int]]:
    """Collapse consecutive identical tokens into (token, run length) pairs."""
    runs: list[tuple[TypeToken, int]] = []
    for token in tokens:
        if runs and runs[-1][0] is token:
            runs[-1] = (token, runs[-1][1] + 1)
        else:
            runs.append((token, 1))
    return runs


def param_fragment(tokens: Sequence[TypeToken]) -> str:
    """Encode parameter types as the run-length grouped name fragment.

    A signature whose parameters all share one type is named by that type
    alone: [LONG, LONG] -> "Long", [LONG, LONG, INT] -> "TwLongInt".
    """
    if not tokens:
        raise GenerationError("Cannot name an empty parameter list")
    runs = group_runs(tokens)
    if len(runs) == 1:
        return runs[0][0].capitalized_name
    return "".join(count_marker(length) + token.capitalized_name for token, length in runs)
