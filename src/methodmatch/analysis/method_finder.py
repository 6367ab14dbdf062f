"""Search for methods matching a reference method.

Applies exact or fuzzy comparison to every method of a type, or of every
type in a module (nested types included). Results are produced lazily:
a comparison only runs when the consumer asks for the next match.
"""

from collections.abc import Iterator
import logging

from methodmatch.analysis.exact_matcher import matches_exactly
from methodmatch.analysis.fuzzy_aligner import check_reference, fuzzy_match
from methodmatch.analysis.match_types import EXACT, ExactMode, FuzzyMode, MatchMode
from methodmatch.core.model import Method, Module, TypeDef, iter_types

logger = logging.getLogger(__name__)


def _validate(reference: Method, mode: MatchMode) -> None:
    if isinstance(mode, FuzzyMode):
        check_reference(reference.body)
    elif not isinstance(mode, ExactMode):
        raise TypeError(f"Unsupported match mode: {mode!r}")


def _is_match(candidate: Method, reference: Method, mode: MatchMode) -> bool:
    if isinstance(mode, FuzzyMode):
        return fuzzy_match(reference.body, candidate.body, mode.threshold)
    return matches_exactly(candidate.body, reference.body)


def _iter_type_matches(type_def: TypeDef, reference: Method, mode: MatchMode) -> Iterator[Method]:
    for candidate in type_def.methods:
        if _is_match(candidate, reference, mode):
            yield candidate


def find_in_type(
    type_def: TypeDef, reference: Method, mode: MatchMode = EXACT
) -> Iterator[Method]:
    """Find the direct methods of a type that match ``reference``.

    Nested types are not searched; use ``find_in_module`` for that.

    Args:
        type_def: Type whose methods are candidates.
        reference: Method to look for.
        mode: EXACT or FuzzyMode(threshold).

    Returns:
        Lazy iterator over matching methods, in declaration order.

    Raises:
        ValueError: In fuzzy mode, if the reference has no body or an empty one.
    """
    _validate(reference, mode)
    return _iter_type_matches(type_def, reference, mode)


def _iter_module_matches(module: Module, reference: Method, mode: MatchMode) -> Iterator[Method]:
    for type_def in iter_types(module.types):
        logger.debug(f"Searching {len(type_def.methods)} methods in type {type_def.name}")
        yield from _iter_type_matches(type_def, reference, mode)


def find_in_module(
    module: Module, reference: Method, mode: MatchMode = EXACT
) -> Iterator[Method]:
    """Find every method of a module that matches ``reference``.

    Types are visited depth-first, each type before its nested types, and
    matches are yielded in that order.

    Args:
        module: Module whose methods are candidates.
        reference: Method to look for.
        mode: EXACT or FuzzyMode(threshold).

    Returns:
        Lazy iterator over matching methods.

    Raises:
        ValueError: In fuzzy mode, if the reference has no body or an empty one.
    """
    _validate(reference, mode)
    logger.debug(f"Searching module {module.name} for {reference.full_name} ({mode})")
    return _iter_module_matches(module, reference, mode)


def find_similar(
    scope: TypeDef | Module, reference: Method, mode: MatchMode = EXACT
) -> Iterator[Method]:
    """Find methods matching ``reference`` within a type or a module.

    Raises:
        TypeError: If ``scope`` is neither a TypeDef nor a Module.
    """
    if isinstance(scope, Module):
        return find_in_module(scope, reference, mode)
    if isinstance(scope, TypeDef):
        return find_in_type(scope, reference, mode)
    raise TypeError(f"Search scope must be a TypeDef or Module, got {type(scope).__name__}")
