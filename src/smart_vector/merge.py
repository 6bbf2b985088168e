from typing import Callable, Mapping, TypeVar

K = TypeVar("K")
V = TypeVar("V")


def merged(lhs: Mapping[K, V],
           rhs: Mapping[K, V],
           on_intersection: Callable[[V, V], V],
           merge_into_self: bool = False,
           keep_unmatched: bool = True) -> dict[K, V]:
    """
    Combine two mappings into a new dict.

    Keys present in both mappings map to on_intersection(base_value, addendum_value).
    Keys present in only one mapping keep their value, or are dropped when
    keep_unmatched is False.

    The larger mapping is used as the base and the smaller one is iterated into it,
    unless merge_into_self forces lhs to be the base. Which side is the base decides
    the argument order passed to on_intersection, so non-commutative operators
    should be used with merge_into_self=True.

    Args:
        lhs: First mapping, never mutated.
        rhs: Second mapping, never mutated.
        on_intersection: Binary operator applied to values of shared keys.
        merge_into_self: Always use lhs as the base.
        keep_unmatched: Keep keys that appear in only one of the mappings.

    Returns:
        The merged dict.
    """
    if merge_into_self or len(lhs) > len(rhs):
        base, addendum = lhs, rhs
    else:
        base, addendum = rhs, lhs

    if not keep_unmatched:
        return {key: on_intersection(base[key], value) for key, value in addendum.items() if key in base}

    result = dict(base)
    for key, value in addendum.items():
        if key in result:
            result[key] = on_intersection(result[key], value)
        else:
            result[key] = value
    return result
