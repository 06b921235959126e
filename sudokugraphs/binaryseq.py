"""Binary sequences of fixed length with a fixed number of ones."""

from __future__ import annotations

from collections.abc import Iterator


def _check(n: int, k: int) -> None:
    if n < 0 or k < 0:
        raise ValueError("n and k must be non-negative")
    if k > n:
        raise ValueError(f"cannot place {k} ones in {n} positions")


def n_choose_k(n: int, k: int) -> int:
    """Return the binomial coefficient C(n, k)."""
    _check(n, k)
    k = min(k, n - k)
    result = 1
    for i in range(k):
        result = result * (n - i) // (i + 1)
    return result


def generate_sequences(n: int, k: int) -> Iterator[tuple[bool, ...]]:
    """Yield every length-``n`` sequence holding ``k`` ones.

    Sequences come in the order of a search that tries a one before a zero
    at each position, so the first is all ones followed by zeros.
    """
    _check(n, k)
    prefix: list[bool] = []

    def walk(pos: int, ones: int) -> Iterator[tuple[bool, ...]]:
        if pos == n:
            yield tuple(prefix)
            return
        if ones > 0:
            prefix.append(True)
            yield from walk(pos + 1, ones - 1)
            prefix.pop()
        if n - pos > ones:
            prefix.append(False)
            yield from walk(pos + 1, ones)
            prefix.pop()

    yield from walk(0, k)


def get_sequences(n: int, k: int) -> list[tuple[bool, ...]]:
    """Return all sequences of :func:`generate_sequences` as a list."""
    return list(generate_sequences(n, k))


def format_sequence(seq) -> str:
    """Render a sequence as a string of ``0`` and ``1`` digits."""
    return "".join("1" if bit else "0" for bit in seq)