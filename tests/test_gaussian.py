"""Tests for the Gaussian moment accumulator."""

import asyncio
import math
import random
from dataclasses import astuple

import pytest

from generators import gaussian, gaussian_close, samples, triples
from monoidal import Gaussian, InsufficientSamplesError, Tolerance, concat, fold_map
from monoidal.combinators import commutative_monoid_violations


def _tree_reduce(parts: list[Gaussian]) -> Gaussian:
    """Reduce pairwise, level by level."""
    if not parts:
        return Gaussian.zero()
    while len(parts) > 1:
        parts = [
            Gaussian.op(parts[i], parts[i + 1]) if i + 1 < len(parts) else parts[i]
            for i in range(0, len(parts), 2)
        ]
    return parts[0]


# -- concrete scenario ----------------------------------------------------------


def test_sequential_fold_of_four_samples() -> None:
    g = Gaussian.from_samples([1.0, 2.0, 3.0, 4.0])

    assert g.count == 4
    assert g.mean() == 2.5
    assert g.m2 == 5.0
    assert g.variance() == pytest.approx(5.0 / 3.0)


def test_merge_of_two_halves_is_exact() -> None:
    a = Gaussian.from_samples([1.0, 2.0])
    b = Gaussian.from_samples([3.0, 4.0])
    assert (a.count, a.m1, a.m2) == (2, 1.5, 0.5)
    assert (b.count, b.m1, b.m2) == (2, 3.5, 0.5)

    merged = Gaussian.op(a, b)

    assert merged.count == 4
    assert merged.m1 == 2.5
    assert merged.m2 == 5.0


# -- construction and folding ---------------------------------------------------


def test_single_sample() -> None:
    g = Gaussian.of(7.5)
    assert astuple(g) == (1, 7.5, 0.0)
    assert g.mean() == 7.5


def test_empty_is_identity_value() -> None:
    g = Gaussian.empty()
    assert astuple(g) == (0, 0.0, 0.0)
    assert g.is_empty
    assert g.mean() == 0.0
    assert Gaussian.zero() == g
    assert Gaussian.from_samples([]) == g


def test_add_returns_new_value() -> None:
    g = Gaussian.of(1.0)
    h = g + 3.0
    assert astuple(g) == (1, 1.0, 0.0)
    assert astuple(h) == (2, 2.0, 2.0)


def test_iadd_folds_in_place() -> None:
    g = Gaussian()
    same = g
    g += 1.0
    g += 3.0
    assert g is same
    assert astuple(g) == (2, 2.0, 2.0)


def test_push_accepts_integers() -> None:
    g = Gaussian()
    g.push(2)
    g.push(4)
    assert g.mean() == 3.0
    assert g.variance() == 2.0


def test_adding_gaussian_is_not_a_sample() -> None:
    with pytest.raises(TypeError):
        Gaussian.of(1.0) + Gaussian.of(2.0)  # type: ignore[operator]


@pytest.mark.parametrize("bad", ["3.0", "nan", b"1", None])
def test_non_numeric_samples_rejected(bad) -> None:
    g = Gaussian.of(1.0)
    with pytest.raises(TypeError):
        g + bad
    with pytest.raises(TypeError):
        g += bad
    with pytest.raises(TypeError):
        Gaussian.from_samples([2.0, bad])
    with pytest.raises(TypeError):
        Gaussian.of(bad)
    assert (g.count, g.m1, g.m2) == (1, 1.0, 0.0)


def test_invalid_state_rejected() -> None:
    with pytest.raises(ValueError):
        Gaussian(count=-1)
    with pytest.raises(ValueError):
        Gaussian(count=0, m1=1.0)


def test_copy_is_independent() -> None:
    g = Gaussian.from_samples([1.0, 2.0])
    c = g.copy()
    c += 10.0
    assert g.count == 2
    assert c.count == 3


# -- merge ----------------------------------------------------------------------


@pytest.mark.parametrize("x,y,z", triples(gaussian, count=30, seed=40))
def test_gaussian_monoid_laws(x: Gaussian, y: Gaussian, z: Gaussian) -> None:
    assert commutative_monoid_violations(Gaussian, x, y, z, eq=gaussian_close(Tolerance())) == []


@pytest.mark.parametrize("seed", range(10))
def test_merge_with_empty_is_field_for_field(seed: int) -> None:
    g = gaussian(random.Random(seed))

    left = Gaussian.op(Gaussian.zero(), g)
    right = Gaussian.op(g, Gaussian.zero())

    assert astuple(left) == astuple(g)
    assert astuple(right) == astuple(g)
    assert left is not g
    assert right is not g


def test_merge_of_two_empties_is_empty() -> None:
    assert astuple(Gaussian.op(Gaussian(), Gaussian())) == (0, 0.0, 0.0)


def test_merge_does_not_mutate_operands() -> None:
    a = Gaussian.from_samples([1.0, 5.0])
    b = Gaussian.from_samples([2.0, 9.0, 4.0])
    before = (astuple(a), astuple(b))

    a.merge(b)

    assert (astuple(a), astuple(b)) == before


@pytest.mark.parametrize("seed", range(20))
def test_all_accumulation_strategies_agree(seed: int) -> None:
    rng = random.Random(seed)
    xs = samples(rng, max_len=1000)
    chunk = rng.randint(1, 16)
    chunks = [xs[i : i + chunk] for i in range(0, len(xs), chunk)]

    by_hand = Gaussian()
    for x in xs:
        by_hand = by_hand + x
    strategies = [
        Gaussian.from_samples(xs),
        by_hand,
        fold_map(Gaussian, xs, Gaussian.of),
        concat(Gaussian, [fold_map(Gaussian, c, Gaussian.of) for c in chunks]),
        concat(Gaussian, [Gaussian.from_samples(c) for c in chunks]),
        _tree_reduce([Gaussian.from_samples(c) for c in chunks]),
    ]

    for left, right in zip(strategies, strategies[1:]):
        assert left == right


@pytest.mark.parametrize("seed", range(10))
def test_shuffled_chunks_in_any_order(seed: int) -> None:
    rng = random.Random(100 + seed)
    xs = samples(rng, max_len=1000)
    sequential = Gaussian.from_samples(xs)

    shuffled = list(xs)
    rng.shuffle(shuffled)
    pieces = []
    i = 0
    while i < len(shuffled):
        size = rng.randint(1, 50)
        pieces.append(shuffled[i : i + size])
        i += size
    partials = [Gaussian.from_samples(c) for c in pieces]
    rng.shuffle(partials)

    assert concat(Gaussian, partials) == sequential
    assert _tree_reduce(partials) == sequential


@pytest.mark.asyncio
async def test_parallel_chunks_merge_to_sequential() -> None:
    rng = random.Random(7)
    xs = [rng.gauss(50.0, 12.0) for _ in range(20_000)]
    chunks = [xs[i : i + 997] for i in range(0, len(xs), 997)]

    partials = await asyncio.gather(
        *(asyncio.to_thread(Gaussian.from_samples, c) for c in chunks)
    )

    merged = _tree_reduce(list(partials))
    assert merged == Gaussian.from_samples(xs)
    assert merged.mean() == pytest.approx(50.0, abs=0.5)
    assert merged.stddev() == pytest.approx(12.0, rel=0.05)


def test_stable_with_large_offset() -> None:
    offset = 1e9
    n = 200_000
    g = Gaussian()
    for i in range(n):
        g += offset + (i % 10)

    assert g.count == n
    assert g.mean() == pytest.approx(offset + 4.5, rel=1e-12)
    assert g.variance() == pytest.approx(82.5 * (n // 10) / (n - 1), rel=1e-6)

    halves = Gaussian.op(
        Gaussian.from_samples(offset + (i % 10) for i in range(n // 2)),
        Gaussian.from_samples(offset + (i % 10) for i in range(n // 2, n)),
    )
    assert halves.variance() == pytest.approx(g.variance(), rel=1e-6)


# -- derived statistics -----------------------------------------------------------


@pytest.mark.parametrize("samples_", [[], [3.0]])
def test_variance_requires_two_samples(samples_: list[float]) -> None:
    g = Gaussian.from_samples(samples_)
    with pytest.raises(InsufficientSamplesError) as info:
        g.variance()
    assert info.value.count == len(samples_)


@pytest.mark.parametrize("method", ["stddev", "pdf", "cdf"])
def test_derived_statistics_require_two_samples(method: str) -> None:
    g = Gaussian.of(1.0)
    with pytest.raises(InsufficientSamplesError):
        fn = getattr(g, method)
        fn() if method == "stddev" else fn(0.0)


def test_pdf_and_cdf() -> None:
    g = Gaussian.from_samples([1.0, 2.0, 3.0, 4.0])
    v = 5.0 / 3.0

    assert g.cdf(2.5) == pytest.approx(0.5)
    assert g.pdf(2.5) == pytest.approx(1.0 / math.sqrt(2.0 * math.pi * v))
    assert g.pdf(1.0) == pytest.approx(g.pdf(4.0))
    assert g.cdf(2.5 + math.sqrt(v)) == pytest.approx(0.8413447, rel=1e-6)
    assert g.cdf(-100.0) == pytest.approx(0.0, abs=1e-12)
    assert g.stddev() == pytest.approx(math.sqrt(v))


def test_equality_uses_tolerance() -> None:
    a = Gaussian(count=3, m1=1.0, m2=2.0)
    assert a == Gaussian(count=3, m1=1.0 + 1e-9, m2=2.0 * (1 + 1e-7))
    assert a != Gaussian(count=4, m1=1.0, m2=2.0)
    assert a != Gaussian(count=3, m1=1.1, m2=2.0)
    assert a != "not a gaussian"


def test_gaussian_is_unhashable() -> None:
    with pytest.raises(TypeError):
        hash(Gaussian())
