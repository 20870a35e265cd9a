import pytest

from zkprims.polynomial import INFINITY, Polynomial
from zkprims.ristretto import Scalar


def s(n):
    return Scalar.from_int(n)


def test_from_coefficients_keeps_order():
    coefs = [Scalar.random(), Scalar.random()]
    poly = Polynomial(coefs)
    assert list(poly.coefficients) == coefs


def test_sample_exact_degree():
    assert Polynomial.sample_exact(3).degree() == 3
    assert len(Polynomial.sample_exact(3).coefficients) == 4


def test_sample_exact_infinity_is_zero_polynomial():
    zero = Polynomial.sample_exact(INFINITY)
    assert zero.degree() == INFINITY
    assert zero.coefficients == ()


def test_sample_exact_rejects_negative_degree():
    with pytest.raises(ValueError):
        Polynomial.sample_exact(-1)


def test_fixed_const_term():
    const_term = Scalar.random()
    poly = Polynomial.sample_exact_with_fixed_const_term(3, const_term)
    assert poly.degree() == 3
    assert poly.evaluate(Scalar.zero()) == const_term


def test_fixed_const_term_degree_zero():
    const_term = s(7)
    poly = Polynomial.sample_exact_with_fixed_const_term(0, const_term)
    assert poly.coefficients == (const_term,)
    assert poly.degree() == 0


def test_degree_examples():
    assert Polynomial([s(1), s(2)]).degree() == 1
    assert Polynomial([Scalar.zero()]).degree() == INFINITY
    assert Polynomial([s(1), s(0), s(0)]).degree() == 0


def test_degree_ordering_with_infinity():
    assert Polynomial([s(0)]).degree() > 65535


def test_evaluate_known_value():
    poly = Polynomial([s(1), s(2), s(3)])
    assert poly.evaluate(s(10)) == s(321)


def test_evaluate_matches_coefficients():
    poly = Polynomial.sample_exact(2)
    x = s(10)
    a = poly.coefficients
    assert poly.evaluate(x) == a[0] + a[1] * x + a[2] * x * x


def test_evaluate_bigint():
    poly = Polynomial.sample_exact(2)
    a = poly.coefficients
    x = s(10)
    assert poly.evaluate_bigint(10) == a[0] + a[1] * x + a[2] * x * x


def test_evaluate_cubic_at_random_point():
    poly = Polynomial.sample_exact(3)
    a = poly.coefficients
    x = Scalar.random()
    assert poly.evaluate(x) == a[0] + a[1] * x + a[2] * x * x + a[3] * x * x * x


def test_evaluate_many():
    poly = Polynomial([s(1), s(1)])
    assert list(poly.evaluate_many([s(10), s(11)])) == [s(11), s(12)]


def test_evaluate_many_bigint():
    poly = Polynomial([s(0), s(0), s(1)])
    assert list(poly.evaluate_many_bigint([10, 11])) == [s(100), s(121)]


def test_evaluate_empty_raises():
    with pytest.raises(ValueError):
        Polynomial([]).evaluate(s(1))


def test_lagrange_interpolation():
    f = Polynomial.sample_exact(3)
    xs = [s(1), s(2), s(3), s(4)]
    ys = [f.evaluate(x) for x in xs]
    f_15 = Scalar.zero()
    for j, y_j in enumerate(ys):
        f_15 = f_15 + y_j * Polynomial.lagrange_basis(s(15), j, xs)
    assert f_15 == f.evaluate(s(15))


def test_lagrange_basis_is_indicator_on_nodes():
    xs = [s(1), s(2), s(3)]
    assert Polynomial.lagrange_basis(s(2), 1, xs) == s(1)
    assert Polynomial.lagrange_basis(s(3), 1, xs) == Scalar.zero()


def test_lagrange_basis_duplicates_raise():
    with pytest.raises(ValueError):
        Polynomial.lagrange_basis(s(0), 0, [s(1), s(1)])


def test_lagrange_basis_index_out_of_range():
    with pytest.raises(IndexError):
        Polynomial.lagrange_basis(s(0), 3, [s(1), s(2)])


def test_mul_by_scalar():
    f = Polynomial.sample_exact(3)
    k = Scalar.random()
    g = f * k
    assert list(g.coefficients) == [c * k for c in f.coefficients]


def test_add():
    f = Polynomial.sample_exact(2)
    g = Polynomial.sample_exact(3)
    h = f + g
    x = s(10)
    assert h.evaluate(x) == f.evaluate(x) + g.evaluate(x)
    assert len(h.coefficients) == 4


def test_sub():
    f = Polynomial.sample_exact(2)
    g = Polynomial.sample_exact(3)
    h = f - g
    x = s(10)
    assert h.evaluate(x) == f.evaluate(x) - g.evaluate(x)


def test_sub_known_coefficients():
    f = Polynomial([s(5), s(1)])
    g = Polynomial([s(2), s(1), s(3)])
    assert (f - g).coefficients == (s(3), s(0), -s(3))
    assert (g - f).coefficients == (-s(3), s(0), s(3))