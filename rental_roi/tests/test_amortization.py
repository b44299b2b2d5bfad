import math

from rental_roi.core.amortization import average_split, compute_monthly_payment


def test_fixed_payment_known_case():
    # 52.5k @2% over 30y, reference amortization calculators give 194.05
    payment = compute_monthly_payment(0.02, 30, 52_500)
    assert math.isclose(payment, 194.05, abs_tol=0.01)


def test_fixed_payment_larger_loan():
    # Known approximate monthly payment for 100k @5% over 20y ~ 659.96
    payment = compute_monthly_payment(0.05, 20, 100_000)
    assert math.isclose(payment, 659.96, abs_tol=0.01)


def test_no_principal_or_term_means_no_payment():
    assert compute_monthly_payment(0.02, 30, 0) == 0
    assert compute_monthly_payment(0.02, 30, -1_000) == 0
    assert compute_monthly_payment(0.02, 0, 50_000) == 0
    assert compute_monthly_payment(0.02, -5, 50_000) == 0


def test_zero_rate_is_straight_line():
    assert math.isclose(compute_monthly_payment(0.0, 25, 90_000), 90_000 / 300)
    assert math.isclose(compute_monthly_payment(-0.01, 10, 12_000), 100.0)


def test_tiny_rate_does_not_divide_by_zero():
    # 1 + r rounds to 1.0 at this rate
    payment = compute_monthly_payment(1e-17, 30, 52_500)
    assert math.isclose(payment, 52_500 / 360, rel_tol=1e-9)


def test_small_rate_long_term_stays_close_to_straight_line():
    payment = compute_monthly_payment(1e-12, 40, 100_000)
    assert math.isclose(payment, 100_000 / 480, rel_tol=1e-9)
    assert payment > 100_000 / 480


def test_average_split_spreads_interest_evenly():
    payment = compute_monthly_payment(0.02, 30, 52_500)
    interest, principal = average_split(payment, 52_500, 30)
    assert math.isclose(interest, (payment * 360 - 52_500) / 360)
    assert math.isclose(interest + principal, payment)
    # principal part repays the loan exactly over the term
    assert math.isclose(principal * 360, 52_500)


def test_average_split_without_loan():
    assert average_split(0.0, 0.0, 30) == (0.0, 0.0)
