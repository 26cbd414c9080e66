"""
Test FERS benefit calculations, with attention to eligibility boundaries.
"""

import pytest

from ferex.pension import (
    calculate_annuity_supplement,
    calculate_fers_cola,
    calculate_fers_pension,
    calculate_social_security_benefit,
    pension_multiplier,
)


class TestPensionMultiplier:
    """The enhanced 1.1% multiplier needs age 62+ AND 20+ years."""

    @pytest.mark.parametrize("years, age, expected", [
        (20.0, 62, 0.011),
        (30.0, 70, 0.011),
        (19.999, 62, 0.01),
        (20.0, 61, 0.01),
        (19.0, 61, 0.01),
        (0.0, 62, 0.01),
    ])
    def test_branches(self, years, age, expected):
        assert pension_multiplier(years, age) == expected


class TestFersPension:

    def test_enhanced_at_exact_boundary(self):
        result = calculate_fers_pension(20.0, 100000, 62)
        assert result == 100000 * 20.0 * 0.011
        assert result == pytest.approx(22000)

    def test_just_short_of_twenty_years(self):
        result = calculate_fers_pension(19.999, 100000, 62)
        assert result == 100000 * 19.999 * 0.01
        assert result == pytest.approx(19999)

    def test_one_year_too_young(self):
        result = calculate_fers_pension(20.0, 100000, 61)
        assert result == pytest.approx(20000)

    def test_deterministic(self):
        results = {calculate_fers_pension(27.5, 123456.78, 63) for _ in range(5)}
        assert len(results) == 1

    def test_inputs_not_range_checked(self):
        # Negative service is the caller's problem; the formula still applies
        assert calculate_fers_pension(-5.0, 100000, 62) == pytest.approx(-5000)
        assert calculate_fers_pension(0.0, 100000, 62) == 0.0


class TestAnnuitySupplement:

    def test_service_rounds_up(self):
        # 24.2 years counts as 25
        assert calculate_annuity_supplement(24.2, 2000) == pytest.approx(2000 / 40 * 25)

    def test_whole_years(self):
        assert calculate_annuity_supplement(30, 1600) == pytest.approx(1200)


class TestSocialSecurity:

    def test_claim_at_fra(self):
        assert calculate_social_security_benefit(2500, 67, 67) == 2500

    def test_early_within_three_years(self):
        # 24 months early: 24 * 5/9 = 13.33% reduction
        expected = 2500 * (1 - (24 * 5 / 9) / 100)
        assert calculate_social_security_benefit(2500, 65, 67) == pytest.approx(expected)

    def test_claim_at_62(self):
        # 60 months early: 36 * 5/9 + 24 * 5/12 = 30% reduction
        assert calculate_social_security_benefit(2000, 62, 67) == pytest.approx(1400)

    def test_delayed_credits(self):
        # 36 months late: 24% increase
        assert calculate_social_security_benefit(2000, 70, 67) == pytest.approx(2480)


class TestFersCola:

    def test_no_cola_before_62(self):
        assert calculate_fers_cola(30000, 0.05, 61) == 0.0

    @pytest.mark.parametrize("inflation, applied", [
        (0.015, 0.015),
        (0.02, 0.02),
        (0.025, 0.02),
        (0.03, 0.02),
        (0.045, 0.035),
    ])
    def test_diet_cola_rules(self, inflation, applied):
        assert calculate_fers_cola(30000, inflation, 62) == pytest.approx(30000 * applied)
