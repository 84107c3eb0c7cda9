"""Tests for service tiers and activation budgets."""

import pytest
from expert_router.core.tier import TIER_BUDGETS, Tier, budget_for


class TestBudgetFor:
    """Test tier to budget mapping."""

    @pytest.mark.parametrize(
        "tier,expected",
        [
            (Tier.NANO, 2),
            (Tier.STANDARD, 4),
            (Tier.PRO, 8),
            (Tier.MAX, 16),
        ],
    )
    def test_budget_values(self, tier, expected):
        """Test each tier maps to its fixed budget."""
        assert budget_for(tier) == expected

    def test_every_tier_has_budget(self):
        """Test the budget table covers every tier."""
        assert set(TIER_BUDGETS) == set(Tier)

    def test_budgets_positive(self):
        """Test all budgets are positive."""
        assert all(budget_for(tier) > 0 for tier in Tier)

    def test_budgets_grow_with_tier(self):
        """Test budgets increase from Nano to Max."""
        budgets = [budget_for(tier) for tier in Tier]
        assert budgets == sorted(budgets)


class TestTierParse:
    """Test resolving tiers from names."""

    def test_parse_lowercase(self):
        """Test parsing a lowercase name."""
        assert Tier.parse("standard") is Tier.STANDARD

    def test_parse_mixed_case(self):
        """Test parsing ignores case and surrounding spaces."""
        assert Tier.parse(" Pro ") is Tier.PRO

    def test_parse_tier_passthrough(self):
        """Test parsing an existing Tier returns it unchanged."""
        assert Tier.parse(Tier.MAX) is Tier.MAX

    def test_parse_unknown(self):
        """Test unknown names raise ValueError listing valid tiers."""
        with pytest.raises(ValueError, match="Unknown tier 'ultra'"):
            Tier.parse("ultra")
