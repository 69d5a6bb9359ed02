"""
Tests for reply formatting.
"""

import pytest

from inzo_bot.commands import formatting
from inzo_bot.models import Deposit, Profile, Withdrawal


class TestDisplay:
    """Tests for placeholder handling."""

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_missing_values_use_default(self, value):
        """Test None and blank values render the placeholder."""
        assert formatting.display(value) == "N/A"
        assert formatting.display(value, "Unknown") == "Unknown"

    def test_value_is_html_escaped(self):
        """Test store values are escaped for HTML parse mode."""
        assert formatting.display("<b>Tom & Jerry</b>") == "&lt;b&gt;Tom &amp; Jerry&lt;/b&gt;"

    @pytest.mark.parametrize("value,expected", [
        (1000, "₹1000"),
        (1000.0, "₹1000"),
        (1500.5, "₹1500.5"),
        (0.0000001, "₹0.0000001"),
        ("250.00", "₹250"),
        (None, "₹0"),
        (0, "₹0"),
    ])
    def test_format_amount(self, value, expected):
        """Test amounts render with the rupee glyph."""
        assert formatting.format_amount(value) == expected


class TestDeposits:
    """Tests for the /deposits reply."""

    def test_empty(self):
        """Test empty list renders the fixed text."""
        assert formatting.format_deposits([]) == "✅ No pending deposits!"

    def test_entry_layout(self):
        """Test a deposit renders name, amount, UTR and phone."""
        deposit = Deposit(
            amount=500,
            utr_number="UTR123",
            profile=Profile(full_name="Asha", phone="+911234"),
        )

        text = formatting.format_deposits([deposit])

        assert text == (
            "💰 <b>Pending Deposits:</b>\n\n"
            "1. <b>Asha</b>\n"
            "   Amount: ₹500\n"
            "   UTR: UTR123\n"
            "   Phone: +911234\n\n"
        )

    def test_missing_fields_use_placeholders(self):
        """Test missing deposit fields never render as None."""
        text = formatting.format_deposits([Deposit(amount=100, profile=None)])

        assert "<b>Unknown</b>" in text
        assert "UTR: N/A" in text
        assert "Phone: N/A" in text
        assert "None" not in text

    def test_at_most_five_entries(self):
        """Test the list is capped at five entries."""
        deposits = [Deposit(amount=i, profile=Profile(full_name=f"User {i}")) for i in range(8)]

        text = formatting.format_deposits(deposits)

        assert "5. <b>User 4</b>" in text
        assert "6." not in text


class TestWithdrawals:
    """Tests for the /withdrawals reply."""

    def test_empty(self):
        """Test empty list renders the fixed text."""
        assert formatting.format_withdrawals([]) == "✅ No pending withdrawals!"

    def test_entry_with_placeholders(self):
        """Test a withdrawal renders bank and account with placeholders."""
        withdrawal = Withdrawal(amount=2500, bank_name="SBI", profile=Profile(phone="+91999"))

        text = formatting.format_withdrawals([withdrawal])

        assert text.startswith("💸 <b>Pending Withdrawals:</b>\n\n")
        assert "1. <b>Unknown</b>\n" in text
        assert "   Amount: ₹2500\n" in text
        assert "   Bank: SBI\n" in text
        assert "   Account: N/A\n" in text
        assert "   Phone: +91999\n" in text


class TestUsers:
    """Tests for the /users reply."""

    def test_count_only_when_no_profiles(self):
        """Test only the total is shown without profiles."""
        assert formatting.format_users(0, []) == "👥 <b>Total Users: 0</b>\n\n"

    def test_defaults_for_balance_and_role(self):
        """Test balance defaults to 0 and role to user."""
        text = formatting.format_users(3, [Profile()])

        assert text.startswith("👥 <b>Total Users: 3</b>\n\n<b>Recent Users:</b>\n\n")
        assert "1. Unknown\n" in text
        assert "   Phone: N/A\n" in text
        assert "   Balance: ₹0\n" in text
        assert "   Role: user\n" in text

    def test_admin_role_and_balance(self):
        """Test stored role and balance are shown as is."""
        text = formatting.format_users(1, [Profile(full_name="Root", balance=99.5, role="admin")])

        assert "Balance: ₹99.5" in text
        assert "Role: admin" in text


class TestSummaries:
    """Tests for count-based replies."""

    def test_pending_requests_defaults_to_zero(self):
        """Test missing counts render as 0."""
        assert formatting.format_pending_requests(None, None) == (
            "📊 <b>Pending Requests:</b>\n\n💰 Deposits: 0\n💸 Withdrawals: 0"
        )

    def test_stats_order(self):
        """Test stats lines keep their documented order."""
        assert formatting.format_stats(12, 3, 1, 5) == (
            "📊 <b>System Statistics:</b>\n\n"
            "👥 Total Users: 12\n"
            "💰 Pending Deposits: 3\n"
            "💸 Pending Withdrawals: 1\n"
            "📈 Active Investments: 5"
        )

    def test_maintenance_mode(self):
        """Test the ON and OFF indicators."""
        assert formatting.format_maintenance_mode(True) == "🔧 <b>Maintenance Mode:</b> 🔴 ON"
        assert formatting.format_maintenance_mode(False) == "🔧 <b>Maintenance Mode:</b> 🟢 OFF"
