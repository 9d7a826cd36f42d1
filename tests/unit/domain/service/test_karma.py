"""Unit tests for the community creation karma gate."""

import pytest

from agora.domain.error import InsufficientKarmaError
from agora.domain.service import assert_can_create_community


class TestAssertCanCreateCommunity:
    """Tests for assert_can_create_community."""

    def test_karma_at_threshold_passes(self):
        assert_can_create_community(50)

    def test_karma_above_threshold_passes(self):
        assert_can_create_community(1000)

    def test_karma_one_below_threshold_fails(self):
        with pytest.raises(InsufficientKarmaError) as exc_info:
            assert_can_create_community(49)

        assert exc_info.value.karma == 49
        assert exc_info.value.required == 50

    def test_negative_karma_fails(self):
        with pytest.raises(InsufficientKarmaError):
            assert_can_create_community(-3)

    def test_custom_threshold(self):
        assert_can_create_community(10, threshold=10)
        with pytest.raises(InsufficientKarmaError, match="at least 11 karma"):
            assert_can_create_community(10, threshold=11)
