"""Unit tests for voting value objects."""

from uuid import UUID

import pytest
from pydantic import ValidationError

from campus.domain.error import InvalidArgumentError
from campus.domain.value import CounterField, VoteState, VoteType, parse_uuid


class TestVoteType:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("upvote", VoteType.UPVOTE),
            ("downvote", VoteType.DOWNVOTE),
            (VoteType.UPVOTE, VoteType.UPVOTE),
        ],
    )
    def test_parse(self, raw, expected):
        assert VoteType.parse(raw) is expected

    @pytest.mark.parametrize("raw", ["sideways", "UPVOTE", "", None, 1])
    def test_parse_rejects_unknown(self, raw):
        with pytest.raises(InvalidArgumentError):
            VoteType.parse(raw)


class TestCounterField:
    def test_allow_list(self):
        assert {field.value for field in CounterField} == {
            "upvotes",
            "downvotes",
            "comment_count",
            "member_count",
            "post_count",
            "total_reviews",
            "unread_by_buyer",
            "unread_by_seller",
        }


class TestVoteState:
    def test_counters_are_non_negative(self):
        with pytest.raises(ValidationError):
            VoteState(upvotes=-1, downvotes=0)

    def test_is_immutable(self):
        state = VoteState(upvotes=1, downvotes=0, user_vote=VoteType.UPVOTE)

        with pytest.raises(ValidationError):
            state.upvotes = 2


class TestParseUuid:
    def test_parses_string(self):
        raw = "6f1c8a0e-2a4b-4c6e-9d1f-3b5a7c9e0f12"

        assert parse_uuid(raw) == UUID(raw)

    @pytest.mark.parametrize("raw", ["not-a-uuid", "", "1234"])
    def test_rejects_malformed(self, raw):
        with pytest.raises(InvalidArgumentError, match="Malformed post id"):
            parse_uuid(raw, "post id")
