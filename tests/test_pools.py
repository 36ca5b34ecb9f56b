"""
Tests for the mastery partition.
"""

import pytest

from core.quiz import MasteryPartition, Pool


class TestMasteryPartition:

    def test_fresh_partition_is_all_unseen(self):
        partition = MasteryPartition.fresh([1, 2, 3])

        assert partition.unseen == {1, 2, 3}
        assert partition.wrong == set()
        assert partition.correct == set()
        assert partition.is_consistent([1, 2, 3])

    def test_move_to_removes_from_other_pools(self):
        partition = MasteryPartition.fresh([1, 2, 3])

        partition.move_to(2, Pool.WRONG)
        partition.move_to(2, Pool.CORRECT)

        assert partition.correct == {2}
        assert 2 not in partition.unseen
        assert 2 not in partition.wrong
        assert partition.is_consistent([1, 2, 3])

    @pytest.mark.parametrize("start,is_correct,expected", [
        (Pool.UNSEEN, True, Pool.CORRECT),
        (Pool.UNSEEN, False, Pool.WRONG),
        (Pool.WRONG, True, Pool.CORRECT),
        (Pool.CORRECT, False, Pool.WRONG),
        (Pool.WRONG, False, Pool.WRONG),
        (Pool.CORRECT, True, Pool.CORRECT),
    ])
    def test_record_answer_transitions(self, start, is_correct, expected):
        partition = MasteryPartition.fresh([1, 2, 3, 4])
        partition.move_to(1, start)

        partition.record_answer(1, is_correct)

        assert 1 in partition.pool(expected)
        assert partition.is_consistent([1, 2, 3, 4])

    def test_inconsistent_partition_detected(self):
        partition = MasteryPartition(unseen={1, 2}, wrong={2}, correct={3})

        assert not partition.is_consistent([1, 2, 3])
        assert not MasteryPartition.fresh([1, 2]).is_consistent([1, 2, 3])

    def test_sizes(self):
        partition = MasteryPartition(unseen={1}, wrong={2, 3}, correct=set())

        assert partition.sizes() == {Pool.UNSEEN: 1, Pool.WRONG: 2, Pool.CORRECT: 0}
