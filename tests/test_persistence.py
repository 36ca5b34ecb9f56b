"""
Tests for best-effort mastery persistence.
"""

import json

from core.quiz import MasteryPartition, MasteryStore, SqlKeyValueStore
from core.quiz.persistence import decode_partition, encode_partition


class TestEncoding:

    def test_only_wrong_and_correct_are_stored(self):
        partition = MasteryPartition(unseen={1}, wrong={3, 2}, correct={4})

        data = json.loads(encode_partition(partition))

        assert data == {"wrong": [2, 3], "correct": [4]}

    def test_decode_derives_unseen_and_drops_stale_ids(self):
        raw = json.dumps({"wrong": [1, 99], "correct": [2, 100]})

        partition = decode_partition(raw, [1, 2, 3, 4])

        assert partition.wrong == {1}
        assert partition.correct == {2}
        assert partition.unseen == {3, 4}

    def test_decode_filters_malformed_ids(self):
        raw = json.dumps({"wrong": ["x", None, True, "3", "--2"], "correct": [2.0, {"id": 1}, "²"]})

        partition = decode_partition(raw, [1, 2, 3, 4])

        assert partition.wrong == {3}
        assert partition.correct == {2}
        assert partition.unseen == {1, 4}

    def test_id_in_both_lists_stays_wrong(self):
        raw = json.dumps({"wrong": [1], "correct": [1, 2]})

        partition = decode_partition(raw, [1, 2, 3])

        assert partition.wrong == {1}
        assert partition.correct == {2}
        assert partition.is_consistent([1, 2, 3])

    def test_missing_lists_treated_as_empty(self):
        partition = decode_partition("{}", [1, 2])

        assert partition.unseen == {1, 2}


class TestMasteryStore:

    def test_round_trip(self, store):
        partition = MasteryPartition(unseen={5}, wrong={1, 2}, correct={3, 4})

        assert store.save("kanji-5", partition).ok
        loaded = store.load("kanji-5", [1, 2, 3, 4, 5, 6])

        assert loaded.wrong == {1, 2}
        assert loaded.correct == {3, 4}
        assert loaded.unseen == {5, 6}

    def test_missing_key_gives_fresh_partition(self, store):
        loaded = store.load("vocab-4", [1, 2, 3, 4])

        assert loaded.unseen == {1, 2, 3, 4}
        assert not loaded.wrong and not loaded.correct

    def test_corrupt_payload_gives_fresh_partition(self, kv, store):
        kv.set("kanji-4", "{not json")

        loaded = store.load("kanji-4", [1, 2, 3, 4])

        assert loaded.unseen == {1, 2, 3, 4}

    def test_unparseable_ids_do_not_discard_record(self, kv, store):
        kv.set("kanji-4", json.dumps({"wrong": [1, "--2"], "correct": [3, "²"]}))

        loaded = store.load("kanji-4", [1, 2, 3, 4])

        assert loaded.wrong == {1}
        assert loaded.correct == {3}
        assert loaded.unseen == {2, 4}

    def test_non_object_payload_gives_fresh_partition(self, kv, store):
        kv.set("kanji-4", "[1, 2, 3]")

        loaded = store.load("kanji-4", [1, 2, 3, 4])

        assert loaded.unseen == {1, 2, 3, 4}

    def test_clear_removes_record(self, kv, store):
        store.save("kanji-4", MasteryPartition(wrong={1}, unseen={2, 3, 4}))

        assert store.clear("kanji-4").ok
        assert kv.get("kanji-4") is None
        assert store.load("kanji-4", [1, 2, 3, 4]).unseen == {1, 2, 3, 4}

    def test_backend_failures_are_not_raised(self, broken_store):
        partition = MasteryPartition.fresh([1, 2, 3, 4])

        loaded = broken_store.load("kanji-4", [1, 2, 3, 4])
        saved = broken_store.save("kanji-4", partition)
        cleared = broken_store.clear("kanji-4")

        assert loaded.unseen == {1, 2, 3, 4}
        assert not saved.ok and "unavailable" in saved.error
        assert not cleared.ok


class TestSqlKeyValueStore:

    def test_set_get_remove(self, sql_session_factory):
        kv = SqlKeyValueStore(sql_session_factory)

        kv.set("kanji-5", '{"wrong": [1], "correct": []}')
        kv.set("kanji-5", '{"wrong": [], "correct": [1]}')

        assert kv.get("kanji-5") == '{"wrong": [], "correct": [1]}'
        kv.remove("kanji-5")
        assert kv.get("kanji-5") is None

    def test_mastery_round_trip_through_sql(self, sql_session_factory):
        store = MasteryStore(SqlKeyValueStore(sql_session_factory))

        store.save("vocab-4", MasteryPartition(unseen={4}, wrong={1}, correct={2, 3}))
        loaded = store.load("vocab-4", [1, 2, 3, 4])

        assert loaded.wrong == {1}
        assert loaded.correct == {2, 3}
        assert loaded.unseen == {4}

    def test_remove_missing_key_is_noop(self, sql_session_factory):
        kv = SqlKeyValueStore(sql_session_factory)

        kv.remove("nothing-here")

        assert kv.get("nothing-here") is None
