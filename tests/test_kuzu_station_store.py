"""Kuzu-specific behaviour of KuzuStationStore.

Test categories:
- TestKuzuSchema: schema creation is idempotent across reopen
- TestKuzuIdSequence: ids stay unique across reopen and failed inserts
- TestKuzuStorage: each road is stored once, written and removed from either end
"""

from __future__ import annotations

import pytest

from station_graph import Connection, KuzuStationStore, Station


class TestKuzuSchema:
    def test_reopen_keeps_stations_and_roads(self, tmp_path):
        db_path = tmp_path / "reopen_db"
        first = KuzuStationStore(db_path=db_path, store_id="first")
        a = first.add_station("A", 5.0)
        b = first.add_station("B", 3.0)
        first.add_connection(a, b, 2.5)
        first.close()

        second = KuzuStationStore(db_path=db_path, store_id="second")
        try:
            assert second.list_stations() == [Station(0, "A", 5.0), Station(1, "B", 3.0)]
            assert second.neighbors(b) == [(a, 2.5)]
        finally:
            second.close()


class TestKuzuIdSequence:
    def test_removed_id_not_reused_after_reopen(self, tmp_path):
        db_path = tmp_path / "sequence_db"
        first = KuzuStationStore(db_path=db_path)
        first.add_station("A", 5.0)
        last = first.add_station("B", 3.0)
        first.remove_station(last)
        first.close()

        second = KuzuStationStore(db_path=db_path)
        try:
            assert second.add_station("C", 4.0) == last + 1
        finally:
            second.close()

    def test_in_memory_store_starts_at_zero(self):
        store = KuzuStationStore()
        try:
            assert store.add_station("A", 1.0) == 0
        finally:
            store.close()

    def test_failed_insert_leaves_sequence_unchanged(self):
        store = KuzuStationStore()
        try:
            store._conn.execute(
                "CREATE (:Station {station_id: 0, name: 'X', price: 1.0})"
            )
            with pytest.raises(RuntimeError):
                store.add_station("A", 1.0)
            rows = store._rows("MATCH (q:IdSequence) RETURN q.next_id")
            assert rows == [[0]]
            assert store._next_id == 0
            assert store.list_stations() == [Station(0, "X", 1.0)]
        finally:
            store.close()


class TestKuzuStorage:
    def test_reverse_insert_is_normalised(self):
        store = KuzuStationStore()
        try:
            store.add_station("A", 1.0)
            store.add_station("B", 1.0)
            store.add_connection(1, 0, 4.0)
            assert store.list_connections() == [Connection(0, 1, 4.0)]
            assert store.neighbors(0) == [(1, 4.0)]
            assert store.neighbors(1) == [(0, 4.0)]
        finally:
            store.close()

    def test_readd_updates_single_road(self):
        store = KuzuStationStore()
        try:
            store.add_station("A", 1.0)
            store.add_station("B", 1.0)
            store.add_connection(0, 1, 4.0)
            store.add_connection(0, 1, 6.0)
            assert store.list_connections() == [Connection(0, 1, 6.0)]
        finally:
            store.close()

    def test_remove_connection_added_in_reverse(self):
        store = KuzuStationStore()
        try:
            store.add_station("A", 1.0)
            store.add_station("B", 1.0)
            store.add_connection(1, 0, 4.0)
            store.remove_connection(0, 1)
            assert store.neighbors(0) == []
            assert store.neighbors(1) == []
            assert store.list_connections() == []
        finally:
            store.close()

    def test_remove_connection_named_in_reverse(self):
        store = KuzuStationStore()
        try:
            store.add_station("A", 1.0)
            store.add_station("B", 1.0)
            store.add_connection(0, 1, 4.0)
            store.remove_connection(1, 0)
            assert store.neighbors(0) == []
            assert store.neighbors(1) == []
        finally:
            store.close()

    def test_readd_in_reverse_updates_weight(self):
        store = KuzuStationStore()
        try:
            store.add_station("A", 1.0)
            store.add_station("B", 1.0)
            store.add_connection(0, 1, 4.0)
            store.add_connection(1, 0, 7.0)
            assert store.list_connections() == [Connection(0, 1, 7.0)]
            assert store.neighbors(1) == [(0, 7.0)]
        finally:
            store.close()
