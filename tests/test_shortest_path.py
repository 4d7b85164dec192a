"""Tests for Dijkstra-based queries.

Test categories:
- TestDijkstra: example network, detours, idempotence, ties, failures
- TestShortestDistances: full single-source distance map
- TestNearestStation: nearest reachable station and its path
"""

from __future__ import annotations

import math

import pytest

from station_graph import (
    NoneReachableError,
    PathResult,
    StationNotFoundError,
    UnreachableError,
    dijkstra,
    nearest_station,
    shortest_distances,
)


class TestDijkstra:
    def test_example_network(self, example_store):
        assert dijkstra(example_store, 0, 2) == PathResult(3.0, (0, 1, 2))

    def test_reverse_direction(self, example_store):
        assert dijkstra(example_store, 2, 0) == PathResult(3.0, (2, 1, 0))

    def test_detour_beats_direct_road(self, city_store):
        assert dijkstra(city_store, 0, 1) == PathResult(3.0, (0, 2, 1))

    def test_long_path(self, city_store):
        assert dijkstra(city_store, 0, 4) == PathResult(8.5, (0, 2, 1, 3, 4))

    def test_same_station(self, city_store):
        assert dijkstra(city_store, 5, 5) == PathResult(0.0, (5,))

    def test_idempotent(self, city_store):
        assert dijkstra(city_store, 4, 0) == dijkstra(city_store, 4, 0)

    def test_equal_paths_break_ties_by_smallest_id(self, store):
        for name in "SABT":
            store.add_station(name, 1.0)
        store.add_connection(0, 2, 1.0)
        store.add_connection(0, 1, 1.0)
        store.add_connection(2, 3, 1.0)
        store.add_connection(1, 3, 1.0)
        assert dijkstra(store, 0, 3) == PathResult(2.0, (0, 1, 3))

    def test_zero_weight_roads(self, store):
        for name in "ABC":
            store.add_station(name, 1.0)
        store.add_connection(0, 1, 0.0)
        store.add_connection(1, 2, 0.0)
        assert dijkstra(store, 0, 2) == PathResult(0.0, (0, 1, 2))

    def test_path_total_overflowing_to_infinity_is_still_reachable(self, store):
        for name in "ABC":
            store.add_station(name, 1.0)
        store.add_connection(0, 1, 1e308)
        store.add_connection(1, 2, 1e308)
        result = dijkstra(store, 0, 2)
        assert result.path == (0, 1, 2)
        assert result.total_weight == math.inf
        assert 2 in shortest_distances(store, 0)

    def test_disconnected(self, city_store):
        with pytest.raises(UnreachableError):
            dijkstra(city_store, 0, 5)

    def test_removing_only_road_makes_unreachable(self, city_store):
        city_store.remove_connection(3, 4)
        for source in range(4):
            with pytest.raises(UnreachableError):
                dijkstra(city_store, source, 4)

    def test_missing_station(self, example_store):
        with pytest.raises(StationNotFoundError):
            dijkstra(example_store, 0, 9)

    def test_does_not_mutate_store(self, city_store):
        before = (city_store.list_stations(), city_store.list_connections())
        dijkstra(city_store, 0, 4)
        assert (city_store.list_stations(), city_store.list_connections()) == before


class TestShortestDistances:
    def test_city_distances(self, city_store):
        assert shortest_distances(city_store, 0) == {
            0: 0.0,
            1: 3.0,
            2: 1.0,
            3: 7.0,
            4: 8.5,
        }

    def test_isolated_station(self, city_store):
        assert shortest_distances(city_store, 5) == {5: 0.0}

    def test_missing_start(self, store):
        with pytest.raises(StationNotFoundError):
            shortest_distances(store, 0)


class TestNearestStation:
    def test_nearest_by_weight(self, city_store):
        result = nearest_station(city_store, 0)
        assert result.station.name == "Market"
        assert result.distance == 1.0
        assert result.path == (0, 2)

    def test_nearest_through_detour(self, city_store):
        city_store.remove_connection(1, 3)
        city_store.add_connection(3, 0, 50.0)
        result = nearest_station(city_store, 4)
        assert result.station.station_id == 3
        assert result.distance == 1.5

    def test_tie_goes_to_smallest_id(self, store):
        for name in "SXY":
            store.add_station(name, 1.0)
        store.add_connection(0, 2, 2.0)
        store.add_connection(0, 1, 2.0)
        assert nearest_station(store, 0).station.station_id == 1

    def test_none_reachable(self, city_store):
        with pytest.raises(NoneReachableError):
            nearest_station(city_store, 5)

    def test_missing_start(self, store):
        with pytest.raises(StationNotFoundError):
            nearest_station(store, 0)
