#!/usr/bin/env python3
"""Verification script for dual-backend architecture.

Demonstrates that the in-memory and Kuzu stores give the same answers.
"""

from station_graph import (
    bounded_cheapest,
    breadth_first,
    create_station_store,
    depth_first,
    dijkstra,
    nearest_station,
    shortest_distances,
)


def run_backend(backend_name: str) -> dict:
    """Build the same network on one backend and collect query results."""
    print(f"\n{'='*60}")
    print(f"Testing {backend_name.upper()} Backend")
    print('='*60)

    store = create_station_store(backend_name, store_id=f"verify-{backend_name}")
    print(f"✓ Created {backend_name} store")

    for i in range(10):
        store.add_station(f"Station {i}", 60.0 + (i * 7) % 11)
    for i in range(9):
        store.add_connection(i, i + 1, 1.0 + (i % 3))
    store.add_connection(0, 5, 4.0)
    store.add_connection(2, 8, 2.5)
    print(f"✓ Added {len(store)} stations, {len(store.list_connections())} roads")

    results = {
        "bfs": list(breadth_first(store, 0)),
        "dfs": list(depth_first(store, 0)),
        "dijkstra": dijkstra(store, 0, 9),
        "distances": shortest_distances(store, 0),
        "cheapest_2": bounded_cheapest(store, 0, 2),
        "nearest": nearest_station(store, 4),
    }
    for key, value in results.items():
        print(f"✓ {key}: {value}")

    store.remove_station(5)
    results["after_removal"] = dijkstra(store, 0, 9)
    print(f"✓ after removing station 5: {results['after_removal']}")

    store.close()
    return results


def main():
    memory = run_backend("memory")
    kuzu = run_backend("kuzu")

    print(f"\n{'='*60}")
    mismatches = [key for key in memory if memory[key] != kuzu[key]]
    if mismatches:
        print(f"✗ Backends disagree on: {', '.join(mismatches)}")
        return 1
    print("✓ Both backends returned identical results")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
