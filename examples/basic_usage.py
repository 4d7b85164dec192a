"""Basic usage example for station-graph-lib."""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


from station_graph import (
    UnreachableError,
    bounded_cheapest,
    breadth_first,
    create_station_store,
    dijkstra,
    nearest_station,
)


def main():
    print("=" * 60)
    print("station-graph-lib - Basic Usage Example")
    print("=" * 60)

    # 1. Build the network
    print("\n1. Adding stations...")
    store = create_station_store("memory")
    for name, price in [
        ("Azezo", 72.5),
        ("Maraki", 70.9),
        ("Piassa", 74.1),
        ("Arada", 69.8),
        ("Fasil", 71.2),
    ]:
        sid = store.add_station(name, price)
        print(f"   {sid}: {name} ({price} per litre)")

    print("\n2. Connecting stations...")
    for a, b, km in [(0, 1, 4.0), (1, 2, 2.5), (0, 3, 9.0), (2, 3, 3.0)]:
        store.add_connection(a, b, km)
        print(f"   {a} <-> {b}: {km} km")

    # 3. Traversal
    print("\n3. Breadth-first from Azezo:")
    names = [store.get_station(sid).name for sid in breadth_first(store, 0)]
    print(f"   {' -> '.join(names)}")

    # 4. Shortest path
    print("\n4. Shortest path Azezo -> Arada:")
    result = dijkstra(store, 0, 3)
    print(f"   {result.total_weight} km via {list(result.path)}")

    try:
        dijkstra(store, 0, 4)
    except UnreachableError as e:
        print(f"   Fasil: {e}")

    # 5. Cheapest within two hops
    print("\n5. Cheapest within 2 hops of Azezo:")
    cheapest = bounded_cheapest(store, 0, 2)
    print(f"   {cheapest.name} at {cheapest.price}")

    # 6. Nearest
    print("\n6. Nearest station to Piassa:")
    nearest = nearest_station(store, 2)
    print(f"   {nearest.station.name}, {nearest.distance} km")

    store.close()
    print("\n" + "=" * 60)


if __name__ == "__main__":
    main()
