"""Pytest configuration and fixtures for station-graph-lib tests."""

import pytest

from station_graph import create_station_store


@pytest.fixture(params=["memory", "kuzu"])
def store(request, tmp_path):
    """Fresh, empty store for each backend.

    The Kuzu store gets its own database directory under tmp_path so
    tests never share on-disk state.
    """
    if request.param == "kuzu":
        s = create_station_store("kuzu", db_path=tmp_path / "stations_db", store_id="test-store")
    else:
        s = create_station_store("memory", store_id="test-store")
    yield s
    s.close()


@pytest.fixture
def example_store(store):
    """Store holding the three-station example network.

    Graph structure:
        A(0, price 5) --2.0-- B(1, price 3) --1.0-- C(2, price 9)
    """
    store.add_station("A", 5.0)
    store.add_station("B", 3.0)
    store.add_station("C", 9.0)
    store.add_connection(0, 1, 2.0)
    store.add_connection(1, 2, 1.0)
    return store


@pytest.fixture
def city_store(store):
    """Larger network with a detour that is shorter than the direct road.

    Graph structure (weights on edges, prices in brackets):
        0 Depot[4.1] --10.0-- 1 Ridge[3.9]
        0 Depot      --1.0--- 2 Market[4.5] --2.0-- 1 Ridge
        1 Ridge      --4.0--- 3 Harbor[3.2]
        3 Harbor     --1.5--- 4 Airport[2.8]
        5 Island[1.0] (no roads)
    """
    for name, price in [
        ("Depot", 4.1),
        ("Ridge", 3.9),
        ("Market", 4.5),
        ("Harbor", 3.2),
        ("Airport", 2.8),
        ("Island", 1.0),
    ]:
        store.add_station(name, price)
    store.add_connection(0, 1, 10.0)
    store.add_connection(0, 2, 1.0)
    store.add_connection(2, 1, 2.0)
    store.add_connection(1, 3, 4.0)
    store.add_connection(3, 4, 1.5)
    return store
