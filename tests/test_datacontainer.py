from datetime import datetime

from plotviewer.datacontainer import DataContainer


def test_new_container_is_empty():
    data = DataContainer()
    assert data.is_empty()
    assert len(data) == 0
    assert list(data) == []


def test_append_keeps_order_and_converts_to_float():
    first = datetime(2021, 3, 4, 5, 6)
    second = datetime(2021, 3, 5)
    data = DataContainer()
    data.append(first, 3)
    data.append(second, 2.5)
    assert not data.is_empty()
    assert len(data) == 2
    assert list(data) == [(first, 3.0), (second, 2.5)]
    assert isinstance(data.points[0][1], float)


def test_clear_removes_points():
    data = DataContainer()
    data.append(datetime(2020, 1, 1), 1.0)
    data.clear()
    assert data.is_empty()
    assert data.points == []


def test_containers_do_not_share_points():
    a = DataContainer()
    b = DataContainer()
    a.append(datetime(2020, 1, 1), 1.0)
    assert len(b) == 0