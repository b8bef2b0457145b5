from scopeplot.tracer import nearest_point_index


def identity(key, value):
    return key, value


def test_empty_points():
    assert nearest_point_index([], (0.0, 0.0), identity) is None


def test_nearest_in_both_axes():
    points = [(0.0, 0.0), (1.0, 1.0), (2.0, 4.0)]
    assert nearest_point_index(points, (1.1, 0.9), identity) == 1
    assert nearest_point_index(points, (2.0, 3.5), identity) == 2


def test_tie_keeps_first():
    points = [(0.0, 1.0), (1.0, 0.0)]
    assert nearest_point_index(points, (0.0, 0.0), identity) == 0


def test_pixel_scaling_changes_result():
    points = [(0.0, 1.0), (1.0, 0.0)]
    assert nearest_point_index(points, (0.0, 0.0), lambda k, v: (k, v * 100)) == 1


def test_key_range_includes_one_neighbour():
    points = [(float(k), 0.0) for k in range(10)]
    assert nearest_point_index(points, (9.0, 0.0), identity, (0.0, 2.0)) == 3
    assert nearest_point_index(points, (0.0, 0.0), identity, (5.0, 7.0)) == 4


def test_key_range_covering_everything_matches_full_search():
    points = [(float(k), float(k * k)) for k in range(6)]
    target = (3.2, 9.5)
    full = nearest_point_index(points, target, identity)
    assert nearest_point_index(points, target, identity, (-100.0, 100.0)) == full


def test_all_points_unreachable_returns_zero():
    points = [(0.0, 0.0), (1.0, 1.0)]
    assert nearest_point_index(points, (0.5, 0.5), lambda k, v: (float("inf"), v)) == 0