from snake_arcade.config import WIDTH, HEIGHT, CELL_SIZE
from snake_arcade.geometry import Rect
from snake_arcade import collision


def test_boundary_is_fatal_on_every_edge():
    for head in ((-CELL_SIZE, 100), (WIDTH, 100), (100, -CELL_SIZE), (100, HEIGHT)):
        assert collision.hits_boundary([head])
        assert collision.is_fatal([head], [], [], False)


def test_inside_board_is_not_boundary():
    assert not collision.hits_boundary([(0, 0)])
    assert not collision.hits_boundary([(WIDTH - CELL_SIZE, HEIGHT - CELL_SIZE)])


def test_self_collision_any_body_index():
    body = [(100, 100), (125, 100), (125, 125), (100, 125), (75, 125)]
    for i in range(1, len(body)):
        snake = [body[i]] + body[1:]
        assert collision.hits_self(snake)


def test_no_self_collision_for_distinct_cells():
    assert not collision.hits_self([(100, 100)])
    assert not collision.hits_self([(100, 100), (75, 100), (50, 100)])


def test_obstacle_overlap():
    stones = [Rect(200, 200, 50, 50)]
    assert collision.hits_obstacle([(225, 225)], stones)
    assert not collision.hits_obstacle([(250, 225)], stones)


def test_hazard_only_counts_when_active():
    viper = [(300, 300), (325, 300)]
    assert collision.hits_hazard([(325, 300)], viper, active=True)
    assert not collision.hits_hazard([(325, 300)], viper, active=False)
    assert not collision.is_fatal([(325, 300)], [], viper, False)
    assert collision.is_fatal([(325, 300)], [], viper, True)


def test_pickups():
    assert collision.hits_cell([(50, 50), (25, 50)], (50, 50))
    assert not collision.hits_cell([(50, 50)], (75, 50))
    assert not collision.hits_cell([(50, 50)], None)
