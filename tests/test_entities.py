import pytest

from antcolony.entities import Ant, Cell, DirectionOption, FoodSource, Target
from antcolony.geometry import Vec2


def test_target_members_are_distinct():
    assert Target["HOME"] is Target.HOME
    assert Target["FOOD"] is Target.FOOD
    assert {t.name for t in Target} == {"HOME", "FOOD"}
    ant = Ant(0.0, Vec2(0.0, 0.0), Target.HOME, 1.0)
    assert ant.target is Target.HOME
    assert ant.target is not Target.FOOD


def test_cell_starts_without_pheromone():
    cell = Cell(3, 7)
    assert (cell.x, cell.y) == (3, 7)
    assert cell.pheromone_food == 0.0
    assert cell.pheromone_home == 0.0


def test_cell_pheromone_is_mutable():
    cell = Cell(0, 0)
    cell.pheromone_food = 0.4
    cell.pheromone_home = 0.6
    assert cell == Cell(0, 0, pheromone_food=0.4, pheromone_home=0.6)


def test_ant_fields_keep_constructor_order():
    home = Vec2(100.0, 50.0)
    ant = Ant(1.25, home, Target.FOOD, 500.0)
    assert ant.angle == 1.25
    assert ant.position == home
    assert ant.target is Target.FOOD
    assert ant.pheromone_supply == 500.0


def test_ant_state_changes():
    ant = Ant(0.0, Vec2(0.0, 0.0), Target.FOOD, 10.0)
    ant.target = Target.HOME
    ant.position = Vec2(2.0, 3.0)
    assert ant.target is Target.HOME
    assert ant.position == Vec2(2.0, 3.0)


def test_food_source_count_decrements():
    source = FoodSource(Vec2(10.0, 20.0), 1000, 20)
    source.count_food -= 1
    assert source.count_food == 999
    assert source.radius == 20
    assert source.position == Vec2(10.0, 20.0)


def test_direction_option_is_frozen():
    option = DirectionOption(angle=0.5, weight=0.25)
    assert option == DirectionOption(0.5, 0.25)
    with pytest.raises(AttributeError):
        option.weight = 1.0
    assert option.weight == 0.25