import random

import pytest

from snake.config import Config
from snake.engine import EatEvent, GameOverEvent, Phase, SimulationEngine
from snake.food import GridFull
from snake.geometry import Heading


def test_initial_state(engine):
    assert engine.get_body() == ((6, 9), (5, 9), (4, 9))
    assert engine.get_phase() is Phase.RUNNING
    assert engine.get_score() == 0
    assert engine.heading is Heading.RIGHT


def test_same_seed_same_first_food():
    a = SimulationEngine(Config(seed=7))
    b = SimulationEngine(Config(seed=7))
    assert a.get_food_position() == b.get_food_position()
    assert a.get_food_position() not in a.get_body()


def test_tick_without_food(engine):
    engine.tick()
    assert engine.get_body() == ((7, 9), (6, 9), (5, 9))
    assert engine.get_score() == 0
    assert engine.ticks == 1


def test_tick_onto_food_grows_and_scores(engine):
    events = []
    engine.on_eat(events.append)
    engine.place_food((7, 9))

    engine.tick()

    body = engine.get_body()
    assert body == ((7, 9), (6, 9), (5, 9), (4, 9))
    assert engine.get_score() == 1
    assert engine.get_food_position() not in body
    assert events == [EatEvent(position=(7, 9), score=1, length=4)]


def test_wall_collision_ends_game(make_engine):
    engine = make_engine(start_x=24)
    assert engine.get_body() == ((24, 9), (23, 9), (22, 9))
    events = []
    engine.on_game_over(events.append)

    engine.tick()

    assert engine.get_phase() is Phase.GAME_OVER
    assert engine.get_score() == 0
    assert engine.get_body() == ((24, 9), (23, 9), (22, 9))
    assert engine.get_food_position() not in engine.get_body()
    assert len(events) == 1
    assert events[0].reason == "wall"
    assert events[0].head == (25, 9)


def test_final_score_survives_in_game_over_event(make_engine):
    engine = make_engine(start_x=23, food=(24, 9))
    events = []
    engine.on_game_over(events.append)

    engine.tick()
    assert engine.get_score() == 1
    engine.tick()

    assert engine.get_score() == 0
    assert events == [GameOverEvent(final_score=1, reason="wall", head=(25, 9), length=4)]


def test_self_collision_ends_game(make_engine):
    engine = make_engine(initial_length=5, start_x=10, start_y=10)
    reasons = []
    engine.on_game_over(lambda e: reasons.append(e.reason))

    engine.set_heading(Heading.UP)
    engine.tick()
    engine.set_heading(Heading.LEFT)
    engine.tick()
    assert engine.get_phase() is Phase.RUNNING
    engine.set_heading(Heading.DOWN)
    engine.tick()

    assert reasons == ["self"]
    assert engine.get_phase() is Phase.GAME_OVER
    assert len(engine.get_body()) == 5


def test_moving_into_vacated_tail_cell_is_safe(make_engine):
    engine = make_engine(initial_length=4, start_x=10, start_y=10)
    # Walk a 2x2 square: the head keeps landing where the tail just left.
    for heading in (Heading.UP, Heading.LEFT, Heading.DOWN, Heading.RIGHT) * 2:
        engine.set_heading(heading)
        engine.tick()
        assert engine.get_phase() is Phase.RUNNING


def test_tick_during_game_over_is_noop(make_engine):
    engine = make_engine(start_x=24)
    engine.tick()
    before = engine.state()
    for _ in range(5):
        engine.tick()
    assert engine.state() == before


def test_reversal_does_not_resume_after_game_over(make_engine):
    engine = make_engine(start_x=24)
    engine.tick()
    assert engine.get_phase() is Phase.GAME_OVER

    assert engine.set_heading(Heading.LEFT) is False
    assert engine.get_phase() is Phase.GAME_OVER
    assert engine.heading is Heading.RIGHT

    assert engine.set_heading(Heading.UP) is True
    assert engine.get_phase() is Phase.RUNNING
    assert engine.heading is Heading.UP


def test_same_heading_resumes_after_game_over(make_engine):
    engine = make_engine(start_x=24)
    engine.tick()
    assert engine.set_heading(Heading.RIGHT) is True
    assert engine.get_phase() is Phase.RUNNING


def test_reversal_rejected_through_engine(engine):
    engine.set_heading(Heading.LEFT)
    assert engine.heading is Heading.RIGHT
    engine.set_heading(Heading.UP)
    assert engine.heading is Heading.UP


def test_place_food_validation(engine):
    with pytest.raises(ValueError):
        engine.place_food((25, 0))
    with pytest.raises(ValueError):
        engine.place_food((5, 9))
    engine.place_food((24, 24))
    assert engine.get_food_position() == (24, 24)


def test_filling_the_board_raises_grid_full(make_engine):
    engine = make_engine(food=None, width=4, height=1, start_x=2, start_y=0)
    assert engine.get_food_position() == (3, 0)
    eaten = []
    engine.on_eat(eaten.append)

    with pytest.raises(GridFull):
        engine.tick()

    assert engine.board_full
    assert engine.get_score() == 1
    assert engine.get_body() == ((3, 0), (2, 0), (1, 0), (0, 0))
    assert engine.get_food_position() is None
    assert engine.get_food_position() not in engine.get_body()
    assert eaten == [EatEvent(position=(3, 0), score=1, length=4)]
    assert engine.state().board_full

    before = engine.state()
    engine.tick()
    assert engine.state() == before

    # A full board is not resumed by input, only by reset().
    engine.set_heading(Heading.UP)
    engine.tick()
    assert engine.get_body() == before.body

    engine.reset()
    assert not engine.board_full
    assert engine.get_body() == ((2, 0), (1, 0), (0, 0))
    assert engine.get_food_position() == (3, 0)
    assert engine.get_score() == 0


def test_engine_state_is_read_only(engine):
    for name in ("head", "heading", "direction", "ticks", "board_full"):
        with pytest.raises(AttributeError):
            setattr(engine, name, None)
    assert not hasattr(engine, "snake")
    assert not hasattr(engine, "food")
    assert engine.head == (6, 9)
    assert engine.direction is Heading.RIGHT


def test_reset_restores_start(engine):
    engine.place_food((7, 9))
    engine.tick()
    engine.reset()
    assert engine.get_body() == ((6, 9), (5, 9), (4, 9))
    assert engine.get_score() == 0
    assert engine.ticks == 0
    assert engine.get_phase() is Phase.RUNNING


def test_listener_decorator_and_removal(engine):
    seen = []

    @engine.on_eat
    def record(event):
        seen.append(event.score)

    engine.place_food((7, 9))
    engine.tick()
    engine.remove_listener(record)
    engine.place_food((8, 9))
    engine.tick()
    assert seen == [1]


def test_invariants_hold_over_random_play(seeded_rng):
    engine = SimulationEngine(Config(width=8, height=8), rng=random.Random(3))
    initial_length = len(engine.get_body())
    deaths = []
    engine.on_game_over(deaths.append)

    for _ in range(3000):
        engine.set_heading(seeded_rng.choice(list(Heading)))
        length_before = len(engine.get_body())
        deaths_before = len(deaths)
        try:
            engine.tick()
        except GridFull:
            break

        body = engine.get_body()
        assert engine.get_food_position() not in body
        assert len(body) >= 1
        if len(deaths) > deaths_before:
            assert len(body) == initial_length
            assert engine.get_score() == 0
        else:
            assert len(body) >= length_before

    assert deaths
