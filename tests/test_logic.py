import random

from snaketick import config
from snaketick.logic import game_tick, run_tick
from snaketick.state import DOWN, LEFT, RIGHT, UP, GameState, initial_state


def _state(snake, food=(0, 0), score=0):
    return GameState(snake=tuple(snake), food=food, score=score)


def test_move_right_wraps_at_width():
    state = _state([(15, 3)])
    new, _ = game_tick(state, 4, RIGHT, random.Random(0))
    assert new.snake[0] == (0, 3)


def test_move_up_wraps_at_height():
    state = _state([(6, 0)])
    new, _ = game_tick(state, 4, UP, random.Random(0))
    assert new.snake[0] == (6, 23)


def test_move_left_and_down_wrap():
    new, _ = game_tick(_state([(0, 23)]), 4, LEFT, random.Random(0))
    assert new.snake[0] == (15, 23)
    new, _ = game_tick(_state([(3, 23)]), 4, DOWN, random.Random(0))
    assert new.snake[0] == (3, 0)


def test_plain_move_keeps_length_and_drops_tail():
    state = _state([(5, 5), (4, 5), (3, 5), (2, 5)], food=(10, 10), score=2)
    new, length = game_tick(state, 4, RIGHT, random.Random(0))
    assert new.snake == ((6, 5), (5, 5), (4, 5), (3, 5))
    assert length == 4
    assert new.score == 2
    assert new.food == (10, 10)


def test_short_snake_grows_back_to_running_length():
    state = _state([(5, 5)], food=(10, 10))
    new, length = game_tick(state, 4, RIGHT, random.Random(0))
    assert new.snake == ((6, 5), (5, 5))
    assert length == 4


def test_eating_food_scores_grows_and_resamples():
    state = _state([(5, 5), (4, 5), (3, 5), (2, 5)], food=(6, 5), score=7)
    new, length = game_tick(state, 4, RIGHT, random.Random(42))

    expected = random.Random(42)
    assert new.food == (expected.randrange(config.BOARD_WIDTH), expected.randrange(config.BOARD_HEIGHT))
    assert new.score == 8
    assert length == 5
    assert new.snake == ((6, 5), (5, 5), (4, 5), (3, 5), (2, 5))


def test_no_food_eaten_does_not_touch_rng():
    rng = random.Random(3)
    before = rng.getstate()
    game_tick(_state([(5, 5)], food=(0, 0)), 4, RIGHT, rng)
    assert rng.getstate() == before


def test_self_collision_resets():
    # Head at (1,1) moving down into its own body at (1,2).
    snake = [(1, 1), (2, 1), (2, 2), (1, 2), (0, 2)]
    state = _state(snake, food=(9, 9), score=12)
    new, length = game_tick(state, 6, DOWN, random.Random(0))
    assert new.snake == (config.RESTART_POSITION,)
    assert new.score == 0
    assert length == config.INITIAL_LENGTH
    assert new.food == (9, 9)


def test_collision_wins_over_food():
    snake = [(1, 1), (2, 1), (2, 2), (1, 2), (0, 2)]
    state = _state(snake, food=(1, 2), score=5)
    rng = random.Random(0)
    before = rng.getstate()
    tick = run_tick(state, 5, DOWN, rng)

    assert tick.ate and tick.crashed
    assert tick.next.snake == ((8, 12),)
    assert tick.next.score == 0
    assert tick.length == 4
    # Food is left where it was and no sample is drawn.
    assert tick.next.food == (1, 2)
    assert rng.getstate() == before


def test_collision_checks_whole_pre_move_body():
    # The tail cell (1,2) is still part of the pre-move snake.
    snake = [(1, 1), (2, 1), (2, 2), (1, 2)]
    new, _ = game_tick(_state(snake, food=(9, 9), score=3), 4, DOWN, random.Random(0))
    assert new.snake == ((8, 12),)
    assert new.score == 0


def test_restart_extends_leftward_from_restart_position():
    state = _state([config.RESTART_POSITION], food=(0, 0))
    length = config.INITIAL_LENGTH
    rng = random.Random(0)
    for ticks in range(1, 4):
        state, length = game_tick(state, length, RIGHT, rng)
        assert len(state.snake) == min(4, 1 + ticks)
        assert state.snake == tuple((8 + ticks - i, 12) for i in range(len(state.snake)))
    assert state.score == 0


def test_random_walk_keeps_invariants():
    rng = random.Random(1234)
    driver = random.Random(99)
    state = initial_state()
    length = config.INITIAL_LENGTH
    directions = (RIGHT, LEFT, DOWN, UP)

    for _ in range(2000):
        prev_score = state.score
        state, length = game_tick(state, length, driver.choice(directions), rng)

        assert state.snake
        for x, y in state.snake:
            assert 0 <= x < config.BOARD_WIDTH
            assert 0 <= y < config.BOARD_HEIGHT
        fx, fy = state.food
        assert 0 <= fx < config.BOARD_WIDTH and 0 <= fy < config.BOARD_HEIGHT
        assert state.score >= 0
        assert state.score in (0, prev_score, prev_score + 1)
        assert len(state.snake) <= length


def test_same_seed_same_game():
    def play(seed):
        rng = random.Random(seed)
        state, length = initial_state(), config.INITIAL_LENGTH
        history = []
        for i in range(300):
            direction = (RIGHT, DOWN)[(i // 7) % 2]
            state, length = game_tick(state, length, direction, rng)
            history.append(state)
        return history

    assert play(5) == play(5)


def test_initial_state_matches_constants():
    state = initial_state()
    assert state.snake == ((7, 7),)
    assert state.food == (5, 5)
    assert state.score == 0
