from collections import Counter
from itertools import combinations

import numpy as np
import pytest

from pairlink.config import PuzzleConfig, validate_config
from pairlink.errors import ConfigurationError, PlacementError
from pairlink.geometry import distance
from pairlink.placement import choose_pair_count, generate_layout, pair_values, place_tokens


def test_pair_values_is_a_permutation_of_pairs():
    rng = np.random.default_rng(5)
    values = pair_values(4, rng)
    assert sorted(values) == [1, 1, 2, 2, 3, 3, 4, 4]
    assert all(isinstance(v, int) for v in values)


def test_choose_pair_count_stays_in_range():
    config = PuzzleConfig()
    rng = np.random.default_rng(0)
    counts = {choose_pair_count(config, rng) for _ in range(200)}
    assert counts == {3, 4, 5}


@pytest.mark.parametrize('seed', range(20))
def test_generated_layout_respects_pairing_and_spacing(seed):
    config = PuzzleConfig()
    tokens = generate_layout(config, np.random.default_rng(seed))

    counts = Counter(t.value for t in tokens)
    k = len(tokens) // 2
    assert 3 <= k <= 5
    assert counts == Counter({value: 2 for value in range(1, k + 1)})

    for a, b in combinations(tokens, 2):
        assert distance(a.position, b.position) >= 2.5 * config.token_radius
        if a.value == b.value:
            assert distance(a.position, b.position) >= config.min_pair_distance

    for token in tokens:
        x, y = token.position
        assert config.padding <= x <= config.width - config.padding
        assert config.padding <= y <= config.height - config.padding
        assert token.radius == config.token_radius
        assert token.color == config.palette[token.value - 1]
        assert not token.connected

    assert [t.id for t in tokens] == list(range(len(tokens)))


def test_generate_layout_is_deterministic_for_a_seed():
    first = generate_layout(PuzzleConfig(), np.random.default_rng(42))
    second = generate_layout(PuzzleConfig(), np.random.default_rng(42))
    assert [(t.value, t.position) for t in first] == [(t.value, t.position) for t in second]


def test_generate_layout_honours_fixed_pair_count():
    tokens = generate_layout(PuzzleConfig(), np.random.default_rng(1), pair_count=6)
    assert len(tokens) == 12


def test_place_tokens_gives_up_when_partner_cannot_be_far_enough():
    config = PuzzleConfig(width=200, height=200, min_pair_distance=1000.0, max_attempts=20)
    assert place_tokens([1, 1], config, np.random.default_rng(0)) is None


def test_impossible_canvas_raises_placement_error():
    config = PuzzleConfig(width=120, height=120, padding=10, min_pair_distance=1000.0, max_restarts=3)

    with pytest.raises(PlacementError) as exc:
        generate_layout(config, np.random.default_rng(0), pair_count=3)

    assert isinstance(exc.value, ConfigurationError)
    assert exc.value.pair_count == 3
    assert exc.value.restarts == 3
    assert 'too small' in str(exc.value)


def test_non_positive_pair_count_is_rejected():
    with pytest.raises(ConfigurationError):
        generate_layout(PuzzleConfig(), np.random.default_rng(0), pair_count=0)


def test_palette_falls_back_to_default_colour():
    config = PuzzleConfig(palette=('#111111',))
    assert config.color_for(1) == '#111111'
    assert config.color_for(2) == '#000000'


@pytest.mark.parametrize(
    'overrides, message_part',
    [
        ({'width': 0}, 'positive size'),
        ({'token_radius': -1.0}, 'radius'),
        ({'padding': 300.0}, 'leaves no room'),
        ({'pair_count_range': (4, 2)}, 'pair_count_range'),
        ({'pair_count_range': (0, 2)}, 'pair_count_range'),
        ({'max_attempts': 0}, 'max_attempts'),
        ({'max_restarts': 0}, 'max_restarts'),
    ],
)
def test_validate_config_rejects_unusable_settings(overrides, message_part):
    with pytest.raises(ConfigurationError) as exc:
        validate_config(PuzzleConfig(**overrides))
    assert message_part in str(exc.value)


def test_default_config_is_copied_and_replaceable():
    from pairlink.config import get_default_config, set_default_config

    original = get_default_config()
    try:
        custom = PuzzleConfig(width=800, height=500, pair_count_range=(4, 4))
        set_default_config(custom)
        custom.width = 1

        tokens = generate_layout(rng=np.random.default_rng(9))
        assert len(tokens) == 8
        assert get_default_config().width == 800
        assert all(t.position[0] <= 800 - 30 for t in tokens)
    finally:
        set_default_config(original)
