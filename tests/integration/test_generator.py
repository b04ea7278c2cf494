"""Integration tests for the configuration-driven ArtGenerator."""

import json
import logging

import numpy as np
import pytest

from art_generator import config as DEFAULTS
from art_generator.generator import ArtGenerator
from art_generator.log_setup import setup_logging
from art_generator.noise_generators import FractalNoise, PerlinNoise, SimplexNoise, WorleyNoise


class TestGeneratorConfiguration:
    """Settings consolidation and noise construction."""

    @pytest.mark.integration
    def test_defaults(self, test_logger):
        generator = ArtGenerator({}, test_logger)
        assert generator.seed == DEFAULTS.DEFAULT_SEED
        assert generator.settings['octaves'] == DEFAULTS.DEFAULT_OCTAVES
        assert generator.automaton_seed == DEFAULTS.DEFAULT_SEED + DEFAULTS.AUTOMATON_SEED_OFFSET
        assert isinstance(generator.noise, FractalNoise)

    @pytest.mark.integration
    @pytest.mark.parametrize("noise_type, expected", [
        ("perlin", PerlinNoise), ("simplex", SimplexNoise), ("worley", WorleyNoise),
    ])
    def test_single_octave_uses_base_noise(self, test_logger, noise_type, expected):
        generator = ArtGenerator({'noise_type': noise_type, 'octaves': 1}, test_logger)
        assert isinstance(generator.noise, expected)

    @pytest.mark.integration
    def test_unknown_noise_type(self, test_logger):
        with pytest.raises(ValueError, match="Unknown noise type"):
            ArtGenerator({'noise_type': 'value'}, test_logger)

    @pytest.mark.integration
    def test_unknown_worley_metric(self, test_logger):
        with pytest.raises(ValueError, match="Unknown Worley metric"):
            ArtGenerator({'noise_type': 'worley', 'worley_metric': 'taxicab'}, test_logger)

    @pytest.mark.integration
    def test_logs_initialization(self, test_logger, caplog):
        with caplog.at_level(logging.INFO, logger=test_logger.name):
            ArtGenerator({'seed': 5}, test_logger)
        assert "initialized with seed: 5" in caplog.text


class TestGeneratorNoiseFields:
    """Coordinate grids and normalised noise fields."""

    @pytest.mark.integration
    def test_coordinate_grid(self, test_logger):
        generator = ArtGenerator({}, test_logger)
        x, y = generator.get_coordinate_grid(0.0, 0.0, 10.0, 5.0, 20, 10)
        assert x.shape == (10, 20)
        assert y.shape == (10, 20)
        assert x[0, 0] == 0.0
        assert x[0, 1] == pytest.approx(0.5)
        assert y[1, 0] == pytest.approx(0.5)

    @pytest.mark.integration
    @pytest.mark.parametrize("noise_type", list(DEFAULTS.NOISE_TYPES))
    def test_field_is_normalised(self, test_logger, noise_type):
        generator = ArtGenerator({'noise_type': noise_type, 'noise_scale': 0.1}, test_logger)
        x, y = generator.get_coordinate_grid(-20.0, -20.0, 40.0, 40.0, 48, 32)
        field = generator.get_noise_field(x, y)
        assert field.shape == (32, 48)
        assert field.min() >= 0.0
        assert field.max() <= 1.0
        assert field.std() > 0.0

    @pytest.mark.integration
    def test_same_seed_same_field(self, test_logger):
        a = ArtGenerator({'seed': 99}, test_logger)
        b = ArtGenerator({'seed': 99}, test_logger)
        x, y = a.get_coordinate_grid(0.0, 0.0, 8.0, 8.0, 16, 16)
        assert np.array_equal(a.get_noise_field(x, y), b.get_noise_field(x, y))

    @pytest.mark.integration
    def test_different_seed_different_field(self, test_logger):
        a = ArtGenerator({'seed': 1}, test_logger)
        b = ArtGenerator({'seed': 2}, test_logger)
        x, y = a.get_coordinate_grid(0.3, 0.3, 8.0, 8.0, 16, 16)
        assert not np.array_equal(a.get_noise_field(x, y), b.get_noise_field(x, y))


class TestGeneratorLSystems:
    """Preset expansion and turtle interpretation."""

    @pytest.mark.integration
    def test_koch_lines(self, test_logger):
        generator = ArtGenerator({}, test_logger)
        lines = generator.get_lsystem_lines('koch_curve', generations=1, step_length=2.0)
        assert len(lines) == 5
        assert all(line.length == pytest.approx(2.0) for line in lines)

    @pytest.mark.integration
    def test_configured_preset(self, test_logger):
        generator = ArtGenerator({'lsystem_preset': 'binary_tree', 'lsystem_generations': 2}, test_logger)
        # F -> F[+F]F[-F]F: five drawn segments per F.
        assert len(generator.get_lsystem_lines()) == 25

    @pytest.mark.integration
    def test_unknown_preset(self, test_logger):
        generator = ArtGenerator({}, test_logger)
        with pytest.raises(ValueError, match="Unknown L-system preset"):
            generator.get_lsystem_lines('nope')


class TestGeneratorFractals:
    """Escape-time fields and the chaos game."""

    @pytest.mark.integration
    @pytest.mark.parametrize("fractal_type", list(DEFAULTS.FRACTAL_TYPES))
    def test_field_is_normalised(self, test_logger, fractal_type):
        generator = ArtGenerator({'fractal_type': fractal_type, 'max_iterations': 40}, test_logger)
        x, y = generator.get_coordinate_grid(-2.0, -1.5, 3.0, 3.0, 30, 20)
        field = generator.get_fractal_field(x, y)
        assert field.shape == (20, 30)
        assert field.min() >= 0.0
        assert field.max() <= 1.0
        assert field.std() > 0.0

    @pytest.mark.integration
    def test_mandelbrot_origin_is_inside(self, test_logger):
        generator = ArtGenerator({}, test_logger)
        field = generator.get_fractal_field(np.array([0.0, 3.0]), np.array([0.0, 3.0]), fractal_type='mandelbrot')
        assert field[0] == 1.0
        assert field[1] < 1.0

    @pytest.mark.integration
    def test_unknown_fractal_type(self, test_logger):
        generator = ArtGenerator({}, test_logger)
        with pytest.raises(ValueError, match="Unknown fractal type"):
            generator.get_fractal_field(np.zeros(2), np.zeros(2), fractal_type='newton')

    @pytest.mark.integration
    def test_unknown_julia_preset(self, test_logger):
        generator = ArtGenerator({'julia_preset': 'nope'}, test_logger)
        with pytest.raises(ValueError, match="Unknown Julia preset"):
            generator.get_fractal_field(np.zeros(2), np.zeros(2), fractal_type='julia')

    @pytest.mark.integration
    def test_chaos_game_is_seeded(self, test_logger):
        a = ArtGenerator({'seed': 8}, test_logger).get_chaos_game_points(300)
        b = ArtGenerator({'seed': 8}, test_logger).get_chaos_game_points(300)
        assert len(a) == 300
        assert a == b


class TestGeneratorAutomata:
    """Elementary CA histories and Game of Life runs."""

    @pytest.mark.integration
    def test_ca_history(self, test_logger):
        generator = ArtGenerator({'ca_rule': 90, 'ca_size': 33, 'ca_generations': 16}, test_logger)
        history = generator.get_ca_history()
        assert history.shape == (17, 33)
        assert list(np.flatnonzero(history[0])) == [16]
        # Rule 90 from one cell is symmetric about the centre.
        assert np.array_equal(history, history[:, ::-1])

    @pytest.mark.integration
    def test_ca_history_overrides(self, test_logger):
        generator = ArtGenerator({}, test_logger)
        history = generator.get_ca_history(rule=0, size=10, generations=3)
        assert history.shape == (4, 10)
        assert not history[1:].any()

    @pytest.mark.integration
    def test_life_with_pattern(self, test_logger):
        generator = ArtGenerator({}, test_logger)
        grid = generator.run_life(width=10, height=10, steps=7, pattern='block')
        assert grid.shape == (10, 10)
        assert grid.sum() == 4
        assert grid[4:6, 4:6].all()

    @pytest.mark.integration
    def test_random_life_is_reproducible(self, test_logger):
        a = ArtGenerator({'seed': 3}, test_logger).run_life(width=24, height=16, steps=5)
        b = ArtGenerator({'seed': 3}, test_logger).run_life(width=24, height=16, steps=5)
        assert np.array_equal(a, b)

    @pytest.mark.integration
    def test_unknown_pattern(self, test_logger):
        generator = ArtGenerator({}, test_logger)
        with pytest.raises(ValueError, match="Unknown Life pattern"):
            generator.run_life(pattern='spaceship')


class TestLoggingSetup:
    """The logging bootstrap used by scripts."""

    @pytest.mark.integration
    def test_basic_setup_returns_named_logger(self):
        logger = setup_logging(name="ArtGeneratorSetupTest")
        assert logger.name == "ArtGeneratorSetupTest"

    @pytest.mark.integration
    def test_dict_config_file(self, tmp_path):
        config_path = tmp_path / "logging.json"
        config_path.write_text(json.dumps({
            "version": 1,
            "disable_existing_loggers": False,
            "loggers": {"ArtGeneratorFileTest": {"level": "WARNING"}},
        }))
        logger = setup_logging(str(config_path), name="ArtGeneratorFileTest")
        assert logger.level == logging.WARNING
