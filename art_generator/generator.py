# art_generator/generator.py

"""
================================================================================
CORE ART GENERATOR
================================================================================
This module contains the ArtGenerator class, a configuration-driven front end
over the noise, fractal, L-system and cellular automaton components. Renderers and
tools talk to this class and receive plain NumPy arrays and line lists.

Data Contract:
---------------
- Inputs (on initialization):
    - config (dict): A dictionary of parameters which can override the
      internal defaults. Expected keys include 'seed', 'noise_type',
      'octaves', etc.
    - logger: A configured Python logging object for runtime messages.
- Outputs (from methods):
    - NumPy arrays (noise and fractal fields in [0, 1], automaton histories
      and grids).
    - Lists of turtle Line segments and chaos-game points.
- Side Effects: Logs messages using the provided logger.
- Invariants: Given the same seed and configuration, the output is
  deterministic. Unknown preset, pattern, noise or fractal names raise
  ValueError.
================================================================================
"""

import logging
import time
from typing import Optional

import numpy as np

from . import config as DEFAULTS
from . import fractals, presets
from .elementary_ca import ElementaryCA
from .fractals import EscapeTimeFractal, JuliaSet, Mandelbrot
from .life import GameOfLife
from .noise_generators import (DistanceMetric, FractalNoise, NoiseGenerator, PerlinNoise,
                               SimplexNoise, WorleyNoise)
from .turtle_graphics import Turtle


class ArtGenerator:
    """
    Builds the configured generators once and hands out their output.
    This class is backend-only and does not handle any visualization.
    """
    def __init__(self, config: dict, logger: logging.Logger):
        """
        Initializes the art generator.

        Args:
            config (dict): User-defined parameters to override defaults.
            logger (logging.Logger): The logger instance for all output.
        """
        self.logger = logger
        self.user_config = config
        self.logger.info("ArtGenerator initializing...")

        # --- Consolidate Configuration ---
        self.settings = {
            'seed': self.user_config.get('seed', DEFAULTS.DEFAULT_SEED),
            'noise_seed_offset': self.user_config.get('noise_seed_offset', DEFAULTS.NOISE_SEED_OFFSET),
            'automaton_seed_offset': self.user_config.get('automaton_seed_offset', DEFAULTS.AUTOMATON_SEED_OFFSET),

            'noise_type': self.user_config.get('noise_type', DEFAULTS.DEFAULT_NOISE_TYPE),
            'octaves': self.user_config.get('octaves', DEFAULTS.DEFAULT_OCTAVES),
            'persistence': self.user_config.get('persistence', DEFAULTS.DEFAULT_PERSISTENCE),
            'lacunarity': self.user_config.get('lacunarity', DEFAULTS.DEFAULT_LACUNARITY),
            'noise_scale': self.user_config.get('noise_scale', DEFAULTS.DEFAULT_NOISE_SCALE),
            'worley_metric': self.user_config.get('worley_metric', DEFAULTS.DEFAULT_WORLEY_METRIC),
            'minkowski_p': self.user_config.get('minkowski_p', DEFAULTS.DEFAULT_MINKOWSKI_P),

            'lsystem_preset': self.user_config.get('lsystem_preset', DEFAULTS.DEFAULT_LSYSTEM_PRESET),
            'lsystem_generations': self.user_config.get('lsystem_generations', DEFAULTS.DEFAULT_LSYSTEM_GENERATIONS),
            'step_length': self.user_config.get('step_length', DEFAULTS.DEFAULT_STEP_LENGTH),
            'start_heading': self.user_config.get('start_heading', DEFAULTS.DEFAULT_START_HEADING),

            'fractal_type': self.user_config.get('fractal_type', DEFAULTS.DEFAULT_FRACTAL_TYPE),
            'max_iterations': self.user_config.get('max_iterations', DEFAULTS.DEFAULT_MAX_ITERATIONS),
            'julia_preset': self.user_config.get('julia_preset', DEFAULTS.DEFAULT_JULIA_PRESET),
            'chaos_game_iterations': self.user_config.get('chaos_game_iterations', DEFAULTS.DEFAULT_CHAOS_GAME_ITERATIONS),

            'ca_rule': self.user_config.get('ca_rule', DEFAULTS.DEFAULT_CA_RULE),
            'ca_size': self.user_config.get('ca_size', DEFAULTS.DEFAULT_CA_SIZE),
            'ca_generations': self.user_config.get('ca_generations', DEFAULTS.DEFAULT_CA_GENERATIONS),
            'life_width': self.user_config.get('life_width', DEFAULTS.DEFAULT_LIFE_WIDTH),
            'life_height': self.user_config.get('life_height', DEFAULTS.DEFAULT_LIFE_HEIGHT),
            'life_probability': self.user_config.get('life_probability', DEFAULTS.DEFAULT_LIFE_PROBABILITY),
            'life_steps': self.user_config.get('life_steps', DEFAULTS.DEFAULT_LIFE_STEPS),
        }

        # --- Public Properties for easy access ---
        self.seed = self.settings['seed']
        self.noise_seed = self.seed + self.settings['noise_seed_offset']
        self.automaton_seed = self.seed + self.settings['automaton_seed_offset']

        # --- Initialize Noise ---
        self.noise = self._build_noise()

        self.logger.info(f"ArtGenerator initialized with seed: {self.seed}")
        self.logger.info(
            f"Noise: {self.settings['noise_type']} "
            f"({self.settings['octaves']} octaves, persistence {self.settings['persistence']}, "
            f"lacunarity {self.settings['lacunarity']})"
        )

    def _build_noise(self) -> NoiseGenerator:
        """Creates the base generator and wraps it in octaves when asked to."""
        noise_type = self.settings['noise_type']
        if noise_type == 'perlin':
            base = PerlinNoise(self.noise_seed)
        elif noise_type == 'simplex':
            base = SimplexNoise(self.noise_seed)
        elif noise_type == 'worley':
            metric_name = self.settings['worley_metric']
            try:
                metric = DistanceMetric.from_name(metric_name)
            except KeyError:
                valid = ', '.join(m.name.lower() for m in DistanceMetric)
                raise ValueError(f"Unknown Worley metric '{metric_name}'. Expected one of: {valid}") from None
            base = WorleyNoise(self.noise_seed, metric=metric, exponent=self.settings['minkowski_p'])
        else:
            raise ValueError(
                f"Unknown noise type '{noise_type}'. Expected one of: {', '.join(DEFAULTS.NOISE_TYPES)}"
            )

        if self.settings['octaves'] > 1 or self.settings['noise_scale'] != 1.0:
            self.logger.debug("Wrapping base noise in a fractal layer.")
            return FractalNoise(
                base,
                octaves=self.settings['octaves'],
                persistence=self.settings['persistence'],
                lacunarity=self.settings['lacunarity'],
                scale=self.settings['noise_scale'],
            )
        return base

    def get_coordinate_grid(self, start_x: float, start_y: float, width: float, height: float,
                            resolution_w: int, resolution_h: int) -> tuple:
        """
        Generates a coordinate grid for an arbitrary rectangle, one sample per
        pixel, starting exactly at (start_x, start_y).
        """
        pixel_w = width / resolution_w
        pixel_h = height / resolution_h

        end_x = start_x + ((resolution_w - 1) * pixel_w)
        end_y = start_y + ((resolution_h - 1) * pixel_h)

        x_coords = np.linspace(start_x, end_x, resolution_w)
        y_coords = np.linspace(start_y, end_y, resolution_h)

        return np.meshgrid(x_coords, y_coords)

    def get_noise_field(self, x_coords: np.ndarray, y_coords: np.ndarray) -> np.ndarray:
        """
        Samples the configured noise over coordinate arrays and returns values
        normalized to [0, 1]. Worley distances are clipped rather than shifted.
        """
        start_time = time.time()
        values = self.noise.sample_grid(x_coords, y_coords)
        if self.settings['noise_type'] == 'worley':
            field = np.clip(values, 0.0, 1.0)
        else:
            field = np.clip((values + 1.0) / 2.0, 0.0, 1.0)
        self.logger.debug(f"Sampled {field.size} noise values in {time.time() - start_time:.3f}s.")
        return field

    def get_lsystem_lines(self, preset: Optional[str] = None, generations: Optional[int] = None,
                          step_length: Optional[float] = None) -> list:
        """Expands a preset L-system and interprets it with a turtle."""
        name = preset if preset is not None else self.settings['lsystem_preset']
        lsystem = presets.get_lsystem(name)
        if lsystem is None:
            raise ValueError(
                f"Unknown L-system preset '{name}'. Expected one of: {', '.join(sorted(presets.LSYSTEM_PRESETS))}"
            )
        generations = generations if generations is not None else self.settings['lsystem_generations']
        step_length = step_length if step_length is not None else self.settings['step_length']

        instructions = lsystem.iterate(generations)
        self.logger.debug(f"L-system '{name}' expanded to {len(instructions)} symbols after {generations} generations.")

        turtle = Turtle.from_lsystem(lsystem, step_length=step_length)
        lines = turtle.interpret(instructions, start_heading=self.settings['start_heading'])
        self.logger.info(f"L-system '{name}' produced {len(lines)} line segments.")
        return lines

    def _build_fractal(self, fractal_type: str) -> EscapeTimeFractal:
        max_iterations = self.settings['max_iterations']
        if fractal_type == 'mandelbrot':
            return Mandelbrot(max_iterations)
        if fractal_type == 'julia':
            name = self.settings['julia_preset']
            julia = JuliaSet.preset(name, max_iterations)
            if julia is None:
                raise ValueError(
                    f"Unknown Julia preset '{name}'. Expected one of: {', '.join(sorted(fractals.JULIA_PRESETS))}"
                )
            return julia
        raise ValueError(
            f"Unknown fractal type '{fractal_type}'. Expected one of: {', '.join(DEFAULTS.FRACTAL_TYPES)}"
        )

    def get_fractal_field(self, x_coords: np.ndarray, y_coords: np.ndarray,
                          fractal_type: Optional[str] = None) -> np.ndarray:
        """
        Samples an escape-time fractal over coordinate arrays (x real, y
        imaginary) and returns smooth iteration counts clipped to [0, 1].
        """
        fractal = self._build_fractal(fractal_type if fractal_type is not None else self.settings['fractal_type'])
        start_time = time.time()
        field = np.clip(fractal.sample_grid(x_coords, y_coords), 0.0, 1.0)
        self.logger.debug(f"Sampled {field.size} fractal values in {time.time() - start_time:.3f}s.")
        return field

    def get_chaos_game_points(self, iterations: Optional[int] = None) -> list:
        """Sierpinski chaos-game points, seeded from the generator's seed."""
        iterations = iterations if iterations is not None else self.settings['chaos_game_iterations']
        self.logger.info(f"Playing the chaos game for {iterations} iterations.")
        return fractals.chaos_game(iterations, seed=self.automaton_seed)

    def get_ca_history(self, rule: Optional[int] = None, size: Optional[int] = None,
                       generations: Optional[int] = None) -> np.ndarray:
        """History of an elementary CA grown from a single centre cell."""
        automaton = ElementaryCA(
            rule if rule is not None else self.settings['ca_rule'],
            size=size if size is not None else self.settings['ca_size'],
        )
        automaton.set_single_center_cell()
        generations = generations if generations is not None else self.settings['ca_generations']
        self.logger.info(f"Running rule {automaton.rule} for {generations} generations.")
        return automaton.generate_history(generations)

    def run_life(self, width: Optional[int] = None, height: Optional[int] = None,
                 steps: Optional[int] = None, pattern: Optional[str] = None,
                 probability: Optional[float] = None) -> np.ndarray:
        """
        Runs Game of Life and returns the final grid. With a pattern name the
        pattern is stamped in the centre of an empty grid; otherwise the grid is
        seeded randomly from the generator's seed.
        """
        life = GameOfLife(
            width if width is not None else self.settings['life_width'],
            height if height is not None else self.settings['life_height'],
        )
        if pattern is not None:
            stamp = presets.get_pattern(pattern)
            if stamp is None:
                raise ValueError(
                    f"Unknown Life pattern '{pattern}'. Expected one of: {', '.join(sorted(presets.LIFE_PATTERNS))}"
                )
            life.place_pattern(stamp, (life.width - stamp.width) // 2, (life.height - stamp.height) // 2)
        else:
            life.randomize(
                probability if probability is not None else self.settings['life_probability'],
                seed=self.automaton_seed,
            )

        steps = steps if steps is not None else self.settings['life_steps']
        self.logger.info(f"Running Game of Life on {life.width}x{life.height} for {steps} steps "
                         f"(initial population {life.population_count}).")
        life.step_count(steps)
        self.logger.debug(f"Final population: {life.population_count}")
        return life.grid
