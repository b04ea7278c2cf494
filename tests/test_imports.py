"""
Import tests for the art_generator package and its modules.

These tests ensure that every module can be imported without errors,
which also forces the numba kernels module to load.
"""
import pytest


class TestMainPackageImports:
    """Test imports for the main art_generator package."""

    @pytest.mark.importtest
    def test_main_package_import(self):
        """Test that the main package can be imported."""
        import art_generator
        assert hasattr(art_generator, '__version__')
        assert hasattr(art_generator, '__all__')

    @pytest.mark.importtest
    def test_public_api_is_exported(self):
        """Every name in __all__ resolves to an attribute."""
        import art_generator
        for name in art_generator.__all__:
            assert hasattr(art_generator, name), name

    @pytest.mark.importtest
    def test_config_import(self):
        """Test that the defaults module can be imported."""
        import art_generator.config
        assert art_generator.config.DEFAULT_SEED is not None


class TestComponentImports:
    """Test imports for the individual component modules."""

    @pytest.mark.importtest
    def test_noise_kernels_import(self):
        import art_generator.noise
        assert hasattr(art_generator.noise, 'perlin_2d')
        assert hasattr(art_generator.noise, 'worley_field_2d')

    @pytest.mark.importtest
    def test_noise_generators_import(self):
        import art_generator.noise_generators
        assert hasattr(art_generator.noise_generators, 'FractalNoise')

    @pytest.mark.importtest
    def test_automata_import(self):
        import art_generator.elementary_ca
        import art_generator.life
        assert hasattr(art_generator.elementary_ca, 'ElementaryCA')
        assert hasattr(art_generator.life, 'GameOfLife')

    @pytest.mark.importtest
    def test_lsystem_and_turtle_import(self):
        import art_generator.lsystem
        import art_generator.turtle_graphics
        assert hasattr(art_generator.lsystem, 'LSystem')
        assert hasattr(art_generator.turtle_graphics, 'Turtle')

    @pytest.mark.importtest
    def test_presets_import(self):
        import art_generator.presets
        assert len(art_generator.presets.LSYSTEM_PRESETS) > 0
        assert len(art_generator.presets.LIFE_PATTERNS) > 0

    @pytest.mark.importtest
    def test_fractals_import(self):
        import art_generator.fractals
        assert hasattr(art_generator.fractals, 'escape_time')
        assert hasattr(art_generator.fractals, 'Mandelbrot')
        assert hasattr(art_generator.fractals, 'chaos_game')
