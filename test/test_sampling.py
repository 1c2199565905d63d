import pytest
from scipy import stats

from numframe.dataframe import DataFrame
from numframe.sampling import (
    Distribution,
    RandomFrameGenerator,
    exponential,
    gaussian,
    uniform,
)


@pytest.mark.parametrize(
    "generator",
    [
        RandomFrameGenerator.uniform(-1.0, 1.0),
        RandomFrameGenerator.gaussian(10.0, 2.0),
        RandomFrameGenerator.exponential(3.0),
    ],
    ids=["uniform", "gaussian", "exponential"],
)
def test_generate_is_reproducible(generator):
    """Test that the same seed generates the same frame."""
    first = generator.generate(1234, 5, ["a", "b", "c"])
    second = generator.generate(1234, 5, ["a", "b", "c"])
    assert isinstance(first, DataFrame)
    assert first == second


def test_generate_different_seeds():
    """Test that different seeds generate different frames."""
    generator = RandomFrameGenerator.gaussian(0.0, 1.0)
    assert generator.generate(1, 4, ["a"]) != generator.generate(2, 4, ["a"])


def test_generate_same_seed_across_generators():
    """Test reproducibility across generator instances."""
    first = RandomFrameGenerator.uniform(0.0, 1.0).generate(5, 3, ["a", "b"])
    second = RandomFrameGenerator.uniform(0.0, 1.0).generate(5, 3, ["a", "b"])
    assert first == second


def test_generate_shape():
    """Test the shape of a generated frame."""
    df = RandomFrameGenerator.uniform(0.0, 1.0).generate(0, 7, ["x", "y"])
    assert df.row_count == 7
    assert df.column_names == ("x", "y")


def test_generate_empty():
    """Test generating a frame without rows."""
    df = RandomFrameGenerator.uniform(0.0, 1.0).generate(0, 0, ["x"])
    assert df.row_count == 0
    assert df.column_names == ("x",)


def test_generate_negative_rows():
    """Test generating a negative number of rows."""
    with pytest.raises(ValueError):
        RandomFrameGenerator.uniform(0.0, 1.0).generate(0, -1, ["x"])


def test_generate_fills_rows_first():
    """Test that values are drawn one row at a time."""
    distribution = uniform(0.0, 1.0)
    df = RandomFrameGenerator(distribution).generate(99, 3, ["a", "b"])

    distribution.reseed(99)
    expected = [distribution.sample() for _ in range(6)]
    values = [v for row in df.get_rows() for v in row.values]
    assert values == expected


def test_uniform_bounds():
    """Test that uniform values stay within the bounds."""
    df = RandomFrameGenerator.uniform(5.0, 6.0).generate(3, 200, ["v"])
    assert all(5.0 <= v < 6.0 for v in df.get_column("v"))


def test_exponential_is_positive():
    """Test that exponential values are never negative."""
    df = RandomFrameGenerator.exponential(2.0).generate(3, 200, ["v"])
    assert all(v >= 0.0 for v in df.get_column("v"))


def test_gaussian_mean():
    """Test the mean of a large gaussian sample."""
    df = RandomFrameGenerator.gaussian(50.0, 1.0).generate(3, 2000, ["v"])
    assert df.statistics().describe("v").mean == pytest.approx(50.0, abs=0.2)


@pytest.mark.parametrize(
    "factory, args",
    [
        (uniform, (1.0, 1.0)),
        (uniform, (2.0, 1.0)),
        (gaussian, (0.0, 0.0)),
        (gaussian, (0.0, -1.0)),
        (exponential, (0.0,)),
        (exponential, (-2.0,)),
    ],
)
def test_invalid_parameters(factory, args):
    """Test presets with invalid distribution parameters."""
    with pytest.raises(ValueError):
        factory(*args)


def test_distribution_sample():
    """Test drawing one or more values."""
    distribution = Distribution(stats.norm(0, 1), seed=3)
    value = distribution.sample()
    assert isinstance(value, float)
    values = distribution.sample(4)
    assert len(values) == 4
    assert all(isinstance(v, float) for v in values)


def test_distribution_reseed():
    """Test that reseeding restarts the sampling."""
    distribution = Distribution(stats.expon(scale=1.0))
    distribution.reseed(11)
    first = [distribution.sample() for _ in range(3)]
    distribution.reseed(11)
    assert [distribution.sample() for _ in range(3)] == first


def test_distribution_str():
    """Test the string representation of a preset distribution."""
    assert str(gaussian(1.0, 2.0)) == "Distribution(norm, loc=1.0, scale=2.0)"


def test_distribution_str_positional_parameters():
    """Test the string representation of positional parameters."""
    assert str(Distribution(stats.norm(0, 1))) == "Distribution(norm, 0, 1)"
    assert str(Distribution(stats.norm(5, scale=2))) == "Distribution(norm, 5, scale=2)"
