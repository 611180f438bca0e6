"""
Tests for Normal Distribution Family

This module tests the functionality of the normal distribution family,
including parameterizations, characteristics, and reference values.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import gc
import math

import numpy as np
import pytest
from scipy.stats import norm

from pysatl_gauss.distributions.sampling import ArraySample
from pysatl_gauss.distributions.strategies import DefaultComputationStrategy
from pysatl_gauss.distributions.support import ContinuousSupport
from pysatl_gauss.errors import InvalidArgumentError, InvalidParameterError
from pysatl_gauss.families.configuration import configure_families_register
from pysatl_gauss.stats.ziggurat_sampling_strategy import ZigguratSamplingStrategy
from pysatl_gauss.types import (
    CharacteristicName,
    FamilyName,
    UnivariateContinuous,
)

from .base import BaseDistributionTest

REFERENCE_X = np.arange(-4.0, 4.5, 0.5)

REFERENCE_CDF = np.array(
    [
        6.209665325776139e-03,
        1.222447265504470e-02,
        2.275013194817922e-02,
        4.005915686381709e-02,
        6.680720126885809e-02,
        1.056497736668553e-01,
        1.586552539314571e-01,
        2.266273523768682e-01,
        3.085375387259869e-01,
        4.012936743170763e-01,
        5.000000000000000e-01,
        5.987063256829237e-01,
        6.914624612740131e-01,
        7.733726476231317e-01,
        8.413447460685429e-01,
        8.943502263331446e-01,
        9.331927987311419e-01,
    ]
)

REFERENCE_PDF = np.array(
    [
        8.764150246784270e-03,
        1.586982591783371e-02,
        2.699548325659403e-02,
        4.313865941325577e-02,
        6.475879783294587e-02,
        9.132454269451096e-02,
        1.209853622595717e-01,
        1.505687160774022e-01,
        1.760326633821498e-01,
        1.933340584014246e-01,
        1.994711402007164e-01,
        1.933340584014246e-01,
        1.760326633821498e-01,
        1.505687160774022e-01,
        1.209853622595717e-01,
        9.132454269451096e-02,
        6.475879783294587e-02,
    ]
)

REFERENCE_P = np.round(np.arange(0.0, 1.0001, 0.05), 2)

REFERENCE_PPF = np.array(
    [
        -np.inf,
        -1.411213406737868e00,
        -1.320387891386150e00,
        -1.259108347373447e00,
        -1.210405308393228e00,
        -1.168622437549020e00,
        -1.131100128177010e00,
        -1.096330116601892e00,
        -1.063336775783950e00,
        -1.031415336713768e00,
        -1.000000000000000e00,
        -9.685846632862315e-01,
        -9.366632242160501e-01,
        -9.036698833981082e-01,
        -8.688998718229899e-01,
        -8.313775624509796e-01,
        -7.895946916067714e-01,
        -7.408916526265525e-01,
        -6.796121086138498e-01,
        -5.887865932621319e-01,
        np.inf,
    ]
)


class TestNormalFamily(BaseDistributionTest):
    """Test suite for Normal distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        registry = configure_families_register()
        self.normal_family = registry.get(FamilyName.NORMAL)
        self.normal_dist_example = self.normal_family(mu=2.0, sigma=1.5)

    def test_family_properties(self):
        """Test basic properties of normal family."""
        assert self.normal_family.name == FamilyName.NORMAL

        expected_parametrizations = {"meanStd", "meanPrec", "exponential"}
        assert set(self.normal_family.parametrization_names) == expected_parametrizations
        assert self.normal_family.base_parametrization_name == "meanStd"
        assert isinstance(self.normal_family.sampling_strategy, ZigguratSamplingStrategy)

    def test_mean_std_parametrization_creation(self):
        """Test creation of distribution with standard parametrization."""
        dist = self.normal_family(mu=2.0, sigma=1.5)

        assert dist.family_name == FamilyName.NORMAL
        assert dist.distribution_type == UnivariateContinuous
        assert dist.parameters.parameters == {"mu": 2.0, "sigma": 1.5}
        assert dist.parameters.mu == 2.0
        assert dist.parameters.sigma == 1.5
        assert dist.parametrization_name == "meanStd"

    def test_mean_prec_parametrization_creation(self):
        """Test creation of distribution with mean-precision parametrization."""
        dist = self.normal_family(mu=2.0, tau=0.25, parametrization_name="meanPrec")

        assert dist.parameters.parameters == {"mu": 2.0, "tau": 0.25}
        assert dist.parametrization_name == "meanPrec"

    def test_exponential_parametrization_creation(self):
        """Test creation of distribution with exponential parametrization."""
        # For N(2, 1.5): a = -1/(2*1.5²) = -0.222..., b = 2/1.5² = 0.888...
        dist = self.normal_family(a=-0.222, b=0.888, parametrization_name="exponential")

        assert dist.parameters.parameters == {"a": -0.222, "b": 0.888}
        assert dist.parametrization_name == "exponential"

    def test_exponential_normalization_constant(self):
        """Test that the exponential form integrates to one."""
        mu, sigma = 2.0, 1.5
        params = self.normal_family.parametrizations["exponential"](
            a=-1 / (2 * sigma**2), b=mu / sigma**2
        )
        x = np.array([-1.0, 0.5, 2.0, 3.7])
        density = np.exp(params.a * x**2 + params.b * x + params.c)
        self.assert_arrays_almost_equal(density, norm.pdf(x, loc=mu, scale=sigma))

    @pytest.mark.parametrize(
        "params, violated",
        [
            ({"mu": 0, "sigma": -1.0}, "sigma > 0"),
            ({"mu": 0, "sigma": 0.0}, "sigma > 0"),
            ({"mu": 0, "sigma": math.nan}, "sigma > 0"),
            ({"mu": 0, "tau": -1.0, "parametrization_name": "meanPrec"}, "tau > 0"),
            ({"a": 1.0, "b": 0.0, "parametrization_name": "exponential"}, "a < 0"),
        ],
    )
    def test_parametrization_constraints(self, params, violated):
        """Test parameter constraints validation."""
        with pytest.raises(InvalidParameterError, match=violated):
            self.normal_family(**params)

    def test_constraint_error_is_value_error(self):
        """Test that constraint violations can be caught as ValueError."""
        with pytest.raises(ValueError):
            self.normal_family(mu=0.0, sigma=0.0)

    @pytest.mark.parametrize(
        "char_name, expected",
        [
            (CharacteristicName.MEAN, 2.0),
            (CharacteristicName.VAR, 2.25),
            (CharacteristicName.SD, 1.5),
            (CharacteristicName.MEDIAN, 2.0),
            (CharacteristicName.SKEW, 0.0),
            (CharacteristicName.KURT, 0.0),
        ],
    )
    def test_moments(self, char_name, expected):
        """Test moment calculations using parameterized tests."""
        actual = self.normal_dist_example.calculate_characteristic(char_name, None)
        assert actual == expected

    def test_modes(self):
        """Test that the only mode is the mean."""
        dist = self.normal_family(mu=2.0, sigma=5.0)
        assert dist.calculate_characteristic(CharacteristicName.MODES, None) == frozenset({2.0})

    def test_kurtosis_calculation(self):
        """Test kurtosis calculation with excess parameter."""
        kurt_func = self.normal_dist_example.query_method(CharacteristicName.KURT)

        assert kurt_func(None) == 0.0
        assert kurt_func(None, excess=True) == 0.0
        assert kurt_func(None, excess=False) == 3.0

    def test_entropy(self):
        """Test differential entropy of the standard normal distribution."""
        dist = self.normal_family(mu=0.0, sigma=1.0)
        entropy = dist.calculate_characteristic(CharacteristicName.ENTROPY, None)
        assert entropy == pytest.approx((math.log(2 * math.pi) + 1) / 2, abs=1e-14)

    @pytest.mark.parametrize("sigma", [0.1, 1.0, 2.5, 40.0])
    def test_entropy_matches_scipy(self, sigma):
        """Test entropy for several scales."""
        dist = self.normal_family(mu=-3.0, sigma=sigma)
        entropy = dist.calculate_characteristic(CharacteristicName.ENTROPY, None)
        assert entropy == pytest.approx(float(norm(loc=-3.0, scale=sigma).entropy()), abs=1e-12)

    @pytest.mark.parametrize(
        "parametrization_name, params",
        [
            ("meanStd", {"mu": 2.0, "sigma": 1.5}),
            ("meanPrec", {"mu": 2.0, "tau": 1 / 1.5**2}),
            ("exponential", {"a": -1 / (2 * 1.5**2), "b": 2 / (1.5**2)}),
        ],
    )
    def test_moment_identities_for_every_parametrization(self, parametrization_name, params):
        """Test characteristics through the non-base parametrizations."""
        dist = self.normal_family(parametrization_name=parametrization_name, **params)

        def char(name, value=None):
            return dist.calculate_characteristic(name, value)

        assert char(CharacteristicName.MEAN) == pytest.approx(2.0)
        assert char(CharacteristicName.SD) == pytest.approx(1.5)
        assert char(CharacteristicName.MEDIAN) == pytest.approx(2.0)
        assert char(CharacteristicName.SKEW) == 0.0
        assert char(CharacteristicName.KURT) == 0.0
        assert char(CharacteristicName.PPF, 0.5) == pytest.approx(2.0)
        assert char(CharacteristicName.CDF, 2.0) == pytest.approx(0.5)

    @pytest.mark.parametrize(
        "parametrization_name, params, expected_mu, expected_sigma",
        [
            ("meanStd", {"mu": 2.0, "sigma": 1.5}, 2.0, 1.5),
            ("meanPrec", {"mu": 2.0, "tau": 0.25}, 2.0, math.sqrt(1 / 0.25)),
            ("exponential", {"a": -1 / (2 * 1.5**2), "b": 2 / (1.5**2)}, 2.0, 1.5),
        ],
    )
    def test_parametrization_conversions(
        self, parametrization_name, params, expected_mu, expected_sigma
    ):
        """Test conversions between different parameterizations."""
        base_params = self.normal_family.to_base(
            self.normal_family.parametrizations[parametrization_name](**params)
        )

        assert abs(base_params.parameters["mu"] - expected_mu) < self.CALCULATION_PRECISION
        assert abs(base_params.parameters["sigma"] - expected_sigma) < self.CALCULATION_PRECISION

    def test_analytical_computations_availability(self):
        """Test that every characteristic is available analytically."""
        comp = self.normal_family(mu=0.0, sigma=1.0).analytical_computations

        expected_chars = {
            CharacteristicName.PDF,
            CharacteristicName.CDF,
            CharacteristicName.PPF,
            CharacteristicName.CF,
            CharacteristicName.MEAN,
            CharacteristicName.VAR,
            CharacteristicName.SD,
            CharacteristicName.MEDIAN,
            CharacteristicName.MODES,
            CharacteristicName.SKEW,
            CharacteristicName.KURT,
            CharacteristicName.ENTROPY,
        }
        assert set(comp.keys()) == expected_chars

    @pytest.mark.parametrize(
        "char_name, test_data, scipy_func, scipy_kwargs",
        [
            (
                CharacteristicName.PDF,
                [-1.0, 0.0, 1.0, 2.0, 3.0, 4.0],
                norm.pdf,
                {"loc": 2.0, "scale": 1.5},
            ),
            (
                CharacteristicName.CDF,
                [-1.0, 0.0, 1.0, 2.0, 3.0, 4.0],
                norm.cdf,
                {"loc": 2.0, "scale": 1.5},
            ),
            (
                CharacteristicName.PPF,
                [0.001, 0.01, 0.1, 0.25, 0.5, 0.75, 0.9, 0.99, 0.999],
                norm.ppf,
                {"loc": 2.0, "scale": 1.5},
            ),
        ],
    )
    def test_array_input_for_characteristics(self, char_name, test_data, scipy_func, scipy_kwargs):
        """Test that characteristics support array inputs."""
        dist = self.normal_dist_example
        char_func = dist.query_method(char_name)

        input_array = np.array(test_data)
        result_array = char_func(input_array)

        assert result_array.shape == input_array.shape

        expected_array = scipy_func(input_array, **scipy_kwargs)

        self.assert_arrays_almost_equal(result_array, expected_array)

    def test_characteristic_function_array_input(self):
        """Test characteristic function calculation with array input."""
        char_func = self.normal_dist_example.query_method(CharacteristicName.CF)
        t_array = np.array([-2.0, -1.0, 0.0, 1.0, 2.0])

        cf_array = char_func(t_array)
        assert cf_array.shape == t_array.shape

        mu, sigma = 2.0, 1.5
        expected = np.exp(1j * mu * t_array - 0.5 * (sigma**2) * (t_array**2))

        self.assert_arrays_almost_equal(cf_array.real, expected.real)
        self.assert_arrays_almost_equal(cf_array.imag, expected.imag)

    def test_normal_support(self):
        """Test that normal distribution has correct support (entire real line)."""
        dist = self.normal_dist_example

        assert dist.support is not None
        assert isinstance(dist.support, ContinuousSupport)

        assert dist.support.contains(0) is True
        assert dist.support.contains(float("inf")) is False
        assert dist.support.contains(float("-inf")) is False

        test_points = np.array([-500, 0, 5])
        results = dist.support.contains(test_points)
        assert np.all(results)

    def test_log_likelihood(self):
        """Test log-likelihood against scipy."""
        points = np.array([0.5, 2.0, 3.25, -1.0])
        sample = ArraySample(points.reshape(-1, 1))

        expected = float(np.sum(norm.logpdf(points, loc=2.0, scale=1.5)))
        assert self.normal_dist_example.log_likelihood(sample) == pytest.approx(expected)


class TestNormalReferenceValues(BaseDistributionTest):
    """Reference values and analytic properties of the characteristics."""

    PRECISION = 1e-14

    def setup_method(self):
        """Setup before each test method."""
        self.normal_family = configure_families_register().get(FamilyName.NORMAL)

    def test_cdf_reference_values(self):
        """Test cdf of N(1, 2) on a grid from -4 to 4."""
        dist = self.normal_family(mu=1.0, sigma=2.0)
        cdf = dist.query_method(CharacteristicName.CDF)

        np.testing.assert_allclose(cdf(REFERENCE_X), REFERENCE_CDF, rtol=0, atol=self.PRECISION)
        scalars = [cdf(float(x)) for x in REFERENCE_X]
        np.testing.assert_allclose(scalars, REFERENCE_CDF, rtol=0, atol=self.PRECISION)

    def test_cdf_at_location_is_one_half(self):
        """Test that cdf(mu) is exactly 0.5."""
        for mu, sigma in [(1.0, 2.0), (-7.5, 0.01), (1e3, 300.0)]:
            dist = self.normal_family(mu=mu, sigma=sigma)
            assert dist.calculate_characteristic(CharacteristicName.CDF, mu) == 0.5

    def test_pdf_reference_values(self):
        """Test pdf of N(1, 2) on a grid from -4 to 4."""
        dist = self.normal_family(mu=1.0, sigma=2.0)
        pdf = dist.query_method(CharacteristicName.PDF)

        np.testing.assert_allclose(pdf(REFERENCE_X), REFERENCE_PDF, rtol=0, atol=self.PRECISION)

    def test_ppf_reference_values(self):
        """Test ppf of N(-1, 0.25) on a grid from 0 to 1."""
        dist = self.normal_family(mu=-1.0, sigma=0.25)
        ppf = dist.query_method(CharacteristicName.PPF)

        np.testing.assert_allclose(ppf(REFERENCE_P), REFERENCE_PPF, rtol=0, atol=self.PRECISION)
        scalars = [ppf(float(p)) for p in REFERENCE_P]
        np.testing.assert_allclose(scalars, REFERENCE_PPF, rtol=0, atol=self.PRECISION)

    def test_ppf_boundaries(self):
        """Test that ppf maps 0, 0.5 and 1 to -inf, mu and inf."""
        dist = self.normal_family(mu=2.0, sigma=1.5)
        ppf = dist.query_method(CharacteristicName.PPF)

        assert ppf(0.0) == float("-inf")
        assert ppf(0.5) == 2.0
        assert ppf(1.0) == float("inf")

    @pytest.mark.parametrize("p", [-0.1, 1.1, float("nan")])
    def test_invalid_probability_ppf(self, p):
        """Test PPF with invalid probability values."""
        dist = self.normal_family(mu=2.0, sigma=1.5)
        ppf = dist.query_method(CharacteristicName.PPF)

        with pytest.raises(InvalidArgumentError):
            ppf(p)
        with pytest.raises(ValueError):
            ppf(np.array([0.5, p]))

    def test_round_trip(self):
        """Test that cdf(ppf(p)) recovers p."""
        dist = self.normal_family(mu=1.5, sigma=0.7)
        cdf = dist.query_method(CharacteristicName.CDF)
        ppf = dist.query_method(CharacteristicName.PPF)

        p = np.linspace(0.001, 0.999, 999)
        np.testing.assert_allclose(cdf(ppf(p)), p, rtol=0, atol=1e-12)

    def test_symmetry(self):
        """Test that pdf and cdf are symmetric around mu."""
        mu = 1.0
        dist = self.normal_family(mu=mu, sigma=2.0)
        pdf = dist.query_method(CharacteristicName.PDF)
        cdf = dist.query_method(CharacteristicName.CDF)

        d = np.linspace(0.0, 10.0, 101)
        np.testing.assert_allclose(pdf(mu + d), pdf(mu - d), rtol=1e-13, atol=0)
        np.testing.assert_allclose(cdf(mu + d) + cdf(mu - d), 1.0, rtol=0, atol=1e-14)

    def test_pdf_non_negative_and_cdf_non_decreasing(self):
        """Test basic shape properties on a wide grid."""
        dist = self.normal_family(mu=-2.0, sigma=3.0)
        x = np.linspace(-60.0, 60.0, 4001)

        assert np.all(dist.calculate_characteristic(CharacteristicName.PDF, x) >= 0.0)
        assert np.all(np.diff(dist.calculate_characteristic(CharacteristicName.CDF, x)) >= 0.0)

    def test_characteristics_are_pure(self):
        """Test that repeated calls give bit-identical results."""
        dist = self.normal_family(mu=0.3, sigma=1.7)
        x = np.linspace(-5.0, 5.0, 41)
        p = np.linspace(0.0, 1.0, 41)

        for name, arg in [
            (CharacteristicName.PDF, x),
            (CharacteristicName.CDF, x),
            (CharacteristicName.PPF, p),
        ]:
            first = dist.calculate_characteristic(name, arg)
            second = dist.calculate_characteristic(name, arg)
            np.testing.assert_array_equal(first, second)


class TestNormalFamilyEdgeCases(BaseDistributionTest):
    """Test edge cases and error conditions."""

    def setup_method(self):
        """Setup before each test method."""
        registry = configure_families_register()
        self.normal_family = registry.get(FamilyName.NORMAL)

    def test_invalid_parameterization(self):
        """Test error for invalid parameterization name."""
        with pytest.raises(KeyError):
            self.normal_family.distribution(parametrization_name="invalid_name", mu=0, sigma=1)

    def test_missing_parameters(self):
        """Test error for missing required parameters."""
        with pytest.raises(TypeError):
            self.normal_family.distribution(mu=0)  # Missing sigma

    def test_unknown_characteristic(self):
        """Test error for a characteristic the family does not define."""
        dist = self.normal_family(mu=0.0, sigma=1.0)
        with pytest.raises(RuntimeError):
            dist.query_method("pmf")

    def test_cached_methods_follow_their_distribution(self):
        """Cached methods never leak into distributions created later."""
        self.normal_family.computation_strategy = DefaultComputationStrategy(enable_caching=True)

        stale = 0
        for k in range(200):
            dist = self.normal_family(mu=float(k), sigma=1.0)
            if dist.calculate_characteristic(CharacteristicName.MEAN, None) != float(k):
                stale += 1
            del dist
            gc.collect()

        assert stale == 0
