"""
Pytest configuration and shared fixtures for the screw generator tests.
"""

import pytest

from generate_screw import (
    HelixSampler,
    MeshBuilder,
    ProfileTable,
    RadiusTaper,
    ScrewParams,
)


TEST_FACETS = 12  # Coarse enough to keep the suite fast


@pytest.fixture
def default_params():
    """Default screw parameters with a fixed facet count."""
    return ScrewParams(facets=TEST_FACETS)


@pytest.fixture
def no_taper_params():
    """Trapezoid thread with every lead window collapsed to zero width."""
    return ScrewParams(
        length=50.0,
        pitch=10.0,
        minor_radius=5.0,
        major_radius=10.0,
        profile=[(0.0, 5.0), (0.25, 5.0), (0.5, 10.0), (0.75, 10.0)],
        lead_in_start=0.0,
        lead_in_end=0.0,
        lead_out_start=0.0,
        lead_out_end=0.0,
        facets=TEST_FACETS,
    )


@pytest.fixture
def builder():
    return MeshBuilder()


@pytest.fixture
def default_mesh(builder, default_params):
    """ThreadMesh built from the default parameters."""
    return builder.build(default_params)


def make_sampler(params):
    """Wire up a HelixSampler the way MeshBuilder does."""
    params = params.resolved()
    profile = ProfileTable(params.profile)
    return HelixSampler(params, profile, RadiusTaper(params))


@pytest.fixture
def default_sampler(default_params):
    return make_sampler(default_params)


@pytest.fixture
def sampler_factory():
    return make_sampler
