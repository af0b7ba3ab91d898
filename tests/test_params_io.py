"""
Tests for parameter CSV generation, loading and the command-line entry points.
"""

import sys

import pytest
import trimesh

import generate_params
import generate_screw
from generate_params import generate_params_csv, generate_profile, turns_to_lead_angles
from generate_screw import (
    InvalidGeometryError,
    ScrewParams,
    default_profile,
    load_params_from_csv,
)


class TestGenerateProfile:
    """Tests for profile shapes."""

    def test_trapezoid_default_matches_generator_default(self):
        assert generate_profile(5.0, 10.0) == default_profile(5.0, 10.0)

    def test_triangle(self):
        assert generate_profile(5.0, 10.0, 'triangle') == [(0.0, 5.0), (0.5, 10.0)]

    def test_square_has_narrow_flanks(self):
        profile = generate_profile(5.0, 10.0, 'square')
        fractions = [f for f, _ in profile]

        assert fractions == pytest.approx([0.0, 0.45, 0.5, 0.95])

    def test_rejects_unknown_shape(self):
        with pytest.raises(ValueError):
            generate_profile(5.0, 10.0, 'acme')

    def test_rejects_crest_ratio_out_of_range(self):
        with pytest.raises(ValueError):
            generate_profile(5.0, 10.0, 'trapezoid', crest_ratio=0.5)


class TestLeadAngles:

    def test_one_turn_tapers_match_defaults(self):
        assert turns_to_lead_angles(0.75, 1.0) == (270.0, 630.0)
        assert turns_to_lead_angles(1.0, 1.0) == (360.0, 720.0)


class TestCsvRoundTrip:
    """Tests for writing and loading parameter files."""

    @pytest.fixture
    def csv_file(self, tmp_path):
        path = tmp_path / "params.csv"
        generate_params_csv(str(path))
        return path

    def test_defaults_round_trip(self, csv_file):
        params = ScrewParams.from_dict(load_params_from_csv(str(csv_file))).resolved()

        assert params.length == 50.0
        assert params.pitch == 10.0
        assert params.minor_radius == 5.0
        assert params.major_radius == 10.0
        assert (params.lead_in_start, params.lead_in_end) == (270.0, 630.0)
        assert (params.lead_out_start, params.lead_out_end) == (720.0, 360.0)
        assert params.profile == default_profile(5.0, 10.0)
        assert params.facets == 30

    def test_integer_columns(self, csv_file):
        params = load_params_from_csv(str(csv_file))

        assert params['n_profile_points'] == 4
        assert isinstance(params['fn'], int)
        assert 'case_index' not in params

    def test_row_out_of_range(self, csv_file):
        with pytest.raises(InvalidGeometryError):
            load_params_from_csv(str(csv_file), row_index=3)

    def test_from_dict_ignores_unknown_keys(self):
        params = ScrewParams.from_dict({'length': 20.0, 'rpm': 3000.0})

        assert params.length == 20.0
        assert params.profile is None


class TestCommandLine:
    """Smoke tests for both entry points."""

    def test_generate_params_main(self, tmp_path, monkeypatch):
        out = tmp_path / "fine.csv"
        monkeypatch.setattr(sys, 'argv', [
            'generate_params.py', str(out), '--nominal-diameter', '8', '--thread-depth', '0.6',
            '--pitch', '1.25', '--length', '10', '--profile', 'triangle', '--fn', '16',
        ])

        generate_params.main()
        params = ScrewParams.from_dict(load_params_from_csv(str(out))).resolved()

        assert params.major_radius == pytest.approx(4.0)
        assert params.minor_radius == pytest.approx(3.4)
        assert len(params.profile) == 2
        assert params.facets == 16

    def test_generate_screw_main(self, tmp_path, monkeypatch):
        csv_path = tmp_path / "params.csv"
        generate_params_csv(str(csv_path), fn=12)
        out = tmp_path / "screw.stl"
        monkeypatch.setattr(sys, 'argv', [
            'generate_screw.py', str(csv_path), '--output', str(out),
            '--profile-points', '8', '--left-hand',
        ])

        generate_screw.main()

        right = trimesh.load(str(out))
        left = trimesh.load(str(tmp_path / "screw_lh.stl"))
        assert len(right.faces) == len(left.faces)
        assert right.volume > 0
        assert left.volume > 0
