#!/usr/bin/env python3
"""
Pure-Python Threaded Rod Generation System

This module generates helically threaded rods (screws) from CSV parameters and exports them as
closed triangle meshes (STL by default).

The mesh is swept from a small set of geometric parameters:
- Axial length and thread pitch
- Minor and major radius
- An arbitrary cyclic thread profile of (axial fraction, radius) control points
- Lead-in / lead-out angles where the thread tapers smoothly down to the minor radius
- A facet count, either fixed or derived from a chord-length / angle resolution policy

The helix is sampled on a (facet, slice) grid, every loop of the profile stacked one pitch above
the previous one, so facet `facets` of one loop is facet 0 of the next. The open ends of the sweep
are closed with apex fans and two flat "plane" faces at the seam, giving a watertight polyhedron.
"""

import csv
import math
import os
from dataclasses import dataclass, field, fields, replace
from typing import List, Tuple, Dict, Optional

import numpy as np
import trimesh
from scipy import interpolate

# Facet resolution policy constants
GRID_FINE = 0.00000095367431640625  # Radii below this resolve to the minimum facet count
MIN_FACETS = 3  # Smallest facet count that still encloses a volume
MIN_POLICY_FACETS = 5  # Floor applied when the count is derived from fa/fs
DEFAULT_FA = 12.0  # Maximum angle per facet in degrees
DEFAULT_FS = 2.0  # Maximum chord length per facet

# A thread profile needs at least two control points to sweep a non-degenerate surface
MIN_THREAD_POINTS = 2


class InvalidGeometryError(ValueError):
    """Raised when a parameter set cannot describe a closed threaded rod."""


class InconsistentProfileError(ValueError):
    """Raised when profile fractions are not monotonic within one pitch."""


def default_profile(minor_radius: float, major_radius: float) -> List[Tuple[float, float]]:
    """
    Build the default trapezoidal thread profile.

    A quarter pitch at the root, a quarter pitch rising flank, a quarter pitch at the crest and
    the falling flank closing the cycle back to the root of the next pitch.

    Args:
        minor_radius: Root radius of the thread
        major_radius: Crest radius of the thread

    Returns:
        List of (fraction, radius) control points
    """
    return [
        (0.0, minor_radius),
        (0.25, minor_radius),
        (0.5, major_radius),
        (0.75, major_radius),
    ]


def resolve_facets(radius: float, fn: int = 0, fa: float = DEFAULT_FA, fs: float = DEFAULT_FS) -> int:
    """
    Resolve the number of facets around the rod from a tessellation quality policy.

    Args:
        radius: Radius the policy is evaluated at (the major radius of the rod)
        fn: Fixed facet count; any value > 0 overrides fa/fs
        fa: Maximum angle per facet in degrees
        fs: Maximum chord length per facet

    Returns:
        Facet count, at least MIN_FACETS
    """
    if radius < GRID_FINE:
        return MIN_FACETS
    if fn > 0:
        return max(int(fn), MIN_FACETS)
    if fa <= 0 or fs <= 0:
        raise InvalidGeometryError(f"fa and fs must be positive, got fa={fa}, fs={fs}")
    return int(math.ceil(max(min(360.0 / fa, radius * 2 * math.pi / fs), MIN_POLICY_FACETS)))


def resample_profile(profile: List[Tuple[float, float]], n_points: int,
                     kind: str = 'linear') -> List[Tuple[float, float]]:
    """
    Resample a cyclic thread profile to evenly spaced fractions.

    The control points are extended by one point on either side of the cycle so that the
    interpolant wraps across the seam between the last point of one pitch and the first point of
    the next.

    Args:
        profile: List of (fraction, radius) control points, fractions strictly increasing
        n_points: Number of points in the resampled profile
        kind: Interpolation kind ('linear', 'quadratic', 'cubic')

    Returns:
        List of (fraction, radius) control points at fractions k / n_points
    """
    if n_points < MIN_THREAD_POINTS:
        raise InvalidGeometryError(
            f"Resampled profile needs at least {MIN_THREAD_POINTS} points, got {n_points}"
        )

    table = np.asarray(profile, dtype=float)
    if table.ndim != 2 or table.shape[1] != 2 or len(table) < MIN_THREAD_POINTS:
        raise InvalidGeometryError(
            f"Profile must hold at least {MIN_THREAD_POINTS} (fraction, radius) pairs"
        )

    fractions = np.concatenate([[table[-1, 0] - 1.0], table[:, 0], [table[0, 0] + 1.0]])
    radii = np.concatenate([[table[-1, 1]], table[:, 1], [table[0, 1]]])
    if np.any(np.diff(fractions) <= 0):
        raise InconsistentProfileError("Profile fractions must be strictly increasing to resample")

    interpolator = interpolate.interp1d(fractions, radii, kind=kind, assume_sorted=True)

    new_fractions = np.arange(n_points) / float(n_points)
    # Spline kinds can overshoot below the axis on steep flanks
    new_radii = np.clip(interpolator(new_fractions), 0.0, None)

    return [(float(f), float(r)) for f, r in zip(new_fractions, new_radii)]


@dataclass
class ScrewParams:
    """
    Parameter record for one threaded rod.

    Angles are in degrees and measured as revolutions from the physical ends of the rod:
    lead-in from the bottom apex plane at -pitch, lead-out back from `length`.
    """
    length: float = 50.0
    pitch: float = 10.0
    minor_radius: float = 5.0
    major_radius: float = 10.0
    profile: Optional[List[Tuple[float, float]]] = None  # Defaults to a trapezoid between the radii
    lead_in_start: float = 270.0
    lead_in_end: float = 630.0
    lead_out_start: float = 720.0
    lead_out_end: float = 360.0
    facets: Optional[int] = None  # Resolved from fn/fa/fs when not given
    fn: int = 0
    fa: float = DEFAULT_FA
    fs: float = DEFAULT_FS
    rotation_phase: float = 0.0  # Rigid rotation about the rod axis, applied after meshing

    @classmethod
    def from_dict(cls, params: Dict) -> 'ScrewParams':
        """
        Create a parameter record from a flat parameter dictionary.

        Profile points may be given either as a 'profile' list or as 'profile_frac_k' /
        'profile_radius_k' entries counted by 'n_profile_points'. Unknown keys are ignored.

        Args:
            params: Dictionary of screw parameters

        Returns:
            Unresolved ScrewParams (call resolved() to fill dependent defaults)
        """
        known = {f.name for f in fields(cls)}
        values = {key: value for key, value in params.items() if key in known}

        if values.get('profile') is None and 'n_profile_points' in params:
            n_points = int(params['n_profile_points'])
            values['profile'] = [
                (float(params[f'profile_frac_{k}']), float(params[f'profile_radius_{k}']))
                for k in range(n_points)
            ]

        return cls(**values)

    def resolved(self) -> 'ScrewParams':
        """
        Resolve defaults that depend on other parameters.

        Scalars are taken as given; the profile default is then derived from the radii and the
        facet count from the resolution policy evaluated at the major radius.

        Returns:
            New ScrewParams with profile and facets filled in
        """
        profile = self.profile
        if profile is None:
            profile = default_profile(self.minor_radius, self.major_radius)

        facets = self.facets
        if facets is None:
            facets = resolve_facets(self.major_radius, self.fn, self.fa, self.fs)

        return replace(self, profile=[tuple(point) for point in profile], facets=int(facets))

    def validate(self):
        """
        Reject parameter sets the sweep cannot close.

        Raises:
            InvalidGeometryError: Non-positive length or pitch, too few facets, negative radii
        """
        if not math.isfinite(self.pitch) or self.pitch <= 0:
            raise InvalidGeometryError(f"pitch must be finite and positive, got {self.pitch}")
        if not math.isfinite(self.length) or self.length <= 0:
            raise InvalidGeometryError(f"length must be finite and positive, got {self.length}")
        if self.facets is None or self.facets < MIN_FACETS:
            raise InvalidGeometryError(f"facets must be at least {MIN_FACETS}, got {self.facets}")
        for name in ('minor_radius', 'major_radius'):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise InvalidGeometryError(f"{name} must be finite and non-negative, got {value}")

    @property
    def num_loops(self) -> int:
        # One extra pitch below and above the rod for the taper zones
        return int(math.floor(self.length / self.pitch)) + 2

    @property
    def concavity_hint(self) -> int:
        return int(math.floor(self.length / self.pitch)) + 3


class ProfileTable:
    """
    Cyclic thread cross-section.

    Control point k and k + num_thread_points are the same point, one full pitch apart.
    Equal consecutive fractions are accepted but degenerate: both points sit at the same height,
    so wherever the taper collapses them onto the minor radius they coincide and the faces
    between them have zero area.
    """

    def __init__(self, profile: List[Tuple[float, float]]):
        table = np.asarray(profile, dtype=float)
        if table.ndim != 2 or table.shape[1] != 2:
            raise InvalidGeometryError(
                f"Profile must be a sequence of (fraction, radius) pairs, got shape {table.shape}"
            )
        if len(table) < MIN_THREAD_POINTS:
            raise InvalidGeometryError(
                f"Profile must have at least {MIN_THREAD_POINTS} points, got {len(table)}"
            )
        if not np.all(np.isfinite(table)):
            raise InvalidGeometryError("Profile contains non-finite values")
        if np.any(table[:, 1] < 0):
            raise InvalidGeometryError(f"Profile radii must be non-negative, got {table[:, 1].tolist()}")

        fractions = table[:, 0]
        if np.any(fractions < 0) or np.any(fractions >= 1):
            raise InconsistentProfileError(
                f"Profile fractions must lie in [0, 1), got {fractions.tolist()}"
            )
        if np.any(np.diff(fractions) < 0):
            raise InconsistentProfileError(
                f"Profile fractions must be non-decreasing, got {fractions.tolist()}"
            )

        self.fractions = fractions
        self.radii = table[:, 1]

    def __len__(self) -> int:
        return len(self.fractions)

    @property
    def num_thread_points(self) -> int:
        return len(self.fractions)

    def at(self, k: int) -> Tuple[float, float]:
        """Control point k, wrapped into the first cycle."""
        idx = k % self.num_thread_points
        return float(self.fractions[idx]), float(self.radii[idx])

    def absolute_fraction(self, k: int) -> float:
        """Unwrapped phase of control point k, counted in pitches."""
        return float(self.fractions[k % self.num_thread_points]) + k // self.num_thread_points


class RadiusTaper:
    """
    Blends the thread radius toward the minor radius at both ends of the rod.

    The lead-in window runs from `lead_in_start` to `lead_in_end` degrees above the bottom apex
    plane (-pitch), the lead-out window from `lead_out_start` to `lead_out_end` degrees back from
    `length`. Beyond either window the rod is plain minor-radius core.
    """

    def __init__(self, params: ScrewParams):
        pitch = params.pitch
        self.minor_radius = params.minor_radius
        self.lead_in_window = (
            -pitch + pitch * params.lead_in_start / 360.0,
            -pitch + pitch * params.lead_in_end / 360.0,
        )
        self.lead_out_window = (
            params.length - pitch * params.lead_out_start / 360.0,
            params.length - pitch * params.lead_out_end / 360.0,
        )

    def effective_radius(self, nominal_r, axial_ref):
        """
        Apply the lead-in / lead-out taper.

        Args:
            nominal_r: Profile radius (scalar or array)
            axial_ref: Axial reference position (scalar or array, broadcast against nominal_r)

        Returns:
            Tapered radius, a float for scalar input
        """
        nominal_r, axial_ref = np.broadcast_arrays(
            np.asarray(nominal_r, dtype=float), np.asarray(axial_ref, dtype=float)
        )
        minor = self.minor_radius
        in_start, in_end = self.lead_in_window
        out_start, out_end = self.lead_out_window

        outside = (axial_ref < in_start) | (axial_ref > out_end)
        in_lead_in = (axial_ref >= in_start) & (axial_ref <= in_end)
        in_lead_out = (axial_ref >= out_start) & (axial_ref <= out_end)

        if in_end > in_start:
            t = (axial_ref - in_start) / (in_end - in_start)
            lead_in_r = minor + t * (nominal_r - minor)
        else:
            # Zero-width window: only its boundary is inside and the thread is fully formed there
            lead_in_r = nominal_r

        if out_end > out_start:
            t = (axial_ref - out_start) / (out_end - out_start)
            lead_out_r = nominal_r + t * (minor - nominal_r)
        else:
            lead_out_r = nominal_r

        # Applied in reverse precedence: outside beats lead-in beats lead-out beats steady
        radius = np.where(in_lead_out, lead_out_r, nominal_r)
        radius = np.where(in_lead_in, lead_in_r, radius)
        radius = np.where(outside, minor, radius)

        if radius.ndim == 0:
            return float(radius)
        return radius


class HelixSampler:
    """
    Maps (facet, slice) pairs onto the helical sweep.

    Vertex i * slices + z holds sample (i, z). The sample (0, slices), which closes the seam at the
    top of the last loop, is stored once more after the grid, followed by the bottom and top apex.
    """

    def __init__(self, params: ScrewParams, profile: ProfileTable, taper: RadiusTaper):
        self.pitch = params.pitch
        self.length = params.length
        self.facets = params.facets
        self.profile = profile
        self.taper = taper

        self.num_thread_points = profile.num_thread_points
        self.num_loops = params.num_loops
        self.slices = self.num_loops * self.num_thread_points

        # Helix samples plus the seam-closing duplicate
        self.num_points = self.facets * self.slices + 1
        self.seam_index = self.num_points - 1
        self.bottom_apex_index = self.num_points
        self.top_apex_index = self.num_points + 1

    def point_index(self, i: int, z: int) -> int:
        """
        Vertex index of sample (i, z).

        Facet `facets` wraps to facet 0 one loop higher, which turns the flat sheet of samples
        into a closed helical tube.
        """
        return (i % self.facets) * self.slices + z + (i // self.facets) * self.num_thread_points

    def _sample(self, i, z):
        n = self.num_thread_points
        loop = z // n
        frac = self.profile.fractions[z % n]
        radius = self.profile.radii[z % n]
        turn = i / float(self.facets)

        # Taper follows the loop count, not the profile phase, so a loop tapers as one piece
        axial_ref = self.pitch * (loop + turn - 1)
        height = self.pitch * (loop + frac + turn - 1)

        effective_r = self.taper.effective_radius(radius, axial_ref)
        angle = np.radians(i * 360.0 / self.facets)
        return effective_r * np.cos(angle), effective_r * np.sin(angle), height

    def vertex(self, i: int, z: int) -> Tuple[float, float, float]:
        """Position of sample (i, z)."""
        x, y, height = self._sample(i, z)
        return float(x), float(y), float(height)

    def axial_reference(self, i: int, z: int) -> float:
        """Axial position the taper is evaluated at for sample (i, z)."""
        return self.pitch * (z // self.num_thread_points + i / float(self.facets) - 1)

    def sample_all(self) -> np.ndarray:
        """
        Sample every vertex of the mesh.

        Returns:
            Array of shape (facets * slices + 3, 3)
        """
        vertices = np.empty((self.num_points + 2, 3))

        i = np.arange(self.facets)[:, None]
        z = np.arange(self.slices)[None, :]
        x, y, height = np.broadcast_arrays(*self._sample(i, z))
        grid = np.stack([x, y, height], axis=-1)
        vertices[:self.seam_index] = grid.reshape(-1, 3)

        vertices[self.seam_index] = self.vertex(0, self.slices)
        vertices[self.bottom_apex_index] = (0.0, 0.0, -self.pitch)
        vertices[self.top_apex_index] = (0.0, 0.0, self.length + self.pitch)

        return vertices


class MeshAssembler:
    """
    Builds the triangle list of the swept rod.

    Faces are wound counter-clockwise seen from outside. Lateral quads run between adjacent
    facets and slices; the bottom and top are closed with apex fans plus a flat fan over the
    facet-0 column where the helix starts and ends.
    """

    def __init__(self, sampler: HelixSampler):
        self.sampler = sampler
        self.facets = sampler.facets
        self.slices = sampler.slices
        self.num_thread_points = sampler.num_thread_points

    @property
    def lateral_rows(self) -> int:
        return self.slices - self.num_thread_points

    @property
    def num_faces(self) -> int:
        lateral = 2 * self.facets * self.lateral_rows
        caps = 2 * self.facets
        planes = 2 * self.num_thread_points
        return lateral + caps + planes

    def assemble(self) -> np.ndarray:
        """
        Emit every face.

        Returns:
            Integer array of shape (num_faces, 3)
        """
        faces = np.empty((self.num_faces, 3), dtype=np.int64)
        cursor = 0
        for emit in (self.line_faces, self.bottom_faces, self.bottom_plane_faces,
                     self.top_faces, self.last_end_face, self.top_plane_faces):
            for face in emit():
                faces[cursor] = face
                cursor += 1

        if cursor != len(faces):
            raise RuntimeError(f"Emitted {cursor} faces, expected {len(faces)}")

        return faces

    def line_faces(self):
        """Lateral faces, two triangles per (facet, slice) quad."""
        point_index = self.sampler.point_index
        last_row = self.lateral_rows - 1

        for i in range(self.facets):
            for z in range(self.lateral_rows):
                a = point_index(i, z)
                b = point_index(i, z + 1)
                c = point_index(i + 1, z)
                if i == self.facets - 1 and z == last_row:
                    # The top corner of the final quad is the seam vertex, past the sample grid
                    d = self.sampler.seam_index
                else:
                    d = point_index(i + 1, z + 1)

                yield a, c, b
                yield b, c, d

    def bottom_faces(self):
        """Fan from the bottom apex under the first helix row."""
        apex = self.sampler.bottom_apex_index
        point_index = self.sampler.point_index

        for i in range(self.facets):
            if i + 1 == self.facets:
                # Wraps to the unwrapped low end: facet 0 one loop up
                next_idx = self.num_thread_points
            else:
                next_idx = point_index(i + 1, 0)
            yield apex, next_idx, point_index(i, 0)

    def bottom_plane_faces(self):
        """Flat ramp left open where the first loop starts, facet-0 slices 0..n."""
        apex = self.sampler.bottom_apex_index

        for k in range(self.num_thread_points, 0, -1):
            yield apex, k - 1, k

    def top_faces(self):
        """Fan from the top apex over the last helix row, all facets but the seam one."""
        apex = self.sampler.top_apex_index
        point_index = self.sampler.point_index
        row = self.lateral_rows

        for i in range(self.facets - 1):
            yield apex, point_index(i, row), point_index(i + 1, row)

    def last_end_face(self):
        """Seam triangle of the top fan, closing onto the duplicate facet-0 vertex."""
        apex = self.sampler.top_apex_index
        yield apex, self.sampler.point_index(self.facets - 1, self.lateral_rows), self.sampler.seam_index

    def top_plane_faces(self):
        """Flat ramp left open where the last loop ends, facet-0 slices slices-n..slices."""
        apex = self.sampler.top_apex_index

        for k in range(self.lateral_rows, self.slices):
            upper = self.sampler.seam_index if k + 1 == self.slices else k + 1
            yield apex, upper, k


@dataclass
class ThreadMesh:
    """Vertices, faces and concavity hint of a generated rod."""
    vertices: np.ndarray
    faces: np.ndarray
    concavity_hint: int
    params: Optional[ScrewParams] = field(default=None, repr=False)

    def to_trimesh(self) -> trimesh.Trimesh:
        # process=False keeps the vertex layout, including the seam duplicate
        return trimesh.Trimesh(vertices=self.vertices, faces=self.faces, process=False)


class MeshBuilder:
    """
    Generates threaded rod geometry from parametric specifications.
    """

    def build(self, params: Optional[ScrewParams] = None) -> ThreadMesh:
        """
        Build the closed mesh of a threaded rod.

        All parameters are validated before any vertex is sampled; a parameter set either yields
        a complete mesh or raises.

        Args:
            params: Screw parameters (defaults when None)

        Returns:
            ThreadMesh with vertices, faces and the concavity hint
        """
        if params is None:
            params = ScrewParams()
        params = params.resolved()
        params.validate()

        profile = ProfileTable(params.profile)
        taper = RadiusTaper(params)
        sampler = HelixSampler(params, profile, taper)
        assembler = MeshAssembler(sampler)

        vertices = sampler.sample_all()
        faces = assembler.assemble()

        return ThreadMesh(
            vertices=vertices,
            faces=faces,
            concavity_hint=params.concavity_hint,
            params=params,
        )

    def apply_rotation_phase(self, mesh: trimesh.Trimesh, angle_deg: float) -> trimesh.Trimesh:
        """
        Rotate a rod about its own axis (Z) by a specified angle.

        Args:
            mesh: The rod mesh to rotate
            angle_deg: Rotation angle in degrees

        Returns:
            Rotated rod mesh
        """
        angle_rad = math.radians(angle_deg)
        cos_a = math.cos(angle_rad)
        sin_a = math.sin(angle_rad)

        rot_matrix = np.array([
            [cos_a, -sin_a, 0],
            [sin_a, cos_a, 0],
            [0, 0, 1]
        ])

        vertices = mesh.vertices.copy() @ rot_matrix.T

        return trimesh.Trimesh(vertices=vertices, faces=mesh.faces, process=False)

    def create_left_hand_version(self, mesh: trimesh.Trimesh) -> trimesh.Trimesh:
        """
        Create a left-hand threaded version of the rod by mirroring across the XZ plane.

        Mirroring reverses the handedness of the helix but also inverts the normals, so the face
        winding is flipped afterwards to keep them pointing outward.

        Args:
            mesh: The right-hand rod mesh

        Returns:
            Mirrored mesh with a left-hand thread and outward normals
        """
        mirrored_mesh = mesh.copy()

        mirrored_mesh.vertices[:, 1] *= -1

        # [v0, v1, v2] -> [v2, v1, v0] reverses each face
        mirrored_mesh.faces = np.fliplr(mirrored_mesh.faces)

        return mirrored_mesh

    def generate_complete_design(self, params: Optional[ScrewParams] = None,
                                 left_hand: bool = False) -> trimesh.Trimesh:
        """
        Generate a rod mesh ready for export.

        Args:
            params: Screw parameters (defaults when None)
            left_hand: Mirror the rod into a left-hand thread

        Returns:
            Trimesh of the rod with the rotation phase applied
        """
        thread_mesh = self.build(params)
        mesh = thread_mesh.to_trimesh()

        if thread_mesh.params.rotation_phase:
            mesh = self.apply_rotation_phase(mesh, thread_mesh.params.rotation_phase)

        if left_hand:
            mesh = self.create_left_hand_version(mesh)

        return mesh


def load_params_from_csv(csv_file: str, row_index: int = 0) -> Dict:
    """
    Load screw parameters from a CSV file.

    Args:
        csv_file: Path to the CSV file
        row_index: Index of the row to load (0-based, excluding header)

    Returns:
        Dictionary of parameters
    """
    with open(csv_file, 'r', encoding='utf-8') as f:
        reader = csv.DictReader(f)
        rows = list(reader)

        if row_index >= len(rows):
            raise InvalidGeometryError(f"Row index {row_index} out of range (file has {len(rows)} rows)")

        row = rows[row_index]

        # Convert string values to appropriate types
        params = {}
        excluded_keys = {'case_index'}

        for key, value in row.items():
            if key in excluded_keys or value is None or value == '':
                continue

            if key in ['facets', 'fn', 'n_profile_points']:
                # Integer parameters
                params[key] = int(float(value))
            else:
                # Float parameters
                params[key] = float(value)

        return params


def main():
    """Example usage of the screw generator."""
    import argparse

    parser = argparse.ArgumentParser(description='Generate threaded rod geometry from CSV parameters')
    parser.add_argument('csv_file', help='Path to CSV file with screw parameters')
    parser.add_argument('--row', type=int, default=0, help='Row index to use (default: 0)')
    parser.add_argument('--output', default='screw_output.stl', help='Output STL file path')
    parser.add_argument('--profile-points', type=int, default=0,
                       help='Resample the thread profile to this many points (default: 0, keep as given)')
    parser.add_argument('--profile-kind', default='linear', choices=['linear', 'quadratic', 'cubic'],
                       help='Interpolation used when resampling the profile (default: linear)')
    parser.add_argument('--left-hand', action='store_true',
                       help='Also export a left-hand threaded version next to the output')

    args = parser.parse_args()

    if args.profile_points and args.profile_points < MIN_THREAD_POINTS:
        parser.error(f"profile-points must be at least {MIN_THREAD_POINTS}")

    # Load parameters
    print(f"Loading parameters from {args.csv_file}, row {args.row}...")
    params = ScrewParams.from_dict(load_params_from_csv(args.csv_file, args.row)).resolved()

    if args.profile_points:
        params = replace(params, profile=resample_profile(params.profile, args.profile_points,
                                                          kind=args.profile_kind))

    print(f"Design parameters:")
    print(f"  Length: {params.length:.4f}, pitch: {params.pitch:.4f}")
    print(f"  Minor radius: {params.minor_radius:.4f}, major radius: {params.major_radius:.4f}")
    print(f"  Profile points: {len(params.profile)}")
    print(f"  Lead-in: {params.lead_in_start:.1f} -> {params.lead_in_end:.1f} deg")
    print(f"  Lead-out: {params.lead_out_start:.1f} -> {params.lead_out_end:.1f} deg")
    print(f"  Facets: {params.facets}")

    # Generate rod
    print("Generating screw geometry...")
    builder = MeshBuilder()
    screw_mesh = builder.generate_complete_design(params)

    print(f"Generated mesh: {len(screw_mesh.vertices)} vertices, {len(screw_mesh.faces)} faces")
    print(f"  Watertight: {screw_mesh.is_watertight}, concavity hint: {params.concavity_hint}")

    print(f"Exporting right-hand version to {args.output}...")
    screw_mesh.export(args.output)

    if args.left_hand:
        print("Generating left-hand version...")
        lh_mesh = builder.create_left_hand_version(screw_mesh)

        # Split the filename to insert "_lh" before the extension
        base_name, ext = os.path.splitext(args.output)
        lh_output = f"{base_name}_lh{ext}"

        print(f"Exporting left-hand version to {lh_output}...")
        lh_mesh.export(lh_output)

    print("Done!")


if __name__ == '__main__':
    main()
