#!/usr/bin/env python3
"""
Parameter CSV Generation Script

This script generates a CSV file with screw design parameters from abstract design requirements.
It translates high-level thread specifications into the detailed parameter format used by the screw generator.
"""

import argparse
import csv
import math
from typing import List, Tuple


# Profile shape constants
PROFILE_SHAPES = ('trapezoid', 'triangle', 'square')
DEFAULT_CREST_RATIO = 0.25  # Crest (and root) flat as a fraction of the pitch
SQUARE_CREST_RATIO = 0.45  # Leaves a 5% flank either side of a square thread
MAX_CREST_RATIO = 0.5  # Crest and root flats together cannot exceed one pitch


def generate_profile(minor_radius: float, major_radius: float, shape: str = 'trapezoid',
                     crest_ratio: float = DEFAULT_CREST_RATIO) -> List[Tuple[float, float]]:
    """
    Generate the control points of one pitch of the thread cross-section.

    Args:
        minor_radius: Root radius
        major_radius: Crest radius
        shape: One of 'trapezoid', 'triangle', 'square'
        crest_ratio: Width of the crest flat (and of the root flat) as a fraction of the pitch,
                     used by the trapezoid shape

    Returns:
        List of (fraction, radius) control points with increasing fractions in [0, 1)

    Note:
        The cycle starts at the root. With crest_ratio = 0.25 the trapezoid is the default profile
        of the screw generator: root flat, rising flank, crest flat, falling flank, a quarter pitch each.
    """
    if shape == 'triangle':
        # Sharp V thread, root and crest half a pitch apart
        return [(0.0, minor_radius), (0.5, major_radius)]

    if shape == 'square':
        crest_ratio = SQUARE_CREST_RATIO
    elif shape != 'trapezoid':
        raise ValueError(f"Unknown profile shape '{shape}', expected one of {PROFILE_SHAPES}")

    if crest_ratio <= 0 or crest_ratio >= MAX_CREST_RATIO:
        raise ValueError(f"crest_ratio must be in (0, {MAX_CREST_RATIO}), got {crest_ratio}")

    flank = (1.0 - 2.0 * crest_ratio) / 2.0

    return [
        (0.0, minor_radius),
        (crest_ratio, minor_radius),
        (crest_ratio + flank, major_radius),
        (2.0 * crest_ratio + flank, major_radius),
    ]


def turns_to_lead_angles(start_turns: float, taper_turns: float) -> Tuple[float, float]:
    """
    Translate a taper position and length in turns into the start/end angles of a lead window.

    Args:
        start_turns: Turns between the measuring point and where the taper begins
        taper_turns: Length of the taper in turns

    Returns:
        Tuple of (start, end) angles in degrees
    """
    start = start_turns * 360.0
    end = (start_turns + taper_turns) * 360.0
    return start, end


def generate_params_csv(
    output_file: str,
    nominal_diameter: float = 20.0,
    thread_depth: float = 5.0,
    pitch: float = 10.0,
    length: float = 50.0,
    profile_shape: str = 'trapezoid',
    crest_ratio: float = DEFAULT_CREST_RATIO,
    lead_in_turns: float = 1.0,
    lead_out_turns: float = 1.0,
    fn: int = 0,
    fa: float = 12.0,
    fs: float = 2.0,
    rotation_phase: float = 0.0,
    case_index: int = 0
):
    """
    Generate a CSV file with screw design parameters from abstract requirements.

    Args:
        output_file: Path to the output CSV file
        nominal_diameter: Major (crest) diameter of the thread
        thread_depth: Radial depth of the thread, major radius minus minor radius
        pitch: Axial distance between adjacent crests
        length: Axial length of the rod
        profile_shape: Thread cross-section shape ('trapezoid', 'triangle', 'square')
        crest_ratio: Crest flat as fraction of the pitch (trapezoid only)
        lead_in_turns: Turns over which the thread grows in at the bottom
        lead_out_turns: Turns over which the thread runs out at the top
        fn: Fixed facet count (0 = derive from fa/fs)
        fa: Maximum angle per facet in degrees
        fs: Maximum chord length per facet
        rotation_phase: Rotation about the rod axis in degrees
        case_index: Case index for tracking
    """
    # Translate abstract requirements to concrete parameters
    major_radius = nominal_diameter / 2.0
    minor_radius = major_radius - thread_depth
    profile = generate_profile(minor_radius, major_radius, profile_shape, crest_ratio)

    # Lead-in starts three quarters of a turn above the bottom apex plane, lead-out ends one turn
    # below the rod length, matching the screw generator defaults for one-turn tapers
    lead_in_start, lead_in_end = turns_to_lead_angles(0.75, lead_in_turns)
    lead_out_end, lead_out_start = turns_to_lead_angles(1.0, lead_out_turns)

    # Prepare the CSV row
    header = ['case_index', 'length', 'pitch', 'minor_radius', 'major_radius']
    row = [case_index, length, pitch, minor_radius, major_radius]

    header.extend(['lead_in_start', 'lead_in_end', 'lead_out_start', 'lead_out_end'])
    row.extend([lead_in_start, lead_in_end, lead_out_start, lead_out_end])

    # Add profile control points
    header.append('n_profile_points')
    row.append(len(profile))
    for k, (fraction, radius) in enumerate(profile):
        header.extend([f'profile_frac_{k}', f'profile_radius_{k}'])
        row.extend([fraction, radius])

    # Add remaining parameters
    header.extend(['fn', 'fa', 'fs', 'rotation_phase'])
    row.extend([fn, fa, fs, rotation_phase])

    # Write to CSV
    with open(output_file, 'w', newline='', encoding='utf-8') as f:
        writer = csv.writer(f)
        writer.writerow(header)
        writer.writerow(row)

    print(f"Generated parameter file: {output_file}")
    print(f"  Length: {length}, pitch: {pitch}")
    print(f"  Radii: minor={minor_radius}, major={major_radius}")
    print(f"  Profile ({profile_shape}): {[(round(f, 4), round(r, 4)) for f, r in profile]}")
    print(f"  Lead-in: {lead_in_start:.1f} -> {lead_in_end:.1f} deg, "
          f"lead-out: {lead_out_start:.1f} -> {lead_out_end:.1f} deg")
    print(f"  Resolution: fn={fn}, fa={fa}, fs={fs}")


def main():
    """Main function for command-line interface."""
    parser = argparse.ArgumentParser(
        description='Generate screw design parameters CSV from abstract requirements',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate with all defaults (20 diameter, 10 pitch, 50 long trapezoid thread)
  python generate_params.py input.csv

  # A fine V thread
  python generate_params.py input.csv --nominal-diameter 8 --thread-depth 0.6 --pitch 1.25 --profile triangle

  # Square thread with long tapers and a fixed facet count
  python generate_params.py input.csv --profile square --lead-in-turns 2 --lead-out-turns 2 --fn 64
        """
    )

    parser.add_argument('output', help='Output CSV file path')
    parser.add_argument('--nominal-diameter', type=float, default=20.0,
                       help='Major diameter of the thread (default: 20.0)')
    parser.add_argument('--thread-depth', type=float, default=5.0,
                       help='Radial thread depth (default: 5.0)')
    parser.add_argument('--pitch', type=float, default=10.0,
                       help='Thread pitch (default: 10.0)')
    parser.add_argument('--length', type=float, default=50.0,
                       help='Rod length (default: 50.0)')
    parser.add_argument('--profile', choices=PROFILE_SHAPES, default='trapezoid',
                       help='Thread cross-section shape (default: trapezoid)')
    parser.add_argument('--crest-ratio', type=float, default=DEFAULT_CREST_RATIO,
                       help='Crest flat as fraction of pitch, trapezoid only (default: 0.25)')
    parser.add_argument('--lead-in-turns', type=float, default=1.0,
                       help='Turns over which the thread grows in (default: 1.0)')
    parser.add_argument('--lead-out-turns', type=float, default=1.0,
                       help='Turns over which the thread runs out (default: 1.0)')
    parser.add_argument('--fn', type=int, default=0,
                       help='Fixed facet count, 0 to derive from fa/fs (default: 0)')
    parser.add_argument('--fa', type=float, default=12.0,
                       help='Maximum angle per facet in degrees (default: 12.0)')
    parser.add_argument('--fs', type=float, default=2.0,
                       help='Maximum chord length per facet (default: 2.0)')
    parser.add_argument('--rotation-phase', type=float, default=0.0,
                       help='Rotation about the rod axis in degrees (default: 0.0)')
    parser.add_argument('--case-index', type=int, default=0,
                       help='Case index for tracking (default: 0)')

    args = parser.parse_args()

    # Validate inputs
    if args.pitch <= 0:
        parser.error("pitch must be positive")
    if args.length <= 0:
        parser.error("length must be positive")
    if args.thread_depth < 0 or args.thread_depth > args.nominal_diameter / 2.0:
        parser.error("thread-depth must be between 0 and half the nominal diameter")
    if args.crest_ratio <= 0 or args.crest_ratio >= MAX_CREST_RATIO:
        parser.error(f"crest-ratio must be between 0 and {MAX_CREST_RATIO}")
    if args.lead_in_turns < 0 or args.lead_out_turns < 0:
        parser.error("lead-in-turns and lead-out-turns must be non-negative")
    if args.fn < 0 or (args.fn == 0 and (args.fa <= 0 or args.fs <= 0)):
        parser.error("fn must be non-negative, fa and fs positive")
    if not math.isfinite(args.nominal_diameter) or args.nominal_diameter <= 0:
        parser.error("nominal-diameter must be positive")

    # Generate the CSV
    generate_params_csv(
        output_file=args.output,
        nominal_diameter=args.nominal_diameter,
        thread_depth=args.thread_depth,
        pitch=args.pitch,
        length=args.length,
        profile_shape=args.profile,
        crest_ratio=args.crest_ratio,
        lead_in_turns=args.lead_in_turns,
        lead_out_turns=args.lead_out_turns,
        fn=args.fn,
        fa=args.fa,
        fs=args.fs,
        rotation_phase=args.rotation_phase,
        case_index=args.case_index
    )


if __name__ == '__main__':
    main()
