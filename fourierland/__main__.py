"""
Fourierland command line: three commands.

    fourierland run --output ./scene                         Default 3-component wave
    fourierland run --freq 2 5 8 --amp .5 .3 .2 --phase 0 .785 1.571 --output ./scene
    fourierland peaks --freq 3 7 --amp 1 .5 --phase 0 0 --top 2
    fourierland config --config scene.yaml                   Print effective config
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import yaml


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S',
    )

    from fourierland.config import load_config
    try:
        config = load_config(args.config)
    except (OSError, yaml.YAMLError, ValueError) as e:
        print(f"Error: cannot load config {args.config}: {e}")
        return 1

    if args.command == 'config':
        print(yaml.safe_dump(config, sort_keys=False), end='')
        return 0

    try:
        params = _params_from_args(args, config)
    except (TypeError, ValueError) as e:
        print(f"Error: invalid wave defaults in config: {e}")
        return 1

    try:
        if args.command == 'run':
            return _run(args, params, config)
        return _peaks(args, params, config)
    except ValueError as e:
        print(f"Error: {e}")
        return 1


def _add_wave_args(parser: argparse.ArgumentParser):
    parser.add_argument('--freq', type=float, nargs='*', default=None,
                        help='Component frequencies in Hz (default: config defaults)')
    parser.add_argument('--amp', type=float, nargs='*', default=None,
                        help='Component amplitudes (default: config defaults)')
    parser.add_argument('--phase', type=float, nargs='*', default=None,
                        help='Component phases in radians (default: config defaults)')
    parser.add_argument('--samples', type=int, default=None,
                        help='Sample count (default: config defaults)')


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='fourierland',
        description='Composite waves, their spectrum, and 3D scene geometry.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
examples:
  fourierland run --output ./scene
  fourierland peaks --freq 2 5 8 --amp .5 .3 .2 --phase 0 0 0
  fourierland config
""",
    )
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('--config', type=str, default=None,
                        help='YAML file overriding the built-in config')
    common.add_argument('--verbose', action='store_true', help='Debug logging')

    subparsers = parser.add_subparsers(dest='command', required=True)

    run_parser = subparsers.add_parser('run', parents=[common],
                                       help='Compute a snapshot and write it to parquet')
    _add_wave_args(run_parser)
    run_parser.add_argument('--output', type=str, required=True,
                            help='Output directory')

    peaks_parser = subparsers.add_parser('peaks', parents=[common],
                                         help='Print the strongest spectrum bins')
    _add_wave_args(peaks_parser)
    peaks_parser.add_argument('--top', type=int, default=3,
                              help='Number of peaks to print (default: 3)')

    subparsers.add_parser('config', parents=[common], help='Print the effective config')

    return parser


def _params_from_args(args, config):
    from fourierland.parameters import WaveParameters

    defaults = config['defaults']
    return WaveParameters(
        frequencies=args.freq if args.freq is not None else defaults['frequencies'],
        amplitudes=args.amp if args.amp is not None else defaults['amplitudes'],
        phases=args.phase if args.phase is not None else defaults['phases'],
        sample_count=args.samples if args.samples is not None else defaults['sample_count'],
    )


def _warn_issues(params, config):
    from fourierland.parameters import validate_parameters
    for issue in validate_parameters(params, config):
        print(f"[fourierland] WARNING: {issue}")


def _run(args, params, config) -> int:
    from fourierland.export import write_snapshot
    from fourierland.pipeline import compute_snapshot
    from fourierland.spectrum import peak_bins

    _warn_issues(params, config)
    snapshot = compute_snapshot(params, config=config)

    output_dir = Path(args.output).expanduser().resolve()
    written = write_snapshot(snapshot, output_dir)

    print(f"[fourierland] {params.sample_count} samples, "
          f"{len(params.components)} components, {len(snapshot.spectrum)} bins")
    print(f"[fourierland] peaks: {peak_bins(snapshot.spectrum, len(params.components))}")
    for name, path in written.items():
        print(f"  {name:<17} → {path}")
    return 0


def _peaks(args, params, config) -> int:
    from fourierland.spectrum import analyze, peak_bins
    from fourierland.synth import synthesize_composite

    _warn_issues(params, config)
    waveform = synthesize_composite(
        params.sample_count, params.frequencies, params.amplitudes, params.phases,
    )
    spectrum = analyze(waveform)

    print(f"{'bin':>5}  {'magnitude':>12}  {'phase':>8}")
    for k in peak_bins(spectrum, args.top):
        b = spectrum[k]
        print(f"{b.frequency_index:>5}  {b.magnitude:>12.4f}  {b.phase:>8.4f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
