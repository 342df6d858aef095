"""Command-line interface for radixfft."""

import argparse
import sys
import time

from . import __version__
from .bench import (
    DEFAULT_REPEATS,
    DEFAULT_SIZES,
    SIGNAL_SIZE,
    bench_signals,
    bench_sizes,
    format_results,
)
from .fft import FFT


def _log(message):
    print(f"[radixfft] {message}", file=sys.stderr)


def _format_bin(index, value, precision, magnitude):
    if magnitude:
        return f"{index}\t{value.norm():.{precision}f}"
    return f"{index}\t{value.re:.{precision}f}\t{value.im:.{precision}f}"


# ---------------------------------------------------------------------------
# Sub-command handlers
# ---------------------------------------------------------------------------

def _cmd_transform(args):
    samples = args.samples
    spectrum = FFT().transform_real(samples)
    if len(spectrum) != len(samples):
        _log(f"padded {len(samples)} samples to {len(spectrum)}")

    for k, value in enumerate(spectrum):
        print(_format_bin(k, value, args.precision, args.magnitude))


def _cmd_bench(args):
    t0 = time.time()
    if args.suite == "sizes":
        sizes = args.sizes or DEFAULT_SIZES
        _log(f"Timing sine transforms at {len(sizes)} sizes, {args.repeats} repeats each …")
        results = bench_sizes(sizes, args.repeats)
    else:
        _log(f"Timing {args.size}-sample signals, {args.repeats} repeats each …")
        results = bench_signals(args.size, args.repeats)
    _log(f"  done in {time.time() - t0:.1f}s")

    print(format_results(results))


def _positive_int(text):
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {text}")
    return value


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def build_parser():
    """Construct and return the top-level :class:`ArgumentParser`."""
    parser = argparse.ArgumentParser(
        prog="radixfft",
        description="Radix-2 fast Fourier transform – no external dependencies.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )

    sub = parser.add_subparsers(dest="command", help="operation")

    # --- transform ---------------------------------------------------------
    p_fft = sub.add_parser(
        "transform",
        help="Transform real samples given on the command line",
        description="Print the DFT of the given real samples, zero-padded to a power of two.",
    )
    p_fft.add_argument("samples", nargs="*", type=float, help="real input samples")
    p_fft.add_argument("-p", "--precision", type=int, default=6, help="decimal places (default: 6)")
    p_fft.add_argument("-m", "--magnitude", action="store_true", help="print |X[k]| instead of re/im")
    p_fft.set_defaults(func=_cmd_transform)

    # --- bench -------------------------------------------------------------
    p_bench = sub.add_parser(
        "bench",
        help="Time the transform",
        description="Time the transform across sizes or across signal types.",
    )
    p_bench.add_argument("suite", choices=("sizes", "signals"), help="benchmark suite")
    p_bench.add_argument("-r", "--repeats", type=_positive_int, default=DEFAULT_REPEATS,
                         help=f"timed calls per signal (default: {DEFAULT_REPEATS})")
    p_bench.add_argument("--sizes", type=_positive_int, nargs="+", default=None,
                         help="signal lengths for the 'sizes' suite (default: 8 … 4096)")
    p_bench.add_argument("--size", type=_positive_int, default=SIGNAL_SIZE,
                         help=f"signal length for the 'signals' suite (default: {SIGNAL_SIZE})")
    p_bench.set_defaults(func=_cmd_bench)

    return parser


def main(argv=None):
    """Entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    args.func(args)
