"""
Command-line interface for coilcalc.

    coilcalc [-c cap_pF] [-r] [-v] freq_w_cap [freq_wo_cap]
    coilcalc -f [-c cap_pF] [-v] inductance_uH

Frequencies in MHz. Results go to stdout; usage errors and log output go
to stderr. -v/--verbose logs intermediate values at DEBUG level.
"""

import logging
import sys

import click

from coilcalc.calculator import characterize_coil, compute_frequency
from coilcalc.models import CoilMeasurement
from coilcalc.report import format_characteristics, format_inverse
from coilcalc.resonance import DEFAULT_CAPACITOR_PF

logger = logging.getLogger(__name__)


class _CoilCommand(click.Command):
    """Click command that lists its options alongside every usage error."""

    def parse_args(self, ctx, args):
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            e.message = _with_options(ctx, e.message)
            raise


def _with_options(ctx: click.Context, message: str) -> str:
    formatter = ctx.make_formatter()
    ctx.command.format_options(ctx, formatter)
    return f"{message}\n\n{formatter.getvalue().rstrip()}"


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger("coilcalc").setLevel(level)


@click.command(name="coilcalc", cls=_CoilCommand)
@click.option(
    "-c",
    "capacitor_pf",
    type=float,
    default=DEFAULT_CAPACITOR_PF,
    show_default=True,
    metavar="CAP_PF",
    help="Known capacitor value (pF). Covington's worked example used 150.",
)
@click.option(
    "-f",
    "compute_f",
    is_flag=True,
    help="Compute F (MHz) from an inductance in uH rather than L.",
)
@click.option(
    "-r",
    "print_table",
    is_flag=True,
    help="Print table of resonant frequencies.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Log intermediate values to stderr.",
)
@click.argument("values", nargs=-1, type=float, metavar="FREQ_W_CAP [FREQ_WO_CAP]")
@click.pass_context
def cli(ctx, capacitor_pf, compute_f, print_table, verbose, values):
    """Compute coil inductance and distributed capacitance from resonant frequencies (MHz)."""
    _configure_logging(verbose)

    if compute_f:
        if len(values) != 1:
            raise click.UsageError(
                _with_options(ctx, f"-f takes exactly one inductance (uH), got {len(values)} values"), ctx=ctx
            )
        result = compute_frequency(values[0], capacitor_pf)
        for line in format_inverse(result):
            click.echo(line)
        return

    if len(values) not in (1, 2):
        raise click.UsageError(
            _with_options(ctx, f"expected freq_w_cap [freq_wo_cap], got {len(values)} values"), ctx=ctx
        )

    measurement = CoilMeasurement(
        freq_with_cap_mhz=values[0],
        freq_without_cap_mhz=values[1] if len(values) == 2 else None,
        capacitor_pf=capacitor_pf,
    )
    logger.debug("Measurement: %s", measurement)
    result = characterize_coil(measurement, with_table=print_table)
    for line in format_characteristics(result):
        click.echo(line)
