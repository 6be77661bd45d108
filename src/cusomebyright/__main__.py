import functools
import json
import logging
import traceback

import click

from cusomebyright.log import setup_logging
from cusomebyright.predicates import PREDICATES, get_predicate
from cusomebyright.scan import assign, cusome_by_right

logger = logging.getLogger(__name__)


def load_array(inputfile):
    try:
        data = json.load(inputfile)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"not valid JSON: {e}", param_hint="INPUTFILE")
    if not isinstance(data, list):
        raise click.BadParameter(
            f"expected a JSON array, got {type(data).__name__}", param_hint="INPUTFILE"
        )
    return data


@click.command(context_settings={"auto_envvar_prefix": "CUSOME_BY_RIGHT"})
@click.argument("inputfile", type=click.File("r"))
@click.argument("n", type=int)
@click.option(
    "--predicate",
    type=click.Choice(sorted(PREDICATES)),
    default="truthy",
    show_default=True,
)
@click.option("--stride", type=int, default=None)
@click.option("--offset", type=int, default=None)
@click.option(
    "--fill",
    default="null",
    show_default=True,
    help="JSON value for output slots outside the stride pattern.",
)
@click.option("--debug/--no-debug", default=False)
def main(inputfile, n, predicate, stride, offset, fill, debug):
    """Reads a JSON array from INPUTFILE ("-" for stdin) and prints, as JSON,
    whether at least N of its elements pass the predicate, scanning from the
    right."""
    setup_logging(debug)

    x = load_array(inputfile)
    fcn = get_predicate(predicate)

    if stride is None and offset is None:
        run = functools.partial(cusome_by_right, x, n, fcn)
    else:
        if stride is None or offset is None:
            raise click.UsageError("--stride and --offset must be given together")
        try:
            placeholder = json.loads(fill)
        except json.JSONDecodeError as e:
            raise click.BadParameter(f"not valid JSON: {e}", param_hint="--fill")
        last = offset + stride * (len(x) - 1)
        if x and (offset < 0 or last < 0):
            raise click.BadParameter(
                f"output slots must not be negative (first {offset}, last {last})",
                param_hint="--offset",
            )
        size = max(offset, last) + 1 if x else 0
        logger.debug("Allocating %d output slots", size)
        out = [placeholder] * size
        run = functools.partial(assign, x, n, out, stride, offset, fcn)

    try:
        result = run()
    except Exception:
        if debug:
            traceback.print_exc()
        raise

    click.echo(json.dumps(result))


if __name__ == "__main__":
    main()
