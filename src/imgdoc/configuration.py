from collections.abc import Mapping
import dataclasses
from dataclasses import dataclass
import logging
from typing import Any

from .ordering import sort_filenames


logger = logging.getLogger(__name__)


DEFAULT_BASENAME = "cn"
DEFAULT_OUTPUT_NAME = "output.pdf"


@dataclass(frozen=True)
class Configuration:
    verbose: bool = False
    sort_numerically: bool = False
    # Stem for files written by the conversion step
    basename: str | None = DEFAULT_BASENAME
    output_name: str | None = DEFAULT_OUTPUT_NAME
    input_filenames: tuple[str, ...] = ()


def default_configuration() -> Configuration:
    return Configuration()


def resolve_options(options: Mapping[str, Any]) -> Configuration:
    """
    Build a Configuration from a mapping of flag names to values.

    Recognized keys are `verbose` and `sort_numerically` (presence flags),
    `basename` (a string) and `input` (a sequence of filenames). Anything
    else is ignored. Missing keys and `None` values keep the default.

    `output_name` is never taken from `options`.
    """
    config = default_configuration()

    if options.get("verbose"):
        config = dataclasses.replace(config, verbose=True)

    if options.get("sort_numerically"):
        config = dataclasses.replace(config, sort_numerically=True)

    if (basename := options.get("basename")) is not None:
        config = dataclasses.replace(config, basename=basename)

    match options.get("input"):
        case None:
            pass
        case str() as filename:
            config = dataclasses.replace(config, input_filenames=(filename,))
        case filenames:
            config = dataclasses.replace(config, input_filenames=tuple(filenames))

    if config.sort_numerically and config.input_filenames:
        ordered = sort_filenames(config.input_filenames)
        if ordered != config.input_filenames:
            logger.debug("Reordered input files: %s", ", ".join(ordered))
        config = dataclasses.replace(config, input_filenames=ordered)

    return config
