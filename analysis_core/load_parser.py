"""Logic for loading an annotation parser from a ``module:attribute`` reference."""

import importlib

from analysis_core.annotation_parser import AnnotationParser
from analysis_core.errors import ConfigError


def load_parser(reference: str) -> AnnotationParser:
    """Import the referenced parser class or factory and instantiate it.

    Objects that already have a ``parse`` method are returned unchanged.
    """
    module_name, sep, attribute = reference.partition(":")
    if not sep or not module_name or not attribute:
        msg = f"Parser reference must look like 'package.module:Name': {reference!r}"
        raise ConfigError(msg)

    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        msg = f"Cannot import parser module {module_name!r}: {exc}"
        raise ConfigError(msg) from exc

    target = getattr(module, attribute, None)
    if target is None:
        msg = f"Module {module_name!r} has no attribute {attribute!r}"
        raise ConfigError(msg)

    if isinstance(target, type) or not hasattr(target, "parse"):
        if not callable(target):
            msg = f"{reference} is neither a parser nor a parser factory"
            raise ConfigError(msg)
        parser = target()
    else:
        parser = target
    if not callable(getattr(parser, "parse", None)):
        msg = f"{reference} does not provide a parse(file, module) method"
        raise ConfigError(msg)
    return parser
