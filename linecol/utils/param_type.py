"""Click parameter type that resolves arguments into PathSpecifiers.

For plain click commands that embed linecol:

    @click.argument("target", type=PathSpecifierParamType())

The linecol commands themselves resolve inside the command body, since
recent Typer releases parse with their own copy of click.
"""

from typing import Optional

import click

from linecol.core.models import ErrorKind, PathSpecifier
from linecol.utils.path_resolver import PathResolutionError, PathResolver


class PathSpecifierParamType(click.ParamType):
    """Converts a raw command-line value into a PathSpecifier.

    Resolution failures become click usage errors, so the surrounding
    command prints them with the standard usage banner and exits with
    code 2.
    """

    name = "path[:line[:column]]"

    def __init__(self, resolver: Optional[PathResolver] = None):
        self.resolver = resolver

    def convert(self, value, param, ctx):
        if isinstance(value, PathSpecifier):
            return value
        # Without an injected resolver the working directory is read at parse time
        resolver = self.resolver or PathResolver()
        try:
            return resolver.resolve(value)
        except PathResolutionError as e:
            if e.kind is ErrorKind.EMPTY_ARGUMENT:
                arg_name = param.human_readable_name if param is not None else "..."
                self.fail(f'Invalid argument: "{arg_name}" is empty', param, ctx)
            self.fail(str(e), param, ctx)
