"""Text output for the command line."""

import traceback

import click

from gitlab_mr.exceptions import GitlabMrError


class Output:
    """Writes results to stdout and problems to stderr."""

    def __init__(self, debug_active: bool = False) -> None:
        self.debug_active = debug_active

    def println(self, line: str) -> None:
        click.echo(line)

    def errorln(self, line: str) -> None:
        click.echo(line, err=True)

    def exception(self, exception: BaseException) -> None:
        """
        Report an error.

        Errors with a readable message print just that message; anything
        else prints the full traceback.
        """
        if isinstance(exception, GitlabMrError):
            self.errorln(exception.readable_message)
            if self.debug_active:
                self.errorln("".join(traceback.format_exception(exception)))
        else:
            self.errorln("".join(traceback.format_exception(exception)))
