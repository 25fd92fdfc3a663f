"""Public API surface for hi_runner."""

from hi_runner.collectors import ProcessEntry, UserEntry, iter_processes, iter_users
from hi_runner.options import DEFAULT_PROG, OptionParser, Options, format_usage, parse_options
from hi_runner.paths import PathProblem, ValidationResult, validate_path
from hi_runner.redirection import apply_redirection
from hi_runner.streams import StreamSinks

__all__ = [
    "DEFAULT_PROG",
    "OptionParser",
    "Options",
    "PathProblem",
    "ProcessEntry",
    "StreamSinks",
    "UserEntry",
    "ValidationResult",
    "apply_redirection",
    "format_usage",
    "iter_processes",
    "iter_users",
    "parse_options",
    "validate_path",
]
