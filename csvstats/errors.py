"""
Error types raised by csvstats.

Every failure carries the process exit code and the headline line written
to stderr. Only csvstats.cli.run catches them.
"""


class StatsError(Exception):
    """Base class for every csvstats failure."""
    exit_code = 1
    headline = "csvstats failed"

    def describe(self) -> str:
        """Headline plus detail, the way it is written to stderr."""
        detail = str(self)
        if not detail:
            return self.headline
        return f"{self.headline}\n{detail}"


class ArgumentParseError(StatsError):
    """Command line the parser cannot interpret."""
    headline = "Failed to parse command line arguments"


class FileAccessError(StatsError):
    """Input path cannot be opened, read or decoded."""
    headline = "Failed to read file"


class NumericParseError(StatsError, ValueError):
    """A field in the input file is not a number."""
    headline = "Failed to parse numeric value"

    def __init__(self, text: str, record: int, field: int):
        self.text = text
        self.record = record
        self.field = field
        super().__init__(
            f"'{text}' is not a number (record {record}, field {field})"
        )


class EmptyDatasetError(StatsError, ValueError):
    """No values to compute statistics over."""
    headline = "No numeric values found"
