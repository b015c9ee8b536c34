# Purpose: Exception types raised while bringing the API up.
# Any of these reaching main.run() is fatal.


class PointsApiError(Exception):
    """Base class for all startup failures of the Points Converter API."""


class ConfigError(PointsApiError):
    """An environment setting could not be interpreted."""


class DatasetError(PointsApiError):
    """The conversions dataset could not be loaded."""


class DatasetNotFoundError(DatasetError):
    """None of the candidate dataset paths exists."""

    def __init__(self, candidates):
        self.candidates = [str(path) for path in candidates]
        super().__init__(
            "Conversion data not found; looked in: " + ", ".join(self.candidates)
        )


class DatasetReadError(DatasetError):
    """The dataset file exists but could not be read."""


class DatasetParseError(DatasetError):
    """The dataset file is not a JSON object of the expected shape."""
