class HomecareError(Exception):
    """Base class for errors raised by the homecare package."""


class ModelIntegrityError(HomecareError):
    """A keyword profile weighs keywords it does not list."""

    def __init__(self, disease_key: str, stray: list[str]):
        self.disease_key = disease_key
        self.stray = stray
        super().__init__(f"{disease_key}: weights reference unknown keywords {', '.join(stray)}")


class LookupFailure(HomecareError):
    """A single reference lookup errored."""

    def __init__(self, disease_key: str, cause: BaseException):
        self.disease_key = disease_key
        self.cause = cause
        super().__init__(f"reference lookup failed for {disease_key!r}: {cause}")


class ReferenceStoreUnavailable(HomecareError):
    """Every reference lookup of a prediction failed."""
