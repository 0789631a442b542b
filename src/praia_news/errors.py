"""Exceptions raised by the news pipeline."""


class NewsPipelineError(Exception):
    """Base class for every failure the pipeline reports to its caller."""


class ConfigurationError(NewsPipelineError):
    """A required setting (usually the LLM API key) is missing or invalid."""


class UpstreamError(NewsPipelineError):
    """The LLM provider call failed or returned a non-success status."""


class MalformedResponseError(NewsPipelineError):
    """The LLM response could not be parsed into a raw news batch."""


class ValidationError(NewsPipelineError):
    """A caller request was rejected before any artifact was written."""


class ArtifactWriteError(NewsPipelineError):
    """One or more artifact files could not be written."""


class DraftError(NewsPipelineError):
    """The saved preview draft exists but cannot be read back."""
