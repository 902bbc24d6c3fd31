class PromptForgeError(Exception):
    """Base error for the refinement pipeline. `status_code` is the HTTP status the API reports."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(PromptForgeError):
    """Bad or missing request input. Caller's fault, never retried."""

    status_code = 400


class AnalysisUnavailable(PromptForgeError):
    """The analysis model returned no text or something that is not a JSON object."""


class RefinementUnavailable(PromptForgeError):
    """The refinement model returned no usable text."""


class UnknownPlatform(PromptForgeError):
    """No adapter is registered for a platform id. Indicates a catalog/registry mismatch."""

    def __init__(self, platform: str):
        super().__init__(f"Unknown platform: {platform}")
        self.platform = platform


class CredentialMissing(PromptForgeError):
    """No credential is configured for the text-generation service."""

    status_code = 503
