class IamActionsError(RuntimeError):
    """Base class for failures that abort a discovery session."""

    exit_code = 1


class DependencyMissing(IamActionsError):
    """Raised when an external collaborator (e.g. fzf) is not installed."""


class FetchFailure(IamActionsError):
    """Raised when a remote document cannot be retrieved or parsed."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"failed to fetch {url}: {reason}")
        self.url = url
        self.reason = reason


class ServiceNotFound(IamActionsError):
    def __init__(self, service_name: str) -> None:
        super().__init__(f"Service '{service_name}' not found.")
        self.service_name = service_name


class NoSelectionMade(IamActionsError):
    def __init__(self, subject: str) -> None:
        super().__init__(f"No {subject} selected. Exiting.")
        self.subject = subject


class MissingResourceTypes(IamActionsError):
    def __init__(self, service_name: str) -> None:
        super().__init__(f"Service '{service_name}' has no resource types.")
        self.service_name = service_name
