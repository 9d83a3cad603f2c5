import os

from dotenv import load_dotenv

DEFAULT_SERVICE_LIST_URL = "https://servicereference.us-east-1.amazonaws.com/v1/service-list.json"
DEFAULT_HTTP_TIMEOUT = 30


class AppConfig:
    def __init__(self) -> None:
        load_dotenv()
        self.service_list_url = os.getenv("IAM_ACTIONS_SERVICE_LIST_URL", DEFAULT_SERVICE_LIST_URL)
        self.http_timeout = self._get_positive_int_env("IAM_ACTIONS_HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT)
        self.fzf_command = os.getenv("IAM_ACTIONS_FZF_COMMAND", "fzf")
        self.log_level = os.getenv("IAM_ACTIONS_LOG_LEVEL", "WARNING").upper()

    @staticmethod
    def _get_positive_int_env(key: str, default: int) -> int:
        """Read an integer environment variable, raising a descriptive error when malformed."""
        raw = os.getenv(key)
        if raw is None or not raw.strip():
            return default
        try:
            value = int(raw)
        except ValueError as exc:
            raise ValueError(f"Environment variable {key} must be an integer, got {raw!r}") from exc
        if value <= 0:
            raise ValueError(f"Environment variable {key} must be positive, got {value}")
        return value
