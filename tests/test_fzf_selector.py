import subprocess
from unittest.mock import patch

import pytest

from iam_actions.backends import FuzzySelectorProtocol, FzfSelector
from iam_actions.errors import DependencyMissing, IamActionsError


def _completed(returncode: int, stdout: str = "") -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(args=["fzf"], returncode=returncode, stdout=stdout)


def test_fzf_selector_satisfies_protocol() -> None:
    assert isinstance(FzfSelector(), FuzzySelectorProtocol)


def test_choose_feeds_options_and_returns_selection() -> None:
    selector = FzfSelector()

    with patch("iam_actions.backends.fzf.subprocess.run", return_value=_completed(0, "bucket\n")) as mock_run:
        chosen = selector.choose("Select resource type: ", ["[ All ]", "bucket", "object"])

    assert chosen == "bucket"
    assert mock_run.call_args.args[0] == ["fzf", "--prompt=Select resource type: "]
    assert mock_run.call_args.kwargs["input"] == "[ All ]\nbucket\nobject"


@pytest.mark.parametrize("returncode", [1, 130])
def test_cancelled_prompt_returns_none(returncode: int) -> None:
    with patch("iam_actions.backends.fzf.subprocess.run", return_value=_completed(returncode)):
        assert FzfSelector().choose("Select: ", ["a", "b"]) is None


def test_empty_options_do_not_launch_fzf() -> None:
    with patch("iam_actions.backends.fzf.subprocess.run") as mock_run:
        assert FzfSelector().choose("Select: ", []) is None
    mock_run.assert_not_called()


def test_unexpected_exit_status_raises() -> None:
    with patch("iam_actions.backends.fzf.subprocess.run", return_value=_completed(2)):
        with pytest.raises(IamActionsError, match="status 2"):
            FzfSelector().choose("Select: ", ["a"])


def test_ensure_available_reports_missing_binary() -> None:
    with patch("iam_actions.backends.fzf.shutil.which", return_value=None):
        with pytest.raises(DependencyMissing, match="'fzf' is not installed"):
            FzfSelector().ensure_available()


def test_missing_binary_at_launch_is_dependency_missing() -> None:
    with patch("iam_actions.backends.fzf.subprocess.run", side_effect=FileNotFoundError("fzf")):
        with pytest.raises(DependencyMissing):
            FzfSelector().choose("Select: ", ["a"])
