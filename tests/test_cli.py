import json
from unittest.mock import patch

import pytest

from selfie_relay.api import cli
from selfie_relay.core.errors import ConfigurationError, UpstreamError
from selfie_relay.core.selfie_types import AspectRatio, DispatchResult, Mode


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("SELFIE_REQUEST_TIMEOUT", raising=False)
    monkeypatch.delenv("OPENCLAW_CLI", raising=False)
    monkeypatch.setattr(cli, "configure_logging", lambda verbose=False: None)


def _result(prompt="the prompt"):
    return DispatchResult(success=True, channel="#art", image_url="https://img/1.png", prompt=prompt)


def test_missing_arguments_print_usage_and_exit_nonzero(capsys):
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["only-context"])

    assert exc_info.value.code != 0
    assert "usage:" in capsys.readouterr().err


def test_invalid_aspect_ratio_exits_nonzero():
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["a context", "#art", "caption", "5:4"])

    assert exc_info.value.code != 0


@patch("selfie_relay.api.cli.generate_and_send")
def test_success_prints_summary(mock_generate, capsys):
    mock_generate.return_value = _result()

    code = cli.main(["a cozy cafe", "#art", "Check this out!", "16:9", "--transport", "gateway"])

    assert code == 0
    out = capsys.readouterr().out
    assert "--- Result ---" in out
    summary = json.loads(out.split("--- Result ---", 1)[1])
    assert summary == {
        "success": True,
        "imageUrl": "https://img/1.png",
        "channel": "#art",
        "prompt": "the prompt",
    }

    request, config = mock_generate.call_args.args
    assert request.context == "a cozy cafe"
    assert request.caption == "Check this out!"
    assert request.aspect_ratio is AspectRatio.WIDE
    assert request.explicit_mode == "auto"
    assert mock_generate.call_args.kwargs["transport_kind"] == "gateway"


@patch("selfie_relay.api.cli.generate_and_send")
def test_defaults_and_mode_option(mock_generate):
    mock_generate.return_value = _result()

    cli.main(["wearing a suit", "#art", "--mode", "direct", "--transport", "cli", "--timeout", "3"])

    request, config = mock_generate.call_args.args
    assert request.caption == "Generated with MiniMax image-01"
    assert request.aspect_ratio is AspectRatio.SQUARE
    assert request.explicit_mode is Mode.DIRECT
    assert config.timeout == 3.0
    assert mock_generate.call_args.kwargs["transport_kind"] == "cli"


@pytest.mark.parametrize(
    "error",
    [
        ConfigurationError("MINIMAX_API_KEY environment variable not set"),
        UpstreamError("Image generation failed: quota exceeded"),
    ],
)
@patch("selfie_relay.api.cli.generate_and_send")
def test_flow_failure_prints_error_and_returns_one(mock_generate, error, capsys):
    mock_generate.side_effect = error

    code = cli.main(["a context", "#art"])

    assert code == 1
    captured = capsys.readouterr()
    assert f"[ERROR] {error}" in captured.err
    assert "--- Result ---" not in captured.out


def test_blank_context_returns_one(capsys):
    assert cli.main(["   ", "#art"]) == 1
    assert "[ERROR]" in capsys.readouterr().err


@patch("selfie_relay.api.cli.shutil.which")
def test_auto_transport_prefers_cli_when_installed(mock_which):
    mock_which.return_value = "/usr/local/bin/openclaw"
    assert cli.resolve_transport_kind("auto", "openclaw") == "cli"


@patch("selfie_relay.api.cli.shutil.which")
def test_auto_transport_falls_back_to_gateway(mock_which):
    mock_which.return_value = None
    assert cli.resolve_transport_kind("auto", "openclaw") == "gateway"


def test_explicit_transport_is_kept():
    assert cli.resolve_transport_kind("gateway", "openclaw") == "gateway"


@pytest.mark.parametrize("timeout", ["0", "-1"])
@patch("selfie_relay.api.cli.generate_and_send")
def test_non_positive_timeout_prints_error(mock_generate, timeout, capsys):
    code = cli.main(["a cafe", "#art", "--transport", "gateway", "--timeout", timeout])

    assert code == 1
    assert "[ERROR] timeout must be positive" in capsys.readouterr().err
    mock_generate.assert_not_called()
