from pathlib import Path
from unittest.mock import patch

import pytest
import typer

from cleanurls.cli.errorhandler import handle_cli_errors
from cleanurls.config.exceptions import ConfigParseError, ConfigValidationError
from cleanurls.site.exceptions import InvalidPostFilenameError


def _printed(mock_print) -> list[str]:
    return [str(arg) for call in mock_print.call_args_list for arg in call[0]]


def test_handle_cli_errors_validation_error_lists_fields():
    """Verify each validation error is printed with its location."""
    errors = [{"loc": ("paginate",), "msg": "Input should be greater than or equal to 1"}]
    with patch("cleanurls.cli.errorhandler.console.print") as mock_print:
        with pytest.raises(typer.Exit) as excinfo:
            with handle_cli_errors(debug=False):
                raise ConfigValidationError(Path("_config.toml"), errors)

        assert excinfo.value.exit_code == 1
        args = _printed(mock_print)
        assert any("Invalid Configuration" in arg for arg in args)
        assert any("paginate: Input should be greater" in arg for arg in args)


def test_handle_cli_errors_parse_error():
    """Verify other configuration errors are handled."""
    with patch("cleanurls.cli.errorhandler.console.print") as mock_print:
        with pytest.raises(typer.Exit) as excinfo:
            with handle_cli_errors(debug=False):
                raise ConfigParseError(Path("_config.toml"), "bad value")

        assert excinfo.value.exit_code == 1
        assert any("Configuration Error" in arg for arg in _printed(mock_print))


def test_handle_cli_errors_source_error():
    """Verify site errors are reported as source errors."""
    with patch("cleanurls.cli.errorhandler.console.print") as mock_print:
        with pytest.raises(typer.Exit) as excinfo:
            with handle_cli_errors(debug=False):
                raise InvalidPostFilenameError("my-post.md")

        assert excinfo.value.exit_code == 1
        args = _printed(mock_print)
        assert any("Source Error" in arg and "my-post.md" in arg for arg in args)


def test_handle_cli_errors_debug_mode_re_raises():
    """Verify debug mode re-raises known exceptions."""
    with pytest.raises(InvalidPostFilenameError):
        with handle_cli_errors(debug=True):
            raise InvalidPostFilenameError("my-post.md")


def test_handle_cli_errors_unexpected_exception():
    """Verify generic exception handling."""
    with patch("cleanurls.cli.errorhandler.console.print") as mock_print:
        with pytest.raises(typer.Exit) as excinfo:
            with handle_cli_errors(debug=False):
                msg = "Oops"
                raise ValueError(msg)

        assert excinfo.value.exit_code == 1
        assert any("An unexpected error occurred" in arg for arg in _printed(mock_print))


def test_handle_cli_errors_unexpected_exception_debug():
    """Verify debug mode prints the traceback and exits."""
    with patch("cleanurls.cli.errorhandler.console.print_exception") as mock_print_exc:
        with pytest.raises(typer.Exit):
            with handle_cli_errors(debug=True):
                msg = "Oops"
                raise ValueError(msg)

        assert mock_print_exc.called


def test_handle_cli_errors_passes_exit_through():
    with pytest.raises(typer.Exit) as excinfo:
        with handle_cli_errors():
            raise typer.Exit(3)

    assert excinfo.value.exit_code == 3
