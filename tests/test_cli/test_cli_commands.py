# Command line tests
import json

import pytest
from click.testing import CliRunner

from shippo_adapter.cli.main import cli
from shippo_adapter.core.config import Settings
from shippo_adapter.core.exceptions import ShippoAPIError
from shippo_adapter.services.shippo.client import ShippoClient


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def cli_settings(mocker, tmp_path):
    settings = Settings(
        _env_file=None,
        SHIPPO_API_TOKEN="shippo_test_token",
        SHIPPO_WEBHOOK_URL="https://example.com/webhooks/shippo",
        SHIPPO_STATIC_DATA_FILE=str(tmp_path / "static.json"),
        SHIPPO_LICENSE_NOTICE=False,
    )
    mocker.patch("shippo_adapter.cli.webhook.get_settings", return_value=settings)
    return settings


def test_run_single_item(runner, mocker):
    mock_make_request = mocker.patch.object(ShippoClient, "_make_request", return_value={"object_id": "adr_1"})

    result = runner.invoke(cli, ["run", "address", "get", "--params", '{"addressId": "adr_1"}'])

    assert result.exit_code == 0
    assert '"object_id": "adr_1"' in result.output
    mock_make_request.assert_called_once_with("GET", "/addresses/adr_1", params=None)


def test_run_items_file_continue_on_fail(runner, mocker, tmp_path):
    mocker.patch.object(ShippoClient, "_make_request", side_effect=[
        {"object_id": "adr_1"},
        ShippoAPIError("Request failed with status code 404"),
    ])
    items = tmp_path / "items.json"
    items.write_text(json.dumps([{"addressId": "adr_1"}, {"addressId": "adr_x"}]))

    result = runner.invoke(cli, ["run", "address", "get", "--items", str(items), "--continue-on-fail"])

    assert result.exit_code == 0
    assert '"error": "Request failed with status code 404"' in result.output
    assert '"item": 1' in result.output


def test_run_empty_items_file(runner, mock_make_request, tmp_path):
    items = tmp_path / "items.json"
    items.write_text("[]")

    result = runner.invoke(
        cli, ["run", "address", "get", "--params", '{"addressId": "adr_1"}', "--items", str(items)]
    )

    assert result.exit_code == 0
    assert "[]" in result.output
    mock_make_request.assert_not_called()


def test_run_invalid_limit_is_reported(runner, mock_make_request):
    result = runner.invoke(cli, ["run", "parcel", "getAll", "--params", '{"limit": 0}'])

    assert result.exit_code == 1
    assert "Error: Invalid limit: 0" in result.output
    mock_make_request.assert_not_called()


def test_run_failure_exits_non_zero(runner, mocker):
    mocker.patch.object(ShippoClient, "_make_request", side_effect=ShippoAPIError("Network error: refused"))

    result = runner.invoke(cli, ["run", "address", "get", "--params", '{"addressId": "adr_1"}'])

    assert result.exit_code == 1
    assert "Network error: refused" in result.output


def test_run_unknown_resource(runner, mock_make_request):
    result = runner.invoke(cli, ["run", "pallet", "get"])

    assert result.exit_code == 1
    assert "Unknown resource: pallet" in result.output
    mock_make_request.assert_not_called()


def test_run_invalid_params_json(runner, mock_make_request):
    result = runner.invoke(cli, ["run", "address", "get", "--params", "{nope"])

    assert result.exit_code == 2
    mock_make_request.assert_not_called()


def test_webhook_create_and_delete(runner, mocker, cli_settings):
    mock_make_request = mocker.patch.object(ShippoClient, "_make_request", return_value={"object_id": "wh_1"})

    created = runner.invoke(cli, ["webhook", "create"])
    assert created.exit_code == 0
    assert "Webhook created: wh_1" in created.output

    deleted = runner.invoke(cli, ["webhook", "delete"])
    assert deleted.exit_code == 0
    assert "Webhook deleted: wh_1" in deleted.output
    assert mock_make_request.call_args_list[-1].args == ("DELETE", "/webhooks/wh_1")


def test_webhook_check_without_match(runner, mocker, cli_settings):
    mocker.patch.object(ShippoClient, "_make_request", return_value={"results": []})

    result = runner.invoke(cli, ["webhook", "check"])

    assert result.exit_code == 1
    assert "No matching webhook found" in result.output


def test_test_credentials_command(runner, mocker):
    mocker.patch.object(ShippoClient, "_make_request", return_value={"results": []})

    result = runner.invoke(cli, ["test-credentials"])

    assert result.exit_code == 0
    assert "Connection successful" in result.output
