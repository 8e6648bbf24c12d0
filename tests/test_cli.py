import logging

import pytest
from click.testing import CliRunner

from chash.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def reset_chash_logging():
    """Drop handlers bound to the runner's streams after each command."""
    yield
    logger = logging.getLogger("chash")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


def test_encode_default_length(runner, hello_chash160):
    result = runner.invoke(cli, ["encode", "Hello World"])
    assert result.exit_code == 0
    assert result.output.strip() == hello_chash160


def test_encode_288(runner):
    result = runner.invoke(cli, ["encode", "Hello World", "--length", "288"])
    assert result.exit_code == 0
    assert len(result.output.strip()) == 48


def test_encode_rejects_unknown_length(runner):
    result = runner.invoke(cli, ["encode", "Hello World", "--length", "256"])
    assert result.exit_code != 0


def test_validate_valid(runner, hello_chash160):
    result = runner.invoke(cli, ["validate", hello_chash160])
    assert result.exit_code == 0
    assert result.output.strip() == "valid"


def test_validate_checksum_mismatch(runner, hello_chash160):
    tampered = hello_chash160[:-1] + "A"
    result = runner.invoke(cli, ["validate", tampered])
    assert result.exit_code == 1
    assert "invalid (checksum_mismatch)" in result.output


def test_validate_malformed(runner):
    result = runner.invoke(cli, ["validate", "not-base32!!" + "A" * 20])
    assert result.exit_code == 1
    assert "invalid (malformed)" in result.output


def test_validate_wrong_length(runner):
    result = runner.invoke(cli, ["validate", "ABC"])
    assert result.exit_code == 1
    assert "wrong encoded length: 3" in result.output


def test_offsets_table(runner):
    result = runner.invoke(cli, ["offsets", "--length", "288"])
    assert result.exit_code == 0
    assert "282" in result.output
    assert "Checksum offsets (288 bits)" in result.output


def test_log_level_option(runner, hello_chash160):
    result = runner.invoke(cli, ["--log-level", "DEBUG", "validate", hello_chash160])
    assert result.exit_code == 0
