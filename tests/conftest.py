"""Pytest configuration and shared fixtures."""

import logging
import shutil
import tempfile
from datetime import datetime
from pathlib import Path

import pytest

from tlsbootstrap.models.subject import Subject
from tlsbootstrap.services.key_service import KeyService


@pytest.fixture(scope="session")
def test_data_dir():
    """Create a temporary directory for test data."""
    temp_dir = tempfile.mkdtemp(prefix="tlsbootstrap_test_")
    yield Path(temp_dir)
    # Cleanup
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def output_dir(test_data_dir):
    """Create a fresh output directory for each test."""
    out_dir = test_data_dir / f"out_{datetime.now().timestamp()}"
    out_dir.mkdir(parents=True, exist_ok=True)
    yield out_dir
    # Cleanup after test
    if out_dir.exists():
        shutil.rmtree(out_dir, ignore_errors=True)


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop handlers installed by setup_logger so each test configures logging afresh."""
    yield
    logger = logging.getLogger("tlsbootstrap")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture(scope="session")
def private_key():
    """Generate one RSA 2048 key shared by the tests that only need a signer."""
    return KeyService.generate_private_key(2048)


@pytest.fixture
def sample_subject():
    """Create a sample certificate subject."""
    return Subject(
        country=["US"],
        organization=["Test Organization"],
        organizational_unit=["Test Unit"],
        locality=["San Francisco"],
        province=["California"],
        common_name="test.example.com",
    )


@pytest.fixture
def sample_dns_names():
    """DNS names for the sample subject."""
    return ["test.example.com", "*.test.example.com", "localhost"]


@pytest.fixture
def cli_args(output_dir):
    """Build CLI arguments with all outputs placed in the test directory."""

    def _build(*extra, key="key.pem", req="req.pem", self_sign="cert.pem"):
        args = [
            "-key",
            str(output_dir / key) if key else "",
            "-req",
            str(output_dir / req) if req else "",
            "-selfSign",
            str(output_dir / self_sign) if self_sign else "",
        ]
        args.extend(extra)
        return args

    return _build
