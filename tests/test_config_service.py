"""Tests for command-line configuration resolution."""

import logging
from datetime import timedelta

import pytest
from pydantic import ValidationError

from tlsbootstrap.models.config import KeyEncoding
from tlsbootstrap.models.errors import ErrorKind, GenerationError
from tlsbootstrap.services.config_service import ConfigResolver


@pytest.mark.unit
class TestConfigResolver:
    """Test resolving arguments into a configuration."""

    def test_defaults(self, output_dir, monkeypatch):
        """Test default values with the default output file names."""
        monkeypatch.chdir(output_dir)

        config = ConfigResolver.resolve([])

        assert config.key_size == 2048
        assert config.key_encoding == KeyEncoding.PKCS8
        assert config.self_sign_valid_days == 366
        assert config.self_sign_valid_duration == timedelta(hours=366 * 24)
        assert config.key_path == output_dir.resolve() / "cert-key.pem"
        assert config.req_path == output_dir.resolve() / "cert-req.pem"
        assert config.self_sign_path == output_dir.resolve() / "cert-selfsigned.pem"
        assert config.overwrite is False
        assert config.dns_names == []
        assert config.subject.is_empty()

    def test_paths_are_absolute(self, output_dir, monkeypatch):
        """Test that relative paths are resolved against the working directory."""
        monkeypatch.chdir(output_dir)

        config = ConfigResolver.resolve(["-key", "sub/../k.pem"])

        assert config.key_path.is_absolute()
        assert config.key_path == output_dir.resolve() / "k.pem"

    def test_common_name_defaults_to_first_dns_name(self, cli_args):
        """Test the common name fallback."""
        config = ConfigResolver.resolve(cli_args("-dnsName", "example.com", "-dnsName", "www.example.com"))

        assert config.subject.common_name == "example.com"
        assert config.dns_names == ["example.com", "www.example.com"]

    def test_explicit_common_name_is_kept(self, cli_args):
        """Test that an explicit common name wins over DNS names."""
        config = ConfigResolver.resolve(cli_args("-CN", "My Service", "-dnsName", "example.com"))

        assert config.subject.common_name == "My Service"

    def test_repeatable_dn_flags(self, cli_args):
        """Test that repeated flags append values in order."""
        config = ConfigResolver.resolve(
            cli_args(
                "-C", "DE",
                "-O", "ACME",
                "-O", "  ",
                "-OU", "Platform",
                "-OU", "Security",
                "-OU", "Platform",
                "-L", "Frankfurt",
                "-ST", "Hessen",
            )
        )

        assert config.subject.country == ["DE"]
        assert config.subject.organization == ["ACME"]
        assert config.subject.organizational_unit == ["Platform", "Security"]
        assert config.subject.locality == ["Frankfurt"]
        assert config.subject.province == ["Hessen"]

    def test_equals_syntax(self, cli_args):
        """Test -flag=value arguments."""
        config = ConfigResolver.resolve(cli_args("-keySize=4096", "-selfSignValidDays=30", "-pkcs1"))

        assert config.key_size == 4096
        assert config.self_sign_valid_duration == timedelta(days=30)
        assert config.key_encoding == KeyEncoding.PKCS1

    def test_empty_paths_disable_stages(self, cli_args):
        """Test that empty request and certificate paths disable those stages."""
        config = ConfigResolver.resolve(cli_args(req=None, self_sign=None))

        assert config.req_path is None
        assert config.self_sign_path is None

    def test_missing_key_path_fails(self, cli_args):
        """Test that the private key path is required."""
        with pytest.raises(GenerationError) as exc_info:
            ConfigResolver.resolve(cli_args(key=None))

        assert exc_info.value.kind == ErrorKind.MISSING_INPUT

    def test_existing_output_fails_without_overwrite(self, output_dir, cli_args):
        """Test that existing files are protected."""
        (output_dir / "req.pem").write_text("existing")

        with pytest.raises(GenerationError) as exc_info:
            ConfigResolver.resolve(cli_args())

        assert exc_info.value.kind == ErrorKind.OUTPUT_EXISTS
        assert exc_info.value.path == output_dir / "req.pem"
        assert "already exists" in str(exc_info.value)

    def test_existing_output_warns_with_overwrite(self, output_dir, cli_args, caplog):
        """Test that overwrite lets resolution succeed with a warning."""
        (output_dir / "key.pem").write_text("existing")

        with caplog.at_level(logging.WARNING, logger="tlsbootstrap"):
            config = ConfigResolver.resolve(cli_args("-overwrite", "-dnsName", "example.com"))

        assert config.overwrite is True
        assert config.key_path == output_dir / "key.pem"
        assert any("File existed" in r.message and r.levelno == logging.WARNING for r in caplog.records)
        # Resolution itself never writes
        assert (output_dir / "key.pem").read_text() == "existing"

    def test_uncheckable_path_fails(self, output_dir, cli_args):
        """Test that a path below a regular file cannot be checked."""
        (output_dir / "plain-file").write_text("x")

        with pytest.raises(GenerationError) as exc_info:
            ConfigResolver.resolve(cli_args(self_sign="plain-file/cert.pem"))

        assert exc_info.value.kind == ErrorKind.PATH_CHECK

    @pytest.mark.parametrize(
        "extra",
        [
            ["-keySize", "0"],
            ["-keySize", "-1"],
            ["-selfSignValidDays", "0"],
            ["-selfSignValidDays", "1000000000"],
            ["-selfSignValidDays", "5000000"],
            ["-C", "Germany"],
            ["-C", "d"],
            ["-CN", "x" * 65],
            ["-logLevel", "LOUD"],
        ],
    )
    def test_invalid_values_fail(self, cli_args, extra):
        """Test that invalid option values are reported as invalid input."""
        with pytest.raises(GenerationError) as exc_info:
            ConfigResolver.resolve(cli_args(*extra))

        assert exc_info.value.kind == ErrorKind.INVALID_INPUT

    def test_long_dns_name_as_common_name_fails(self, cli_args):
        """Test that a defaulted common name is held to the same length limit."""
        long_name = ".".join(["a" * 20] * 4)

        with pytest.raises(GenerationError) as exc_info:
            ConfigResolver.resolve(cli_args("-dnsName", long_name))

        assert exc_info.value.kind == ErrorKind.INVALID_INPUT

    def test_odd_dns_name_warns(self, cli_args, caplog):
        """Test that unusual DNS names are kept but reported."""
        with caplog.at_level(logging.WARNING, logger="tlsbootstrap"):
            config = ConfigResolver.resolve(cli_args("-dnsName", "not a hostname"))

        assert config.dns_names == ["not a hostname"]
        assert any("Invalid domain format" in r.message for r in caplog.records)

    def test_config_is_immutable(self, cli_args):
        """Test that the resolved configuration cannot be changed."""
        config = ConfigResolver.resolve(cli_args())

        with pytest.raises(ValidationError):
            config.key_size = 1024

    def test_parsers_are_independent(self):
        """Test that building a parser registers nothing globally."""
        first = ConfigResolver.build_parser()
        second = ConfigResolver.build_parser()

        assert first is not second
        assert first.parse_args(["-dnsName", "a.example"]).dnsName == ["a.example"]
        assert second.parse_args([]).dnsName == []

    def test_unknown_flag_is_usage_error(self, cli_args):
        """Test that argparse rejects unknown flags."""
        with pytest.raises(SystemExit) as exc_info:
            ConfigResolver.resolve(cli_args("-bogus"))

        assert exc_info.value.code == 2

    def test_double_dash_flags(self, output_dir):
        """Test that every flag is also accepted with two dashes."""
        config = ConfigResolver.resolve(
            [
                "--key",
                str(output_dir / "k.pem"),
                "--req",
                "",
                "--selfSign",
                str(output_dir / "c.pem"),
                "--dnsName=example.com",
                "--C",
                "DE",
                "--keySize",
                "3072",
                "--pkcs1",
            ]
        )

        assert config.key_path == output_dir / "k.pem"
        assert config.req_path is None
        assert config.self_sign_path == output_dir / "c.pem"
        assert config.subject.common_name == "example.com"
        assert config.subject.country == ["DE"]
        assert config.key_size == 3072
        assert config.key_encoding == KeyEncoding.PKCS1

    def test_lowercase_country_is_uppercased(self, cli_args):
        """Test that country codes are accepted in either case."""
        config = ConfigResolver.resolve(cli_args("-C", "de", "-C", "DE", "-C", "us"))

        assert config.subject.country == ["DE", "US"]
