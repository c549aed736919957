"""Tests for the onelink CLI."""

import json
import tempfile
from pathlib import Path

import pytest
import yaml
from click.testing import CliRunner

from onelink.cli.main import cli
from onelink.codec import ProfileCodec
from onelink.profiles.base import Profile, ProfileLink
from onelink.profiles.loader import ProfileLoader, load_profile


ALICE = Profile(
    name="Alice",
    bio="",
    links=[ProfileLink(title="GitHub", url="https://github.com/alice")],
)


@pytest.fixture
def runner():
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_dir():
    """Create temporary directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def profile_file(temp_dir):
    path = temp_dir / "alice.yaml"
    ProfileLoader().save_file(ALICE, path)
    return path


class TestEncode:
    """Tests for the encode command."""

    def test_encode_prints_token(self, runner, profile_file):
        result = runner.invoke(cli, ["encode", str(profile_file)])

        assert result.exit_code == 0
        assert ProfileCodec().decode(result.output.strip()) == ALICE

    def test_encode_with_transform(self, runner, profile_file):
        from onelink.transforms import Base64Transform

        result = runner.invoke(cli, ["encode", str(profile_file), "-t", "base64"])

        assert result.exit_code == 0
        codec = ProfileCodec(transform=Base64Transform())
        assert codec.decode(result.output.strip()) == ALICE

    def test_encode_share_url(self, runner, profile_file):
        result = runner.invoke(cli, [
            "encode", str(profile_file),
            "--base-url", "https://example.com/profile",
            "--param", "d",
        ])

        assert result.exit_code == 0
        assert result.output.startswith("https://example.com/profile?d=")

    def test_encode_unknown_transform(self, runner, profile_file):
        result = runner.invoke(cli, ["encode", str(profile_file), "-t", "lzma"])

        assert result.exit_code == 1
        assert "Unknown transform" in result.output

    def test_encode_invalid_profile(self, runner, temp_dir):
        path = temp_dir / "bad.yaml"
        path.write_text("name: 42\n")

        result = runner.invoke(cli, ["encode", str(path)])
        assert result.exit_code == 1

    def test_encode_directory(self, runner, temp_dir):
        result = runner.invoke(cli, ["encode", str(temp_dir)])

        assert result.exit_code == 2
        assert not isinstance(result.exception, IsADirectoryError)

    def test_encode_missing_file(self, runner):
        result = runner.invoke(cli, ["encode", "/nonexistent/profile.yaml"])
        assert result.exit_code != 0


class TestDecode:
    """Tests for the decode command."""

    def test_decode_json(self, runner):
        token = ProfileCodec().encode(ALICE)

        result = runner.invoke(cli, ["decode", token])

        assert result.exit_code == 0
        assert json.loads(result.output) == ALICE.to_data()

    def test_decode_yaml(self, runner):
        token = ProfileCodec().encode(ALICE)

        result = runner.invoke(cli, ["decode", token, "-f", "yaml"])

        assert result.exit_code == 0
        assert yaml.safe_load(result.output) == ALICE.to_data()

    def test_decode_table(self, runner):
        token = ProfileCodec().encode(ALICE)

        result = runner.invoke(cli, ["decode", token, "-f", "table"])

        assert result.exit_code == 0
        assert "Alice" in result.output
        assert "GitHub" in result.output

    def test_decode_table_empty_profile(self, runner):
        token = ProfileCodec().encode(Profile())

        result = runner.invoke(cli, ["decode", token, "-f", "table"])

        assert result.exit_code == 0
        assert "Profile is empty" in result.output

    def test_decode_share_url(self, runner):
        token = ProfileCodec().encode(ALICE)

        result = runner.invoke(cli, ["decode", f"https://example.com/profile#{token}"])

        assert result.exit_code == 0
        assert json.loads(result.output)["name"] == "Alice"

    def test_decode_to_file(self, runner, temp_dir):
        token = ProfileCodec().encode(ALICE)
        output = temp_dir / "decoded.yaml"

        result = runner.invoke(cli, ["decode", token, "-o", str(output)])

        assert result.exit_code == 0
        assert load_profile(output) == ALICE

    def test_decode_invalid_token(self, runner):
        result = runner.invoke(cli, ["decode", "not-a-valid-token!!"])

        assert result.exit_code == 1
        assert "invalid or corrupted" in result.output


class TestInitProfile:
    """Tests for the init-profile command."""

    def test_init_profile(self, runner, temp_dir):
        output = temp_dir / "bob.yaml"

        result = runner.invoke(cli, [
            "init-profile",
            "--name", "Bob",
            "--output", str(output),
            "--link", "GitHub", "https://github.com/bob",
            "--link", "Blog", "https://bob.dev",
        ])

        assert result.exit_code == 0
        profile = load_profile(output)
        assert profile.name == "Bob"
        assert [link.title for link in profile.links] == ["GitHub", "Blog"]

    def test_init_profile_defaults(self, runner, temp_dir):
        output = temp_dir / "carol.yaml"

        result = runner.invoke(cli, ["init-profile", "-n", "Carol", "-o", str(output)])

        assert result.exit_code == 0
        profile = load_profile(output)
        assert profile.bio == "Hi, I'm Carol"
        assert len(profile.links) == 1


class TestListTransforms:
    """Tests for the list-transforms command."""

    def test_list_transforms(self, runner):
        result = runner.invoke(cli, ["list-transforms"])

        assert result.exit_code == 0
        assert "zlib" in result.output
        assert "base64" in result.output


def test_version(runner):
    result = runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert "onelink" in result.output
