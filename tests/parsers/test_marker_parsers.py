# SPDX-License-Identifier: MIT
"""Tests for presence-only findings and the parser registry."""

import pytest

from secretmap.core.models import SOURCE_TYPES
from secretmap.parsers import PARSERS, parse_content
from secretmap.parsers.markers import encrypted_file_marker, ssh_key_marker


def test_ssh_key_marker(make_ctx):
    ctx = make_ctx(path="/home/u/.ssh/id_ed25519", source="ssh-directory")
    (entry,) = ssh_key_marker("", ctx)
    assert entry.name == "id_ed25519"
    assert entry.type == "ssh-key"
    assert entry.risk == 5
    assert entry.risk_reason == "SSH private key on disk"
    assert entry.masked_value is None


def test_encrypted_file_marker(make_ctx):
    ctx = make_ctx(path="/project/secrets.enc.json", source="encrypted-file")
    (entry,) = encrypted_file_marker('{"data": "ENC[AES256...]"}', ctx)
    assert entry.name == "secrets.enc.json"
    assert entry.type == "unknown"
    assert entry.risk == 3
    assert entry.risk_reason.startswith("Encrypted credential file")


class TestRegistry:
    def test_registered_sources_are_known(self):
        for source in PARSERS:
            assert source in SOURCE_TYPES

    @pytest.mark.parametrize("source", ["keychain-ref", "made-up"])
    def test_unregistered_source_yields_nothing(self, make_ctx, source):
        assert parse_content("API_KEY=abcdefghijkl", make_ctx(source=source)) == []

    def test_dispatch_by_source(self, make_ctx):
        ctx = make_ctx(path="/home/u/.ssh/id_rsa", source="ssh-directory")
        (entry,) = parse_content("", ctx)
        assert entry.source == "ssh-directory"
