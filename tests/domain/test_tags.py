from __future__ import annotations

from lib_log_relay.domain.tags import LogTag, TagPort
from tests.os_markers import OS_AGNOSTIC

pytestmark = [OS_AGNOSTIC]


def test_tag_hash_is_stable_for_equal_tags() -> None:
    assert LogTag("session-1", "backends").hash == LogTag("session-1", "backends").hash


def test_tag_hash_differs_between_interfaces() -> None:
    assert LogTag("session-1", "backends").hash != LogTag("session-1", "sessions").hash


def test_tag_hash_fits_in_signed_64_bits() -> None:
    assert 0 <= LogTag("a", "b").hash < 2**63


def test_tag_renders_with_and_without_brackets() -> None:
    tag = LogTag("session-1", "backends")

    assert tag.render(False) == str(tag.hash)
    assert tag.render(True) == f"{{tag:{tag.hash}}}"
    assert str(tag) == tag.render(True)


def test_log_tag_satisfies_tag_port() -> None:
    assert isinstance(LogTag("s", "i"), TagPort)
