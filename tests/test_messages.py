"""
Tests for the Kin message lookup
"""
import json

import pytest

from kinapi.services.messages import PLACEHOLDER, KinMessage, get_kin_message, load_messages


def test_known_entry():
    message = get_kin_message(28)

    assert message.synchronic_message.startswith("我為了美而極化")
    assert message.alignment != PLACEHOLDER


def test_missing_entry_falls_back():
    message = get_kin_message(2)

    assert message.synchronic_message == PLACEHOLDER
    assert message.high_frequency == PLACEHOLDER
    assert message.low_frequency == PLACEHOLDER
    assert message.alignment == PLACEHOLDER


@pytest.mark.parametrize("kin", [0, 261, -1, None, "abc", 3.5])
def test_out_of_range_falls_back(kin):
    assert get_kin_message(kin) == KinMessage()


def test_custom_file(tmp_path):
    path = tmp_path / "messages.json"
    path.write_text(
        json.dumps({"5": {"synchronicMessage": "s", "highFrequency": "h", "lowFrequency": "l", "alignment": "a"}}),
        encoding="utf-8",
    )

    message = get_kin_message(5, str(path))
    assert message.synchronic_message == "s"
    assert message.high_frequency == "h"
    assert message.low_frequency == "l"
    assert message.alignment == "a"

    assert get_kin_message(6, str(path)).alignment == PLACEHOLDER


def test_partial_entry_fills_placeholders(tmp_path):
    path = tmp_path / "partial.json"
    path.write_text(json.dumps({"7": {"alignment": "only"}}), encoding="utf-8")

    message = get_kin_message(7, str(path))
    assert message.alignment == "only"
    assert message.synchronic_message == PLACEHOLDER


def test_bundled_keys_in_range():
    assert all(1 <= k <= 260 for k in load_messages())


@pytest.mark.parametrize("kin", ["28", " 28 "])
def test_numeric_string_read_as_number(kin):
    assert get_kin_message(kin) == get_kin_message(28)
    assert get_kin_message(kin).alignment != PLACEHOLDER


@pytest.mark.parametrize("kin", ["0", "261", "-1", "2.5"])
def test_numeric_string_out_of_range_falls_back(kin):
    assert get_kin_message(kin) == KinMessage()
