import pytest

from qr_forge.exceptions import CapacityExceeded, PayloadError
from qr_forge.generator import (
    add_border,
    build_text_payload,
    build_vcard_payload,
    build_wifi_payload,
    is_valid_email,
    matrix_from_text,
)
from qr_reader import read_text


def test_text_payload_is_stripped():
    assert build_text_payload("  https://example.com \n") == "https://example.com"


@pytest.mark.parametrize("text", ["", "   "])
def test_text_payload_requires_content(text):
    with pytest.raises(PayloadError):
        build_text_payload(text)


def test_text_payload_length_limit():
    assert build_text_payload("a" * 1000) == "a" * 1000
    with pytest.raises(PayloadError):
        build_text_payload("a" * 1001)
    with pytest.raises(PayloadError):
        build_text_payload("abcdef", max_length=5)


def test_vcard_with_all_fields():
    payload = build_vcard_payload(" Ada Lovelace ", "+44 20 7946 0000", "ada@example.org", "12 St James's Square")
    assert payload == (
        "BEGIN:VCARD\nVERSION:4.0\nFN:Ada Lovelace\nTEL:+44 20 7946 0000\n"
        "EMAIL:ada@example.org\nADR:12 St James's Square\nEND:VCARD"
    )


def test_vcard_skips_empty_fields():
    assert build_vcard_payload(phone="555-0100") == "BEGIN:VCARD\nVERSION:4.0\nFN:\nTEL:555-0100\nEND:VCARD"


def test_vcard_validation():
    with pytest.raises(PayloadError):
        build_vcard_payload("", " ", "", "")
    with pytest.raises(PayloadError):
        build_vcard_payload("n" * 101)
    with pytest.raises(PayloadError):
        build_vcard_payload("Ada", phone="1" * 21)
    with pytest.raises(PayloadError):
        build_vcard_payload("Ada", email="not-an-email")


def test_email_rule():
    assert is_valid_email("")
    assert is_valid_email("a@b.co")
    assert not is_valid_email("a@b")
    assert not is_valid_email("a b@c.de")


def test_wifi_payload_defaults():
    assert build_wifi_payload("HomeNet", "hunter22") == "WIFI:S:HomeNet;T:WPA;P:hunter22;H:false;;"
    assert build_wifi_payload("Cafe") == "WIFI:S:Cafe;T:nopass;P:;H:false;;"
    assert build_wifi_payload("Hidden", "pw", hidden=True).endswith("H:true;;")


def test_wifi_payload_explicit_auth_and_escaping():
    payload = build_wifi_payload('my;net', 'p:a,s\\s', auth="wpa2")
    assert payload == r"WIFI:S:my\;net;T:WPA2;P:p\:a\,s\\s;H:false;;"
    assert build_wifi_payload("Open", "ignored", auth="nopass") == "WIFI:S:Open;T:nopass;P:;H:false;;"


def test_wifi_payload_validation():
    with pytest.raises(PayloadError):
        build_wifi_payload("")
    with pytest.raises(PayloadError):
        build_wifi_payload("s" * 33)
    with pytest.raises(PayloadError):
        build_wifi_payload("net", "p" * 65)
    with pytest.raises(PayloadError):
        build_wifi_payload("net", "pw", auth="WPA3")


def test_matrix_from_text_adds_quiet_zone():
    matrix = matrix_from_text("HELLO", "H", border=4)
    assert len(matrix) == 21 + 8
    assert not any(matrix[0])
    assert matrix[4][4]
    inner = [row[4:-4] for row in matrix[4:-4]]
    assert read_text(inner) == "HELLO"


def test_matrix_from_text_capacity():
    with pytest.raises(CapacityExceeded):
        matrix_from_text("A" * 1300, "H")


def test_add_border_copies():
    matrix = [[True]]
    assert add_border(matrix, 0) == [[True]]
    assert add_border(matrix, 0) is not matrix
    assert add_border(matrix, 1) == [[False] * 3, [False, True, False], [False] * 3]
