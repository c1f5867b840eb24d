from __future__ import annotations

import pytest

from posbitimage import BitImage
from posbitimage.protocol import (
    BitImagePrintMode,
    CodePage,
    Justification,
    cut_cmd,
    define_bit_image_cmd,
    define_nv_bit_image_cmd,
    font_scale_cmd,
    inverted_mode_cmd,
    justification_cmd,
    print_bit_image_cmd,
    print_nv_bit_image_cmd,
    text_cmd,
    upside_down_mode_cmd,
)


def test_define_bit_image():
    image = BitImage(2, 1, bytes(range(16)))
    assert define_bit_image_cmd(image) == bytes([0x1D, 0x2A, 2, 1]) + bytes(range(16))


@pytest.mark.parametrize(
    "mode, value",
    [
        (BitImagePrintMode.NORMAL, 0),
        (BitImagePrintMode.DOUBLE_WIDTH, 1),
        (BitImagePrintMode.DOUBLE_HEIGHT, 2),
        (BitImagePrintMode.QUADRUPLE, 3),
    ],
)
def test_print_bit_image(mode, value):
    assert print_bit_image_cmd(mode) == bytes([0x1D, 0x2F, value])


def test_define_nv_bit_image_uses_two_byte_sizes():
    image = BitImage(255, 6)
    data = define_nv_bit_image_cmd(7, image)
    assert data[:7] == bytes([0x1C, 0x71, 7, 255, 0, 6, 0])
    assert data[7:] == image.image_data


@pytest.mark.parametrize("slot", [0, 256])
def test_nv_slot_range(slot):
    with pytest.raises(ValueError):
        define_nv_bit_image_cmd(slot, BitImage(1, 1))
    with pytest.raises(ValueError):
        print_nv_bit_image_cmd(slot)


def test_print_nv_bit_image():
    assert print_nv_bit_image_cmd(3, BitImagePrintMode.DOUBLE_HEIGHT) == bytes([0x1C, 0x70, 3, 2])


def test_justification():
    assert justification_cmd(Justification.LEFT) == bytes([0x1B, 0x61, 0])
    assert justification_cmd(Justification.CENTER) == bytes([0x1B, 0x61, 1])
    assert justification_cmd(Justification.RIGHT) == bytes([0x1B, 0x61, 2])


def test_cut():
    assert cut_cmd() == bytes([0x1D, 0x56, 0x42, 0xFF])
    assert cut_cmd(0) == bytes([0x1D, 0x56, 0x42, 0x00])
    with pytest.raises(ValueError):
        cut_cmd(256)


def test_font_scale():
    assert font_scale_cmd(1, 1) == bytes([0x1D, 0x21, 0x00])
    assert font_scale_cmd(2, 3) == bytes([0x1D, 0x21, 0x21])
    assert font_scale_cmd(8, 8) == bytes([0x1D, 0x21, 0x77])
    with pytest.raises(ValueError):
        font_scale_cmd(0, 1)
    with pytest.raises(ValueError):
        font_scale_cmd(1, 9)


def test_mode_toggles():
    assert inverted_mode_cmd(True) == bytes([0x1D, 0x42, 1])
    assert inverted_mode_cmd(False) == bytes([0x1D, 0x42, 0])
    assert upside_down_mode_cmd(True) == bytes([0x1B, 0x7B, 1])
    assert upside_down_mode_cmd(False) == bytes([0x1B, 0x7B, 0])


def test_text_default_code_page():
    assert text_cmd("Grüße\n") == bytes([0x1B, 0x74, 16]) + "Grüße\n".encode("cp1252") + bytes([0x1B, 0x64, 0])


def test_text_other_code_page():
    data = text_cmd("Привет", CodePage.CP866)
    assert data[:3] == bytes([0x1B, 0x74, 17])
    assert data[3:-3] == "Привет".encode("cp866")


def test_text_replaces_unencodable_characters():
    assert text_cmd("a€b", CodePage.CP437)[3:-3] == b"a?b"


def test_code_page_tables():
    assert {page.name: page.value for page in CodePage} == {
        "CP437": 0,
        "CP850": 2,
        "CP860": 3,
        "CP863": 4,
        "CP865": 5,
        "CP1252": 16,
        "CP866": 17,
        "CP852": 18,
        "CP858": 19,
    }
    for page in CodePage:
        "x".encode(page.codec)
