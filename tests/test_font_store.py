import pytest

from glasscockpit.font_store import FontFileStore, FontFormatError, Glyph


def make_store(kerning=None):
    glyphs = [
        Glyph(character=65, x_offset=1, y_offset=-1, width=2, height=2, advance=7.0),
        Glyph(character=66, x_offset=0, y_offset=0, width=1, height=2, advance=6.5),
        Glyph(character=67, x_offset=2, y_offset=3, width=2, height=1, advance=5.25),
    ]
    return FontFileStore(
        face_size=24.0,
        first_glyph=65,
        rows=2,
        columns=2,
        glyph_width=2,
        glyph_height=2,
        tex_width=4,
        tex_height=4,
        glyphs=glyphs,
        kerning=kerning if kerning is not None else [0.0] * 9,
        bitmap=bytes(range(16)),
    )


def test_round_trip(tmp_path):
    store = make_store(kerning=[0.0, 0.5, -1.0, 0.25, 0.0, 0.0, 0.0, 0.0, 2.0])
    path = tmp_path / "font.glfont"
    store.write(path)
    assert FontFileStore.read(path) == store


def test_file_starts_with_header(tmp_path):
    path = tmp_path / "font.glfont"
    make_store().write(path)
    assert path.read_bytes()[:4] == b"FONT"


def test_missing_kerning_written_as_zeros(tmp_path):
    store = make_store()
    store.kerning = None
    path = tmp_path / "font.glfont"
    store.write(path)
    loaded = FontFileStore.read(path)
    assert loaded.kerning == [0.0] * 9


def test_bad_header_rejected(tmp_path):
    path = tmp_path / "font.glfont"
    make_store().write(path)
    data = bytearray(path.read_bytes())
    data[0:4] = b"NOPE"
    path.write_bytes(bytes(data))
    with pytest.raises(FontFormatError):
        FontFileStore.read(path)


def test_sanity_check_rejects_single_row(tmp_path):
    store = make_store()
    store.rows = 1
    path = tmp_path / "font.glfont"
    store.write(path)
    with pytest.raises(FontFormatError):
        FontFileStore.read(path)


def test_truncated_file_rejected(tmp_path):
    path = tmp_path / "font.glfont"
    make_store().write(path)
    path.write_bytes(path.read_bytes()[:-3])
    with pytest.raises(FontFormatError):
        FontFileStore.read(path)


def test_one_excess_byte_tolerated(tmp_path):
    path = tmp_path / "font.glfont"
    store = make_store()
    store.write(path)
    path.write_bytes(path.read_bytes() + b"\0")
    assert FontFileStore.read(path) == store


def test_two_excess_bytes_rejected(tmp_path):
    path = tmp_path / "font.glfont"
    make_store().write(path)
    path.write_bytes(path.read_bytes() + b"\0\0")
    with pytest.raises(FontFormatError):
        FontFileStore.read(path)


def test_write_rejects_wrong_bitmap_size(tmp_path):
    store = make_store()
    store.bitmap = b"\0" * 3
    with pytest.raises(FontFormatError):
        store.write(tmp_path / "font.glfont")


def test_texture_cell_follows_rows():
    store = make_store()
    assert store.texture_cell(0) == (0, 0)
    assert store.texture_cell(1) == (1, 0)
    assert store.texture_cell(2) == (0, 1)


def test_advance_without_next_char():
    store = make_store()
    assert store.advance("A") == 7.0
    assert store.advance("B", "\0") == 6.5


def test_advance_uses_kerning_pair():
    kerning = [0.0] * 9
    kerning[1 * 3 + 0] = 0.25  # 'A' followed by 'B'
    store = make_store(kerning=kerning)
    assert store.advance("A", "B") == store.glyphs[0].advance + 0.25
    assert store.advance("B", "A") == store.glyphs[1].advance


def test_advance_out_of_range_pair_is_zero():
    store = make_store()
    assert store.advance("A", "z") == 0.0


def test_unknown_char_raises():
    with pytest.raises(ValueError):
        make_store().texture_coords("z")


def test_texture_coords_form_quad():
    store = make_store()
    u0, v0, u1, v1, u2, v2, u3, v3 = store.texture_coords("A")
    assert u0 == u2 == 0.0
    assert u1 == u3
    assert v0 == v1
    assert v2 == v3 == 0.0
    assert v0 > v2


def test_vertex_coords_start_at_offsets():
    store = make_store()
    coords = store.vertex_coords("C")
    assert coords[0] == store.glyphs[2].x_offset
    assert coords[1] == store.glyphs[2].y_offset
    assert coords[2] == coords[6]
    assert coords[5] == coords[7]
    assert coords[2] > coords[0]


def test_take_bitmap_only_once():
    store = make_store()
    taken = store.take_bitmap()
    assert taken == (bytes(range(16)), 4, 4)
    assert store.take_bitmap() is None
    assert store.bitmap is None