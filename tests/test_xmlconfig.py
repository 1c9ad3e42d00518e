import pytest

from glasscockpit.xmlconfig import XMLNode, XMLParser, XMLReadError

DOCUMENT = """<?xml version="1.0"?>
<Config>
  <DataSource type="Test">
    <Host>localhost</Host>
    <Port>5800</Port>
  </DataSource>
  <Window>
    <Title>Glass Cockpit</Title>
    <Geometry><Size>1127.5,785</Size></Geometry>
    <Gauge type="PFD"/>
    <Gauge type="NavDisplay"/>
    <Other/>
  </Window>
  <Values>
    <Decimal>42</Decimal>
    <Octal>010</Octal>
    <Hex>0x10</Hex>
    <Negative>-17</Negative>
    <Junk>abc</Junk>
    <Float>2.5e1xyz</Float>
    <Yes>True</Yes>
    <No>yes</No>
    <BadCoord>1.5</BadCoord>
    <Spaced>3 ,4</Spaced>
  </Values>
</Config>
"""


@pytest.fixture
def parser(tmp_path):
    path = tmp_path / "config.xml"
    path.write_text(DOCUMENT)
    result = XMLParser()
    result.read(path)
    return result


def test_root_node(parser):
    assert parser.get_node("/").name == "Config"


def test_get_nested_node(parser):
    node = parser.get_node("/Window/Title")
    assert node.text == "Glass Cockpit"


def test_trailing_slash_is_ignored(parser):
    assert parser.get_node("/Window/").name == "Window"


def test_missing_node_is_invalid(parser):
    assert parser.has_node("/Window/Missing") is False
    assert parser.has_node("/Nowhere/Deeper") is False
    assert parser.has_node("/DataSource") is True


def test_empty_token_is_invalid(parser):
    assert parser.has_node("//Window") is False


def test_relative_path_rejected(parser):
    with pytest.raises(ValueError):
        parser.get_node("Window")


def test_child_and_children(parser):
    window = parser.get_node("/Window")
    gauges = window.children("Gauge")
    assert [g.attribute("type") for g in gauges] == ["PFD", "NavDisplay"]
    assert [c.name for c in window.children()] == ["Title", "Geometry", "Gauge", "Gauge", "Other"]
    assert window.has_child("Other")
    assert not window.has_child("Nope")
    assert not window.child("Nope")


def test_attributes(parser):
    ds = parser.get_node("/DataSource")
    assert ds.attribute("type") == "Test"
    assert ds.has_attribute("type")
    assert ds.attribute("missing") == ""
    assert not ds.has_attribute("missing")


def test_text_as_int_bases(parser):
    values = parser.get_node("/Values")
    assert values.child("Decimal").text_as_int() == 42
    assert values.child("Octal").text_as_int() == 8
    assert values.child("Hex").text_as_int() == 16
    assert values.child("Negative").text_as_int() == -17
    assert values.child("Junk").text_as_int() == 0


def test_text_as_float(parser):
    values = parser.get_node("/Values")
    assert values.child("Float").text_as_float() == pytest.approx(25.0)
    assert values.child("Junk").text_as_float() == 0.0
    assert parser.get_node("/DataSource/Port").text_as_float() == 5800.0


def test_text_as_bool(parser):
    values = parser.get_node("/Values")
    assert values.child("Yes").text_as_bool() is True
    assert values.child("No").text_as_bool() is False


def test_text_as_coord(parser):
    size = parser.get_node("/Window/Geometry/Size")
    assert size.text_as_coord() == (1127.5, 785.0)


def test_text_as_coord_requires_comma(parser):
    with pytest.raises(ValueError):
        parser.get_node("/Values/BadCoord").text_as_coord()


def test_text_as_coord_rejects_space_before_comma(parser):
    with pytest.raises(ValueError):
        parser.get_node("/Values/Spaced").text_as_coord()


def test_empty_element_text(parser):
    assert parser.get_node("/Window/Other").text == ""


def test_invalid_node_operations_raise():
    node = XMLNode()
    assert not node.is_valid
    with pytest.raises(XMLReadError):
        node.child("x")
    with pytest.raises(XMLReadError):
        _ = node.text


def test_read_missing_file(tmp_path):
    with pytest.raises(XMLReadError):
        XMLParser().read(tmp_path / "missing.xml")


def test_read_malformed_file(tmp_path):
    path = tmp_path / "bad.xml"
    path.write_text("<a><b></a>")
    with pytest.raises(XMLReadError):
        XMLParser().read(path)


def test_read_none_filename():
    with pytest.raises(XMLReadError):
        XMLParser().read(None)


def test_unread_parser_has_no_nodes():
    parser = XMLParser()
    assert parser.has_node("/") is False
    assert parser.format_tree() == ""


def test_format_tree(tmp_path):
    path = tmp_path / "tree.xml"
    path.write_text('<Root a="1"><Title>Glass</Title><Size>10,20</Size><Empty/></Root>')
    parser = XMLParser()
    parser.read(path)
    assert parser.format_tree() == (
        'Root (a="1") = "Glass"\n'
        '    Title = "Glass"\n'
        '    Size = "10,20"\n'
        "    Empty\n"
    )


def test_format_tree_skips_content_with_spaces(parser):
    lines = parser.format_tree().splitlines()
    assert "        Title" in lines
    assert '        Host = "localhost"' in lines