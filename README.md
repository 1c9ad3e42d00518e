# glasscockpit

Building blocks for a glass cockpit display. The package has no third-party
dependencies.

## What is in it

- **`glasscockpit.xmlconfig`**: `XMLParser` reads an XML file
  (`read`) and finds nodes by absolute path (`get_node`, `has_node`), for
  example `/Window/Geometry/Size`; `/` is the root element. A path that leads
  nowhere gives an invalid `XMLNode` (false in a boolean test). `XMLNode`
  gives access to `name`, `text`, `child`, `children`, `has_child`,
  `attribute`, `has_attribute` and the typed readers `text_as_float`,
  `text_as_int` (decimal, octal `0...` or hex `0x...`), `text_as_bool`
  (`1`, `true`, `TRUE`, `True`) and `text_as_coord` (`"x,y"` to a pair of
  floats). `format_tree` returns the document as an indented text tree.
- **`glasscockpit.preferences`**: `PreferenceManager` holds typed
  preferences (`PreferenceType.STRING`, `BOOLEAN`, `DOUBLE`, `INTEGER`).
  `initialize(path)` defines them and their defaults from a file whose root
  is `<Preferences>` and whose children are `<Preference>` elements with
  `Name`, `Type` (`double`, `string`, `integer`, `boolean`) and
  `DefaultValue`. `populate(node)` then overrides values from the children of
  a `<Preferences>` node. Values are read and written with `get_string`,
  `get_boolean`, `get_double`, `get_integer` and the matching `set_*`
  methods. `display(stream)` writes every entry, sorted by name.
  `PreferenceManager.instance()` returns one shared manager.
- **`glasscockpit.airframe`**: `AirframeData`, a dataclass of the aircraft
  state: attitude, position, body accelerations, speeds, altitudes, engine
  readings, flight director values and status panel texts and colours.
- **`glasscockpit.sources`**: the `DataSource` base class (`open`,
  `on_idle`, `airframe`) and two sources:
  - `SimulatedDataSource` makes up a test flight. Each `on_idle` call moves
    simulated time on by 1/24 s. It passes through the
    `SimulationState` values `WAITING`, `CONNECTING`, `FD` and `RUNNING`, and
    returns `True` whenever the airframe changed.
  - `AlbatrossDataSource` shows a "WAITING FOR CONNECTION" status and never
    reports new data.
- **`glasscockpit.flightgear`**: `FGData` encodes and decodes one
  FlightGear flight-model packet (`from_bytes`, `to_bytes`, `FGData.SIZE`).
  `FGDataSource.open()` reads the `FlightGearHost` and `FlightGearPort`
  preferences and returns `False` when the port is outside 1025–65535.
- **`glasscockpit.font_store`**: `FontFileStore` reads and writes
  prerendered `.glfont` atlases (`read`, `write`) and gives glyph
  `advance` (kerned against the following character), `texture_coords`,
  `vertex_coords`, `texture_cell` and `take_bitmap`, which hands the bitmap
  over once.
- **`glasscockpit.fonts`**: `TextureFont` wraps a font file; `Font`
  adds a physical size and right alignment and returns a `Placement` (origin,
  scale, shift, `start_x`) for a string. `FontManager` loads each font file
  once and hands out indices (`load_font`, `load_default_font`, `set_size`,
  `set_right_aligned`, `placement`). Unless given a `font_path`, it looks
  fonts up in the `PathToData` preference followed by `Fonts/`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from glasscockpit.xmlconfig import XMLParser
from glasscockpit.preferences import PreferenceManager
from glasscockpit.sources import SimulatedDataSource

prefs = PreferenceManager.instance()
prefs.initialize("Preferences.xml")

parser = XMLParser()
parser.read("Default.xml")
if parser.has_node("/Preferences"):
    prefs.populate(parser.get_node("/Preferences"))

source = SimulatedDataSource()
source.open()

for _ in range(48):
    if source.on_idle():
        print(source.state, source.airframe.altitude_msl_feet)
```

## Errors

Errors are raised as exceptions: `XMLReadError` when a file cannot be read or
an invalid node is used, `ValueError` for a relative node path or malformed
coordinates, `PreferenceError` for unknown, wrongly typed or badly defined
preferences, and `FontFormatError` for damaged font files or a font
prerendered at the wrong size.

## What it does not do

- There is no window, renderer or gauge here. Fonts work out where text goes
  (`Placement`); drawing is left to the caller.
- There is no command to run and no registry that creates a data source from
  a configured type name; create the source class you want directly.
- `FGDataSource` opens no network socket. After `open()` it always reports
  no new data from `on_idle()`.
- `AlbatrossDataSource` has no telemetry link and never updates the airframe.
- Font files can be read and written, but not created from TrueType fonts.