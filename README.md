# osmsieve

Building blocks for cutting OpenStreetMap data down to what a transit map
matcher needs: records for OSM entities, a bounding-box index, a disk-backed
set of OSM ids, a store for turn restrictions between graph edges, a small
streaming XML writer and conversions for tag values and edge costs.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `osmsieve.osm`

Dataclasses for OSM entities: `OsmNode` (`id`, `lat`, `lng`, `attrs`),
`OsmWay` (`id`, `attrs`, `nodes`), `OsmRel` (`id`, `attrs`, `nodes`, `ways`,
`node_roles`, `way_roles`), each with `keep_flags` and `drop_flags`. Turn
restrictions are `Restriction(e_from, e_to)`, gathered in `Restrictions`,
whose `pos` and `neg` dictionaries map a via node id to a list of
restrictions.

### `osmsieve.geo`

`Box(min_x, min_y, max_x, max_y)` is a frozen axis-aligned box with x as
longitude and y as latitude, with `lower_left` and `upper_right` properties.
Helpers: `min_box()` (an inverted box that any real box extends into
itself), `pad`, `extend_box`, `common_area`, `box_contains(box, x, y)`
(borders included) and `lat_lng_to_web_merc(lat, lng)`.

### `osmsieve.bbox_idx`

`BBoxIdx(padding)` is a small R-tree-like index of boxes, at most five
levels deep. Every added box is padded by `padding` metres, converted to
degrees at 83 km per degree. It offers `add(box)`, `len()`,
`contains(x, y)`, `full_box()`, `full_web_merc_box()` and `leafs()`.

```python
from osmsieve.bbox_idx import BBoxIdx
from osmsieve.geo import Box

bbox = BBoxIdx(100.0)
bbox.add(Box(7.8, 47.9, 7.9, 48.1))
assert bbox.contains(7.85, 48.0)
assert not bbox.contains(9.0, 48.0)
```

### `osmsieve.id_set`

`OsmIdSet(bloom_bits=BLOOM_BITS)` is a set of OSM ids kept in a temporary
file, with a Bloom filter answering most lookups without touching the file.
`add` ids first; the first `has` (or `in`) closes the set, after which
adding raises `RuntimeError`. If ids were added out of order, closing sorts
the file. `nadd` registers ids known *not* to be in the set, which lets the
filter answer more lookups by itself. `release()`, or leaving a `with`
block, closes the temporary file. The default filter size takes about
27 MB of memory; pass a smaller `bloom_bits` for small sets.

The module also exposes the hashes it uses: `murmur3_32(data, seed)` and
`jenkins(value)`.

```python
from osmsieve.id_set import OsmIdSet

with OsmIdSet(bloom_bits=1 << 16) as ids:
    for osm_id in (5, 3, 9):
        ids.add(osm_id)
    assert 3 in ids
    assert 4 not in ids
```

### `osmsieve.restrictor`

`Restrictor` records positive ("only") and negative ("no") turn
restrictions between graph edges at via nodes. Edges are compared by
identity and need `from_node` and `to_node` attributes; nodes may be any
hashable object. A rule added with `add(from_edge, to_way, via, positive)`
refers to the target way by its OSM id and stays pending until
`relax(wid, node, edge)` binds that way's edge at the node. `may(from_edge,
to_edge, via)` answers whether a turn is allowed. `replace_edge(old, new_a,
new_b)` swaps a split edge for its two halves, and `duplicate_edge(old,
new_edge)` lets a reversed copy of an edge take its place where the
direction fits.

```python
from dataclasses import dataclass
from osmsieve.restrictor import Restrictor

@dataclass(eq=False)
class Edge:
    from_node: str
    to_node: str

a_b, b_c = Edge("A", "B"), Edge("B", "C")
restrictor = Restrictor()
restrictor.add(a_b, to_way=42, via="B", positive=False)
restrictor.relax(42, "B", b_c)
assert not restrictor.may(a_b, b_c, "B")
```

### `osmsieve.conversions`

- `parse_hex_color(s)` reads `#RRGGBB`, `#RGB` or one of the sixteen basic
  HTML color names, case-insensitively, into an integer such as
  `0xFF0000`. It returns `None` when a `#` form holds a non-hex character
  and `0` for anything else it does not recognise.
- `cost_to_int(c)` turns a cost in seconds into tenths of seconds, rounding
  upwards and capping at the largest unsigned 32-bit value.

### `osmsieve.xml_writer`

`XmlWriter(out, pretty=False, indent=4)` writes XML to a text stream or to
a file path (a path is closed again by `close_tags`). It offers
`open_tag(name, attrs)`, `close_tag()`, `close_tags()`, `open_comment()`,
`write_text(text)` and `put(text)` for raw output. Attributes are written
sorted by name; empty elements are closed as `<name/>`. With `pretty`,
each tag and comment starts on its own line, indented per nesting level.

```python
import io
from osmsieve.xml_writer import XmlWriter

buf = io.StringIO()
writer = XmlWriter(buf)
writer.open_tag("osm", {"version": "0.6"})
writer.open_tag("node", {"id": "1", "lat": "48.0", "lon": "7.85"})
writer.close_tags()
assert buf.getvalue() == '<osm version="0.6"><node id="1" lat="48.0" lon="7.85"/></osm>'
```

## What the package does not do

The package provides the pieces listed above and nothing more. It does not
read or parse OSM XML files, does not hold or evaluate keep/drop tag rules,
does not write osmfilter rule files or Overpass queries, and does not build
a routing graph. There is no command-line program.