"""Named X11 colours and the colour-spec parsing used by XPM colour tables."""

from __future__ import annotations

import re
from collections.abc import Iterator

__all__ = ["lookup_color", "text_to_rgb"]

# Each line is "name[, alias...]: rrggbb". Order matters: several names occur
# more than once with different values, and the first entry wins.
_BASIC = """
snow: fffafa
ghost white, ghostwhite: f8f8ff
white smoke, whitesmoke: f5f5f5
gainsboro: dcdcdc
floral white, floralwhite: fffaf0
old lace, oldlace: fdf5e6
linen: faf0e6
antique white, antiquewhite: faebd7
papaya whip, papayawhip: ffefd5
blanched almond, blanchedalmond: ffebcd
bisque: ffe4c4
peach puff, peachpuff: ffdab9
navajo white, navajowhite: ffdead
moccasin: ffe4b5
cornsilk: fff8dc
ivory: fffff0
lemon chiffon, lemonchiffon: fffacd
seashell: fff5ee
honeydew: f0fff0
mint cream, mintcream: f5fffa
azure: f0ffff
alice blue, aliceblue: f0f8ff
lavender: e6e6fa
lavender blush, lavenderblush: fff0f5
misty rose, mistyrose: ffe4e1
white: ffffff
black: 0
dark slate, darkslategray, dark slate, darkslategrey: 2f4f4f
dim gray, dimgray, dim grey, dimgrey: 696969
slate gray, slategray, slate grey, slategrey: 708090
light slate, lightslategray, light slate, lightslategrey: 778899
gray, grey: bebebe
light grey, lightgrey, light gray, lightgray: d3d3d3
midnight blue, midnightblue: 191970
navy, navy blue, navyblue: 80
cornflower blue, cornflowerblue: 6495ed
dark slate, darkslateblue: 483d8b
slate blue, slateblue: 6a5acd
medium slate, mediumslateblue: 7b68ee
light slate, lightslateblue: 8470ff
medium blue, mediumblue: cd
royal blue, royalblue: 4169e1
blue: ff
dodger blue, dodgerblue: 1e90ff
deep sky, deepskyblue: bfff
sky blue, skyblue: 87ceeb
light sky, lightskyblue: 87cefa
steel blue, steelblue: 4682b4
light steel, lightsteelblue: b0c4de
light blue, lightblue: add8e6
powder blue, powderblue: b0e0e6
pale turquoise, paleturquoise: afeeee
dark turquoise, darkturquoise: ced1
medium turquoise, mediumturquoise: 48d1cc
turquoise: 40e0d0
cyan: ffff
light cyan, lightcyan: e0ffff
cadet blue, cadetblue: 5f9ea0
medium aquamarine, mediumaquamarine: 66cdaa
aquamarine: 7fffd4
dark green, darkgreen: 6400
dark olive, darkolivegreen: 556b2f
dark sea, darkseagreen: 8fbc8f
sea green, seagreen: 2e8b57
medium sea, mediumseagreen: 3cb371
light sea, lightseagreen: 20b2aa
pale green, palegreen: 98fb98
spring green, springgreen: ff7f
lawn green, lawngreen: 7cfc00
green: ff00
chartreuse: 7fff00
medium spring, mediumspringgreen: fa9a
green yellow, greenyellow: adff2f
lime green, limegreen: 32cd32
yellow green, yellowgreen: 9acd32
forest green, forestgreen: 228b22
olive drab, olivedrab: 6b8e23
dark khaki, darkkhaki: bdb76b
khaki: f0e68c
pale goldenrod, palegoldenrod: eee8aa
light goldenrod, lightgoldenrodyellow: fafad2
light yellow, lightyellow: ffffe0
yellow: ffff00
gold: ffd700
light goldenrod, lightgoldenrod: eedd82
goldenrod: daa520
dark goldenrod, darkgoldenrod: b8860b
rosy brown, rosybrown: bc8f8f
indian red, indianred: cd5c5c
saddle brown, saddlebrown: 8b4513
sienna: a0522d
peru: cd853f
burlywood: deb887
beige: f5f5dc
wheat: f5deb3
sandy brown, sandybrown: f4a460
tan: d2b48c
chocolate: d2691e
firebrick: b22222
brown: a52a2a
dark salmon, darksalmon: e9967a
salmon: fa8072
light salmon, lightsalmon: ffa07a
orange: ffa500
dark orange, darkorange: ff8c00
coral: ff7f50
light coral, lightcoral: f08080
tomato: ff6347
orange red, orangered: ff4500
red: ff0000
hot pink, hotpink: ff69b4
deep pink, deeppink: ff1493
pink: ffc0cb
light pink, lightpink: ffb6c1
pale violet, palevioletred: db7093
maroon: b03060
medium violet, mediumvioletred: c71585
violet red, violetred: d02090
magenta: ff00ff
violet: ee82ee
plum: dda0dd
orchid: da70d6
medium orchid, mediumorchid: ba55d3
dark orchid, darkorchid: 9932cc
dark violet, darkviolet: 9400d3
blue violet, blueviolet: 8a2be2
purple: a020f0
medium purple, mediumpurple: 9370db
thistle: d8bfd8
"""

# Each line is "base: shade1 shade2 shade3 shade4", naming base1 .. base4.
_SHADES = """
snow: fffafa eee9e9 cdc9c9 8b8989
seashell: fff5ee eee5de cdc5bf 8b8682
antiquewhite: ffefdb eedfcc cdc0b0 8b8378
bisque: ffe4c4 eed5b7 cdb79e 8b7d6b
peachpuff: ffdab9 eecbad cdaf95 8b7765
navajowhite: ffdead eecfa1 cdb38b 8b795e
lemonchiffon: fffacd eee9bf cdc9a5 8b8970
cornsilk: fff8dc eee8cd cdc8b1 8b8878
ivory: fffff0 eeeee0 cdcdc1 8b8b83
honeydew: f0fff0 e0eee0 c1cdc1 838b83
lavenderblush: fff0f5 eee0e5 cdc1c5 8b8386
mistyrose: ffe4e1 eed5d2 cdb7b5 8b7d7b
azure: f0ffff e0eeee c1cdcd 838b8b
slateblue: 836fff 7a67ee 6959cd 473c8b
royalblue: 4876ff 436eee 3a5fcd 27408b
blue: ff ee cd 8b
dodgerblue: 1e90ff 1c86ee 1874cd 104e8b
steelblue: 63b8ff 5cacee 4f94cd 36648b
deepskyblue: bfff b2ee 9acd 688b
skyblue: 87ceff 7ec0ee 6ca6cd 4a708b
lightskyblue: b0e2ff a4d3ee 8db6cd 607b8b
slategray: c6e2ff b9d3ee 9fb6cd 6c7b8b
lightsteelblue: cae1ff bcd2ee a2b5cd 6e7b8b
lightblue: bfefff b2dfee 9ac0cd 68838b
lightcyan: e0ffff d1eeee b4cdcd 7a8b8b
paleturquoise: bbffff aeeeee 96cdcd 668b8b
cadetblue: 98f5ff 8ee5ee 7ac5cd 53868b
turquoise: f5ff e5ee c5cd 868b
cyan: ffff eeee cdcd 8b8b
darkslategray: 97ffff 8deeee 79cdcd 528b8b
aquamarine: 7fffd4 76eec6 66cdaa 458b74
darkseagreen: c1ffc1 b4eeb4 9bcd9b 698b69
seagreen: 54ff9f 4eee94 43cd80 2e8b57
palegreen: 9aff9a 90ee90 7ccd7c 548b54
springgreen: ff7f ee76 cd66 8b45
green: ff00 ee00 cd00 8b00
chartreuse: 7fff00 76ee00 66cd00 458b00
olivedrab: c0ff3e b3ee3a 9acd32 698b22
darkolivegreen: caff70 bcee68 a2cd5a 6e8b3d
khaki: fff68f eee685 cdc673 8b864e
lightgoldenrod: ffec8b eedc82 cdbe70 8b814c
lightyellow: ffffe0 eeeed1 cdcdb4 8b8b7a
yellow: ffff00 eeee00 cdcd00 8b8b00
gold: ffd700 eec900 cdad00 8b7500
goldenrod: ffc125 eeb422 cd9b1d 8b6914
darkgoldenrod: ffb90f eead0e cd950c 8b6508
rosybrown: ffc1c1 eeb4b4 cd9b9b 8b6969
indianred: ff6a6a ee6363 cd5555 8b3a3a
sienna: ff8247 ee7942 cd6839 8b4726
burlywood: ffd39b eec591 cdaa7d 8b7355
wheat: ffe7ba eed8ae cdba96 8b7e66
tan: ffa54f ee9a49 cd853f 8b5a2b
chocolate: ff7f24 ee7621 cd661d 8b4513
firebrick: ff3030 ee2c2c cd2626 8b1a1a
brown: ff4040 ee3b3b cd3333 8b2323
salmon: ff8c69 ee8262 cd7054 8b4c39
lightsalmon: ffa07a ee9572 cd8162 8b5742
orange: ffa500 ee9a00 cd8500 8b5a00
darkorange: ff7f00 ee7600 cd6600 8b4500
coral: ff7256 ee6a50 cd5b45 8b3e2f
tomato: ff6347 ee5c42 cd4f39 8b3626
orangered: ff4500 ee4000 cd3700 8b2500
red: ff0000 ee0000 cd0000 8b0000
deeppink: ff1493 ee1289 cd1076 8b0a50
hotpink: ff6eb4 ee6aa7 cd6090 8b3a62
pink: ffb5c5 eea9b8 cd919e 8b636c
lightpink: ffaeb9 eea2ad cd8c95 8b5f65
palevioletred: ff82ab ee799f cd6889 8b475d
maroon: ff34b3 ee30a7 cd2990 8b1c62
violetred: ff3e96 ee3a8c cd3278 8b2252
magenta: ff00ff ee00ee cd00cd 8b008b
orchid: ff83fa ee7ae9 cd69c9 8b4789
plum: ffbbff eeaeee cd96cd 8b668b
mediumorchid: e066ff d15fee b452cd 7a378b
darkorchid: bf3eff b23aee 9a32cd 68228b
purple: 9b30ff 912cee 7d26cd 551a8b
mediumpurple: ab82ff 9f79ee 8968cd 5d478b
thistle: ffe1ff eed2ee cdb5cd 8b7b8b
"""

# Grey level of gray0 .. gray100, one byte per step.
_GRAY_LEVELS = bytes.fromhex(
    "00 03 05 08 0a 0d 0f 12 14 17 1a 1c 1f 21 24 26 29 2b 2e 30"
    " 33 36 38 3b 3d 40 42 45 47 4a 4d 4f 52 54 57 59 5c 5e 61 63"
    " 66 69 6b 6e 70 73 75 78 7a 7d 7f 82 85 87 8a 8c 8f 91 94 96"
    " 99 9c 9e a1 a3 a6 a8 ab ad b0 b3 b5 b8 ba bd bf c2 c4 c7 c9"
    " cc cf d1 d4 d6 d9 db de e0 e3 e5 e8 eb ed f0 f2 f5 f7 fa fc"
    " ff"
)

_EXTRA = """
dark grey, darkgrey, dark gray, darkgray: a9a9a9
dark blue, darkblue: 8b
dark cyan, darkcyan: 8b8b
dark magenta, darkmagenta: 8b008b
dark red, darkred: 8b0000
light green, lightgreen: 90ee90
none: -1
"""

# Colour specs are formatted into a 64-byte buffer, terminator included.
_SPEC_LIMIT = 63

_HEX_PREFIX = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")


def _named(block: str) -> Iterator[tuple[str, int]]:
    for line in block.strip().splitlines():
        names, _, value = line.partition(":")
        color = int(value.strip(), 16)
        for name in names.split(","):
            yield name.strip(), color


def _shaded(block: str) -> Iterator[tuple[str, int]]:
    for line in block.strip().splitlines():
        base, _, values = line.partition(":")
        for number, value in enumerate(values.split(), start=1):
            yield f"{base.strip()}{number}", int(value, 16)


def _grays() -> Iterator[tuple[str, int]]:
    for number, level in enumerate(_GRAY_LEVELS):
        color = level * 0x010101
        yield f"gray{number}", color
        yield f"grey{number}", color


def _build_table() -> dict[str, int]:
    table: dict[str, int] = {}
    entries = (
        *_named(_BASIC),
        *_shaded(_SHADES),
        *_grays(),
        *_named(_EXTRA),
    )
    for name, color in entries:
        table.setdefault(name.lower(), color)
    return table


_COLORS = _build_table()


def lookup_color(name: str) -> int:
    """Return the 0xRRGGBB value of a colour name, ignoring case.

    The special name ``none`` maps to -1. Raises KeyError for unknown names.
    """
    try:
        return _COLORS[name.lower()]
    except KeyError:
        raise KeyError(name) from None


def _parse_hex(text: str) -> int:
    match = _HEX_PREFIX.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits, 16)
    return -value if sign == "-" else value


def text_to_rgb(name: str, suffix: str | None = None) -> int:
    """Turn an XPM colour spec into an RGB value.

    ``#rrggbb`` specs are read as hexadecimal. Otherwise the name, joined
    with ``suffix`` by a space when one is given, is looked up in the colour
    table; unknown names give 0.
    """
    if name.startswith("#"):
        return _parse_hex(name[1:])
    if suffix is not None:
        name = f"{name} {suffix}"[:_SPEC_LIMIT]
    return _COLORS.get(name.lower(), 0)