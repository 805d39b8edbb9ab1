#!/usr/bin/env python3
"""dol_turtle.py

Deterministic context-free L-systems (DOL-systems) and a turtle interpreter
that turns the expanded symbols into move-to / line-to path segments.

Key features:
- Generic rewrite engine over any symbol type (flat-map per generation).
- Exhaustiveness check for table-built rules over an Enum alphabet.
- Fixed seven-symbol drawing alphabet with inert marker symbols.
- Turtle interpreter as a left fold over an immutable state.
- Hardcoded preset table, SVG path export and a random ruleset generator.

Run:
  python dol_turtle.py render config.json output.svg
  python dol_turtle.py draw koch koch.svg -n 4
  python dol_turtle.py expand dragon -n 3
  python dol_turtle.py --help
"""

from __future__ import annotations

import argparse
import itertools
import json
import math
import random
import sys
from collections.abc import Callable, Hashable, Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Literal, TypeVar, cast
from xml.sax.saxutils import escape as xml_escape

Point = tuple[float, float]

S = TypeVar("S", bound=Hashable)
E = TypeVar("E", bound=Enum)

Rule = Callable[[S], Sequence[S]]


# -------------------------
# Errors / Validation
# -------------------------


class ConfigError(ValueError):
    pass


class RuleError(ConfigError):
    pass


def _require(cond: bool, msg: str, exc: type[ConfigError] = ConfigError) -> None:
    if not cond:
        raise exc(msg)


def _as_float(x: Any, path: str) -> float:
    _require(
        isinstance(x, (int, float)) and not isinstance(x, bool),
        f"{path} must be a number",
    )
    return float(x)


def _as_int(x: Any, path: str) -> int:
    _require(
        isinstance(x, int) and not isinstance(x, bool), f"{path} must be an integer"
    )
    return int(x)


def _as_str(x: Any, path: str) -> str:
    _require(isinstance(x, str), f"{path} must be a string")
    return cast(str, x)


def _as_bool(x: Any, path: str) -> bool:
    _require(isinstance(x, bool), f"{path} must be a boolean")
    return cast(bool, x)


def _as_dict(x: Any, path: str) -> dict[str, Any]:
    _require(isinstance(x, dict), f"{path} must be an object")
    return cast(dict[str, Any], x)


# -------------------------
# Rewrite engine
# -------------------------


def apply(rule: Rule[S], sequence: Iterable[S]) -> list[S]:
    """Rewrite one generation: replace every symbol by ``rule(symbol)``.

    Results are concatenated in input order (a flat-map). The input is not
    modified and no limit is placed on how much the sequence grows.
    """
    out: list[S] = []
    for sym in sequence:
        out.extend(rule(sym))
    return out


def expand(rule: Rule[S], axiom: Iterable[S], generations: int) -> list[S]:
    """Apply ``rule`` to ``axiom`` ``generations`` times."""
    _require(generations >= 0, "generations must be >= 0", RuleError)
    seq = list(axiom)
    for _ in range(generations):
        seq = apply(rule, seq)
    return seq


def iter_generations(rule: Rule[S], axiom: Iterable[S]) -> Iterator[list[S]]:
    """Yield generation 0, 1, 2, ... forever; bound it with itertools.islice."""
    seq = list(axiom)
    while True:
        yield seq
        seq = apply(rule, seq)


def identity_rule(sym: S) -> list[S]:
    return [sym]


def make_rule(
    alphabet: type[E],
    productions: Mapping[E, Iterable[E]],
    *,
    passthrough: bool = False,
) -> Rule[E]:
    """Build a total rule from a production table over an Enum alphabet.

    Every member of ``alphabet`` must have a production unless ``passthrough``
    is set, in which case members without one rewrite to themselves.
    """
    table: dict[E, tuple[E, ...]] = {}
    for sym, repl in productions.items():
        _require(
            isinstance(sym, alphabet),
            f"production key {sym!r} is not a {alphabet.__name__} member",
            RuleError,
        )
        out = tuple(repl)
        for r in out:
            _require(
                isinstance(r, alphabet),
                f"production for {sym!r} contains {r!r}, "
                f"which is not a {alphabet.__name__} member",
                RuleError,
            )
        table[sym] = out

    missing = [m for m in alphabet if m not in table]
    if missing and not passthrough:
        names = ", ".join(m.name for m in missing)
        raise RuleError(f"rule over {alphabet.__name__} has no production for: {names}")
    for m in missing:
        table[m] = (m,)

    def rule(sym: E) -> tuple[E, ...]:
        return table[sym]

    return rule


def _display_name(sym: Any) -> str:
    name = getattr(sym, "display_name", None)
    if not isinstance(name, str):
        raise TypeError(
            f"{type(sym).__name__} value {sym!r} has no display_name; "
            "pass display= to format_sequence"
        )
    return name


def format_sequence(
    sequence: Iterable[S], display: Callable[[S], str] | None = None
) -> str:
    """Concatenate the display names of ``sequence`` with no separators."""
    if display is None:
        display = _display_name
    return "".join(display(sym) for sym in sequence)


# -------------------------
# Drawing alphabet
# -------------------------


class DrawSymbol(Enum):
    DRAW = "F"
    SKIP = "f"
    TURN_LEFT = "-"
    TURN_RIGHT = "+"
    MARKER_A = "X"
    MARKER_B = "Y"
    MARKER_C = "Z"

    @property
    def display_name(self) -> str:
        return cast(str, self.value)


_MARKERS = frozenset({DrawSymbol.MARKER_A, DrawSymbol.MARKER_B, DrawSymbol.MARKER_C})


# -------------------------
# Turtle interpreter
# -------------------------


SegmentKind = Literal["move_to", "line_to"]


@dataclass(frozen=True)
class TurtleState:
    x: float
    y: float
    heading_deg: float


ORIGIN = TurtleState(0.0, 0.0, 0.0)


@dataclass(frozen=True)
class PathSegment:
    kind: SegmentKind
    x: float
    y: float

    @property
    def point(self) -> Point:
        return (self.x, self.y)


def _forward(state: TurtleState) -> TurtleState:
    rad = math.radians(state.heading_deg)
    return TurtleState(
        state.x + math.cos(rad), state.y + math.sin(rad), state.heading_deg
    )


def step_turtle(
    state: TurtleState, sym: DrawSymbol, angle_deg: float
) -> tuple[TurtleState, PathSegment | None]:
    """Single transition of the turtle; returns the new state and its segment."""
    if sym is DrawSymbol.DRAW:
        nxt = _forward(state)
        return nxt, PathSegment("line_to", nxt.x, nxt.y)

    if sym is DrawSymbol.SKIP:
        nxt = _forward(state)
        return nxt, PathSegment("move_to", nxt.x, nxt.y)

    if sym is DrawSymbol.TURN_LEFT:
        return replace(state, heading_deg=state.heading_deg - angle_deg), None

    if sym is DrawSymbol.TURN_RIGHT:
        return replace(state, heading_deg=state.heading_deg + angle_deg), None

    if sym in _MARKERS:
        return state, None

    raise TypeError(f"turtle expects DrawSymbol values, got {sym!r}")


def iter_segments(
    symbols: Iterable[DrawSymbol], angle_deg: float
) -> Iterator[PathSegment]:
    """Stream path segments for ``symbols``, starting at the origin facing +X.

    The heading is never normalized; trig periodicity takes care of wrapping.
    """
    state = ORIGIN
    for sym in symbols:
        state, seg = step_turtle(state, sym, angle_deg)
        if seg is not None:
            yield seg


def turtle(symbols: Iterable[DrawSymbol], angle_deg: float) -> list[PathSegment]:
    return list(iter_segments(symbols, angle_deg))


# -------------------------
# Presets
# -------------------------


@dataclass(frozen=True)
class Preset:
    title: str
    axiom: tuple[DrawSymbol, ...]
    rule: Rule[DrawSymbol]
    angle_deg: float
    generations: int


_F = DrawSymbol.DRAW
_f = DrawSymbol.SKIP
_L = DrawSymbol.TURN_LEFT
_R = DrawSymbol.TURN_RIGHT
_X = DrawSymbol.MARKER_A
_Y = DrawSymbol.MARKER_B


def _preset(
    title: str,
    axiom: tuple[DrawSymbol, ...],
    productions: Mapping[DrawSymbol, tuple[DrawSymbol, ...]],
    angle_deg: float,
    generations: int,
) -> Preset:
    return Preset(
        title=title,
        axiom=axiom,
        rule=make_rule(DrawSymbol, productions, passthrough=True),
        angle_deg=angle_deg,
        generations=generations,
    )


PRESETS: dict[str, Preset] = {
    # F -> F-F++F-F
    "koch": _preset("Koch curve", (_F,), {_F: (_F, _L, _F, _R, _R, _F, _L, _F)}, 60, 4),
    # F+F+F+F, F -> F+F-F-FF+F+F-F
    "quadratic_koch": _preset(
        "Quadratic Koch island",
        (_F, _R, _F, _R, _F, _R, _F),
        {_F: (_F, _R, _F, _L, _F, _L, _F, _F, _R, _F, _R, _F, _L, _F)},
        90,
        2,
    ),
    # FX, X -> X+YF+, Y -> -FX-Y
    "dragon": _preset(
        "Heighway dragon",
        (_F, _X),
        {_X: (_X, _R, _Y, _F, _R), _Y: (_L, _F, _X, _L, _Y)},
        90,
        10,
    ),
    # X -> +YF-XFX-FY+, Y -> -XF+YFY+FX-
    "hilbert": _preset(
        "Hilbert curve",
        (_X,),
        {
            _X: (_R, _Y, _F, _L, _X, _F, _X, _L, _F, _Y, _R),
            _Y: (_L, _X, _F, _R, _Y, _F, _Y, _R, _F, _X, _L),
        },
        90,
        5,
    ),
    # F -> +F--F+
    "levy_c": _preset("Levy C curve", (_F,), {_F: (_R, _F, _L, _L, _F, _R)}, 45, 10),
    # F -> FfF, f -> fff
    "cantor": _preset(
        "Cantor dust", (_F,), {_F: (_F, _f, _F), _f: (_f, _f, _f)}, 0, 4
    ),
    # FX, X -> X+YF++YF-FX--FXFX-YF+, Y -> -FX+YFYF++YF+FX--FX-Y
    "gosper": _preset(
        "Gosper flowsnake",
        (_F, _X),
        {
            _X: (
                _X, _R, _Y, _F, _R, _R, _Y, _F, _L, _F, _X,
                _L, _L, _F, _X, _F, _X, _L, _Y, _F, _R,
            ),
            _Y: (
                _L, _F, _X, _R, _Y, _F, _Y, _F, _R, _R, _Y,
                _F, _R, _F, _X, _L, _L, _F, _X, _L, _Y,
            ),
        },
        60,
        3,
    ),
}


DEFAULT_MAX_SYMBOLS = 1_000_000


def _check_size(seq: Sequence[Any], gen: int, max_symbols: int) -> None:
    _require(
        len(seq) <= max_symbols,
        f"generation {gen} has {len(seq)} symbols, exceeding max_symbols={max_symbols}",
    )


def capped_generations(
    rule: Rule[S], axiom: Iterable[S], generations: int, max_symbols: int
) -> Iterator[list[S]]:
    """Generations 0..``generations``; ConfigError once one outgrows the cap."""
    _require(generations >= 0, "generations must be >= 0")
    _require(max_symbols > 0, "max_symbols must be > 0")
    gens = itertools.islice(iter_generations(rule, axiom), generations + 1)
    for gen, seq in enumerate(gens):
        _check_size(seq, gen, max_symbols)
        yield seq


def expand_capped(
    rule: Rule[S], axiom: Iterable[S], generations: int, max_symbols: int
) -> list[S]:
    seq: list[S] = []
    for seq in capped_generations(rule, axiom, generations, max_symbols):
        pass
    return seq


def run_preset(
    preset: Preset,
    *,
    generations: int | None = None,
    angle_deg: float | None = None,
    max_symbols: int = DEFAULT_MAX_SYMBOLS,
) -> tuple[list[DrawSymbol], list[PathSegment]]:
    n = preset.generations if generations is None else generations
    symbols = expand_capped(preset.rule, preset.axiom, n, max_symbols)
    angle = preset.angle_deg if angle_deg is None else angle_deg
    return symbols, turtle(symbols, angle)


# -------------------------
# SVG export
# -------------------------


@dataclass(frozen=True)
class SvgOptions:
    scale: float = 10.0
    margin: float = 10.0
    precision: int = 3
    flip_y: bool = True
    stroke: str = "#000"
    stroke_width: float = 1.0


def compute_bounds(
    segments: Sequence[PathSegment],
) -> tuple[float, float, float, float]:
    """Bounds of the origin plus every segment destination."""
    _require(len(segments) > 0, "No drawable geometry produced.")
    xs = [ORIGIN.x] + [seg.x for seg in segments]
    ys = [ORIGIN.y] + [seg.y for seg in segments]
    return (min(xs), min(ys), max(xs), max(ys))


def _fmt(x: float, precision: int) -> str:
    s = f"{x:.{precision}f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    # -0.0 and tiny negatives round to "-0"
    return "0" if s in ("-0", "") else s


def segments_to_path_data(
    segments: Iterable[PathSegment], *, scale: float = 1.0, precision: int = 3
) -> str:
    """Build an SVG path ``d`` string; the path always starts with ``M0,0``."""
    parts = [f"M{_fmt(ORIGIN.x, precision)},{_fmt(ORIGIN.y, precision)}"]
    for seg in segments:
        cmd = "L" if seg.kind == "line_to" else "M"
        parts.append(
            f"{cmd}{_fmt(seg.x * scale, precision)},{_fmt(seg.y * scale, precision)}"
        )
    return " ".join(parts)


def svg_document(
    segments: Sequence[PathSegment], opts: SvgOptions, title: str | None = None
) -> str:
    """A standalone SVG document holding ``segments`` as a single path."""
    _require(opts.scale > 0, "svg.scale must be > 0")
    min_x, min_y, max_x, max_y = (v * opts.scale for v in compute_bounds(segments))
    min_x, min_y = min_x - opts.margin, min_y - opts.margin
    max_x, max_y = max_x + opts.margin, max_y + opts.margin
    _require(
        max_x > min_x and max_y > min_y,
        "Degenerate bounds (width or height is zero); "
        "set svg.margin > 0 to render collinear geometry.",
    )

    p = opts.precision
    view_box = " ".join(
        _fmt(v, p) for v in (min_x, min_y, max_x - min_x, max_y - min_y)
    )
    # Mirror about the viewBox centre line so +y points up.
    transform = (
        f' transform="matrix(1 0 0 -1 0 {_fmt(min_y + max_y, p)})"'
        if opts.flip_y
        else ""
    )
    d = segments_to_path_data(segments, scale=opts.scale, precision=p)

    out = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="{view_box}">',
    ]
    if title:
        out.append(f"  <title>{xml_escape(title)}</title>")
    stroke = xml_escape(opts.stroke, {'"': "&quot;"})
    out.append(
        f'  <path d="{d}"{transform} fill="none" stroke="{stroke}" '
        f'stroke-width="{_fmt(opts.stroke_width, p)}" stroke-linejoin="round" />'
    )
    out.append("</svg>")
    return "\n".join(out) + "\n"


def write_svg(
    segments: Sequence[PathSegment],
    out_path: str,
    opts: SvgOptions,
    title: str | None = None,
) -> None:
    document = svg_document(segments, opts, title)
    with open(out_path, "w", encoding="utf-8") as f:
        f.write(document)


# -------------------------
# Config parsing
# -------------------------


@dataclass(frozen=True)
class RenderConfig:
    name: str
    preset: str
    generations: int
    angle_deg: float
    max_symbols: int
    svg: SvgOptions


def parse_svg_options(obj: Any) -> SvgOptions:
    svg = _as_dict(obj, "svg")
    d = SvgOptions()
    opts = SvgOptions(
        scale=_as_float(svg.get("scale", d.scale), "svg.scale"),
        margin=_as_float(svg.get("margin", d.margin), "svg.margin"),
        precision=_as_int(svg.get("precision", d.precision), "svg.precision"),
        flip_y=_as_bool(svg.get("flip_y", d.flip_y), "svg.flip_y"),
        stroke=_as_str(svg.get("stroke", d.stroke), "svg.stroke"),
        stroke_width=_as_float(
            svg.get("stroke_width", d.stroke_width), "svg.stroke_width"
        ),
    )
    _require(opts.scale > 0, "svg.scale must be > 0")
    _require(opts.margin >= 0, "svg.margin must be >= 0")
    _require(0 <= opts.precision <= 10, "svg.precision must be between 0 and 10")
    _require(opts.stroke_width > 0, "svg.stroke_width must be > 0")
    return opts


def parse_config(
    obj: dict[str, Any], presets: Mapping[str, Preset] = PRESETS
) -> RenderConfig:
    obj = _as_dict(obj, "root")

    preset_name = _as_str(obj.get("preset", ""), "preset")
    _require(
        preset_name in presets,
        f"unknown preset {preset_name!r}; choose from: {', '.join(sorted(presets))}",
    )
    preset = presets[preset_name]

    generations = _as_int(obj.get("generations", preset.generations), "generations")
    _require(generations >= 0, "generations must be >= 0")
    max_symbols = _as_int(obj.get("max_symbols", DEFAULT_MAX_SYMBOLS), "max_symbols")
    _require(max_symbols > 0, "max_symbols must be > 0")

    return RenderConfig(
        name=_as_str(obj.get("name", preset.title), "name"),
        preset=preset_name,
        generations=generations,
        angle_deg=_as_float(obj.get("angle", preset.angle_deg), "angle"),
        max_symbols=max_symbols,
        svg=parse_svg_options(obj.get("svg", {})),
    )


def load_json(path: str) -> dict[str, Any]:
    with open(path, encoding="utf-8") as f:
        text = f.read()
    try:
        obj = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigError(f"{path}: invalid JSON ({e})") from e
    return _as_dict(obj, path)


# -------------------------
# Random ruleset generator
# -------------------------


def _random_word(
    rng: random.Random, length: int, *, p_skip: float = 0.1
) -> tuple[DrawSymbol, ...]:
    """Random replacement word over F, f, + and - containing at least one F."""
    word: list[DrawSymbol] = []
    for _ in range(length):
        r = rng.random()
        if r < p_skip:
            word.append(_f)
        elif r < 0.55:
            word.append(_F)
        elif r < 0.775:
            word.append(_R)
        else:
            word.append(_L)

    if _F not in word:
        word.append(_F)

    return tuple(word)


def generate_random_preset(seed: int | None = None) -> Preset:
    rng = random.Random(seed)

    angle = rng.choice([15, 20, 22.5, 25, 30, 36, 45, 60, 90, 120])
    generations = rng.randint(2, 4)
    word = _random_word(rng, rng.randint(4, 10))

    return Preset(
        title=f"Random DOL-system F -> {format_sequence(word)}",
        axiom=(_F,),
        rule=make_rule(DrawSymbol, {_F: word}, passthrough=True),
        angle_deg=angle,
        generations=generations,
    )


# -------------------------
# CLI / Help
# -------------------------

HELP_EPILOG = r"""
DRAWING ALPHABET

  F  Draw        move one unit forward, emitting a line-to segment
  f  Skip        move one unit forward, emitting a move-to segment
  -  TurnLeft    heading -= angle
  +  TurnRight   heading += angle
  X, Y, Z        inert markers used as scaffolding by rules

  The turtle starts at (0,0) facing +X (heading 0 degrees).

RENDER CONFIG (render / validate)

  {
    "name": string (optional, defaults to the preset title),
    "preset": string (required, see `presets`),
    "generations": integer >= 0 (optional, defaults to the preset's),
    "angle": number degrees (optional, defaults to the preset's),
    "max_symbols": integer > 0 (optional, default 1000000),
    "svg": {
      "scale": number > 0 (default 10, SVG units per turtle step),
      "margin": number >= 0 (default 10),
      "precision": integer 0..10 (default 3),
      "flip_y": boolean (default true),
      "stroke": color string (default "#000"),
      "stroke_width": number > 0 (default 1)
    }
  }

  Rulesets are never read from files; pick one of the built-in presets.
"""


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="dol_turtle.py",
        description="DOL-system expansion and turtle interpretation to SVG paths.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=HELP_EPILOG,
    )

    sub = p.add_subparsers(dest="cmd", required=True)

    pr = sub.add_parser("render", help="Render a JSON render config to an SVG file.")
    pr.add_argument("config", help="Path to the input JSON config.")
    pr.add_argument("output", help="Path to write the SVG output.")
    pr.set_defaults(handler=cmd_render)

    pd = sub.add_parser("draw", help="Render a preset straight to SVG.")
    pd.add_argument("preset", choices=sorted(PRESETS), help="Preset name.")
    pd.add_argument("output", help="Path to write the SVG output.")
    pd.add_argument("-n", "--generations", type=int, default=None)
    pd.add_argument("--angle", type=float, default=None, help="Turn angle in degrees.")
    pd.add_argument("--scale", type=float, default=None, help="SVG units per step.")
    pd.set_defaults(handler=cmd_draw)

    pv = sub.add_parser(
        "validate", help="Validate a JSON config and print a brief summary."
    )
    pv.add_argument("config", help="Path to the input JSON config.")
    pv.set_defaults(handler=cmd_validate)

    pe = sub.add_parser("expand", help="Print each generation of a preset.")
    pe.add_argument("preset", choices=sorted(PRESETS), help="Preset name.")
    pe.add_argument("-n", "--generations", type=int, default=3)
    pe.add_argument(
        "--max-symbols",
        type=int,
        default=DEFAULT_MAX_SYMBOLS,
        help="Stop with an error once a generation grows past this many symbols.",
    )
    pe.set_defaults(handler=cmd_expand)

    pp = sub.add_parser("presets", help="List the built-in presets.")
    pp.set_defaults(handler=cmd_presets)

    pg = sub.add_parser("random", help="Render a random DOL-system to SVG.")
    pg.add_argument("output", help="Path to write the SVG output.")
    pg.add_argument(
        "--seed", type=int, default=None, help="Seed for repeatable randomness."
    )
    pg.add_argument("-n", "--generations", type=int, default=None)
    pg.set_defaults(handler=cmd_random)

    return p


# -------------------------
# Commands
# -------------------------


def render_config(
    cfg: RenderConfig, output_path: str, presets: Mapping[str, Preset] = PRESETS
) -> list[PathSegment]:
    _, segments = run_preset(
        presets[cfg.preset],
        generations=cfg.generations,
        angle_deg=cfg.angle_deg,
        max_symbols=cfg.max_symbols,
    )
    write_svg(segments, output_path, cfg.svg, title=cfg.name)
    return segments


def cmd_render(args: argparse.Namespace) -> None:
    render_config(parse_config(load_json(args.config)), args.output)


def cmd_draw(args: argparse.Namespace) -> None:
    obj: dict[str, Any] = {"preset": args.preset, "svg": {}}
    if args.generations is not None:
        obj["generations"] = args.generations
    if args.angle is not None:
        obj["angle"] = args.angle
    if args.scale is not None:
        obj["svg"]["scale"] = args.scale
    render_config(parse_config(obj), args.output)


_VALIDATE_SYMBOL_LIMIT = 100_000


def cmd_validate(args: argparse.Namespace) -> None:
    cfg = parse_config(load_json(args.config))
    preset = PRESETS[cfg.preset]

    print(f"name: {cfg.name}")
    print(f"preset: {cfg.preset} ({preset.title})")
    print(f"generations: {cfg.generations}")
    print(f"angle: {cfg.angle_deg}")
    print(
        f"svg: scale={cfg.svg.scale} margin={cfg.svg.margin} "
        f"precision={cfg.svg.precision} flip_y={cfg.svg.flip_y}"
    )

    # Expansion honours the config's own cap; only the interpreted part is sampled.
    symbols = expand_capped(
        preset.rule, preset.axiom, cfg.generations, cfg.max_symbols
    )
    sample = symbols[:_VALIDATE_SYMBOL_LIMIT]
    truncated = len(symbols) > len(sample)
    segments = turtle(sample, cfg.angle_deg)
    lines = sum(1 for s in segments if s.kind == "line_to")

    print(f"symbols: {len(symbols)}")
    seg_label = f"{len(segments)}+" if truncated else str(len(segments))
    print(f"segments (sampled): {seg_label} (line_to={lines})")
    if truncated:
        print(
            f"warning: expansion exceeds {_VALIDATE_SYMBOL_LIMIT} symbols; "
            "segment stats cover the first portion only"
        )
    if not lines:
        raise ConfigError("Config produces no drawable geometry")


def cmd_expand(args: argparse.Namespace) -> None:
    preset = PRESETS[args.preset]
    gens = capped_generations(
        preset.rule, preset.axiom, args.generations, args.max_symbols
    )
    for i, seq in enumerate(gens):
        print(f"{i}: {format_sequence(seq)}")


def cmd_presets(args: argparse.Namespace) -> None:
    for name in sorted(PRESETS):
        p = PRESETS[name]
        print(
            f"{name:<16} angle={_fmt(p.angle_deg, 3):<5} "
            f"generations={p.generations:<3} {p.title}"
        )


def cmd_random(args: argparse.Namespace) -> None:
    preset = generate_random_preset(args.seed)
    obj: dict[str, Any] = {"preset": "random"}
    if args.generations is not None:
        obj["generations"] = args.generations
    presets = {"random": preset}
    render_config(parse_config(obj, presets), args.output, presets)


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)
    try:
        args.handler(args)
    except (ConfigError, OSError) as e:
        kind = "Config" if isinstance(e, ConfigError) else "File"
        print(f"{kind} error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
