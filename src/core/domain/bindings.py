"""Default tab key bindings.

The terminal's binding layer owns the real table; this module keeps the
chords it is expected to recognise so the CLI and tests share one source of
truth. Ordinal selection (Alt+1..Alt+9) is listed for completeness even
though no desktop control protocol exposes it.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.domain.models import TabAction


class Modifier(str, Enum):
    CONTROL = "Control"
    SHIFT = "Shift"
    ALT = "Alt"
    SUPER = "Super"


_MODIFIER_ALIASES = {
    "control": Modifier.CONTROL,
    "ctrl": Modifier.CONTROL,
    "shift": Modifier.SHIFT,
    "alt": Modifier.ALT,
    "super": Modifier.SUPER,
    "meta": Modifier.SUPER,
}


class TabSelection(BaseModel):
    """Select a tab by ordinal; `index=None` means the last tab."""

    model_config = ConfigDict(frozen=True)

    index: int | None = Field(default=None, ge=1, le=8)

    @property
    def is_last(self) -> bool:
        return self.index is None

    def label(self) -> str:
        return "select last tab" if self.is_last else f"select tab {self.index}"


class KeyBinding(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str = Field(..., min_length=1, description="Trigger character, lower-case for letters.")
    mods: frozenset[Modifier] = Field(default_factory=frozenset)
    target: TabAction | TabSelection

    def chord(self) -> str:
        ordered = [m.value for m in Modifier if m in self.mods]
        return "+".join([*ordered, self.key.upper()])

    def target_label(self) -> str:
        if isinstance(self.target, TabSelection):
            return self.target.label()
        return self.target.value


def default_bindings() -> list[KeyBinding]:
    control_shift = frozenset({Modifier.CONTROL, Modifier.SHIFT})
    bindings = [
        KeyBinding(key="t", mods=control_shift, target=TabAction.CREATE_TAB),
        KeyBinding(key="]", mods=control_shift, target=TabAction.SELECT_NEXT_TAB),
        KeyBinding(key="[", mods=control_shift, target=TabAction.SELECT_PREVIOUS_TAB),
    ]
    alt = frozenset({Modifier.ALT})
    for ordinal in range(1, 9):
        bindings.append(KeyBinding(key=str(ordinal), mods=alt, target=TabSelection(index=ordinal)))
    bindings.append(KeyBinding(key="9", mods=alt, target=TabSelection()))
    return bindings


def parse_chord(chord: str) -> tuple[str, frozenset[Modifier]]:
    """Parse `"Control+Shift+T"` into `("t", {CONTROL, SHIFT})`.

    The trigger is the last `+`-separated part; a lone `+` key is written
    as `"Control++"` (or just `"+"` without modifiers).
    """

    text = chord.strip()
    if not text:
        raise ValueError("empty key chord")

    if text == "+" or text.endswith("++"):
        head, key = text[:-2] if len(text) > 1 else "", "+"
    elif "+" in text:
        head, _, key = text.rpartition("+")
    else:
        head, key = "", text

    mods: set[Modifier] = set()
    for part in filter(None, (p.strip() for p in head.split("+"))):
        modifier = _MODIFIER_ALIASES.get(part.lower())
        if modifier is None:
            raise ValueError(f"unknown modifier {part!r} in chord {chord!r}")
        mods.add(modifier)

    key = key.strip()
    if not key:
        raise ValueError(f"missing trigger key in chord {chord!r}")
    return key.lower(), frozenset(mods)


def resolve_binding(chord: str, bindings: list[KeyBinding] | None = None) -> KeyBinding | None:
    key, mods = parse_chord(chord)
    for binding in bindings if bindings is not None else default_bindings():
        if binding.key == key and binding.mods == mods:
            return binding
    return None
