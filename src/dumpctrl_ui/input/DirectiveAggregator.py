"""
Turns the set of currently held discrete inputs into a single Directive.

Keyboard keys and on-screen buttons are two sources feeding the same
`press`/`release` entry points. The Directive is recomputed from the whole
set after every change, the listener only hears about actual changes.
"""
import logging
from typing import Callable, Dict, FrozenSet, Hashable, Iterable, Optional, Set

from .Control import Control
from .Directive import Directive

DIAGONALS = (
    (Control.FORWARD, Control.LEFT, Directive.FORWARD_LEFT),
    (Control.FORWARD, Control.RIGHT, Directive.FORWARD_RIGHT),
    (Control.BACKWARD, Control.LEFT, Directive.BACKWARD_LEFT),
    (Control.BACKWARD, Control.RIGHT, Directive.BACKWARD_RIGHT),
)

STRAIGHTS = (
    (Control.FORWARD, Directive.FORWARD),
    (Control.BACKWARD, Directive.BACKWARD),
    (Control.LEFT, Directive.LEFT),
    (Control.RIGHT, Directive.RIGHT),
)


def resolve(controls: Set[Control]) -> Directive:
    """First matching rule wins."""
    if Control.EMERGENCY_STOP in controls:
        return Directive.EMERGENCY_STOP
    if Control.STOP in controls:
        return Directive.STOP
    if Control.LIFT in controls:
        return Directive.ACTUATOR_UP
    if Control.LOWER in controls:
        return Directive.ACTUATOR_DOWN

    for first, second, directive in DIAGONALS:
        if first in controls and second in controls:
            return directive

    for control, directive in STRAIGHTS:
        if control in controls:
            return directive

    return Directive.NONE


class DirectiveAggregator:
    def __init__(
        self,
        bindings: Optional[Dict[Control, Iterable[Hashable]]] = None,
        on_directive: Optional[Callable[[Directive], None]] = None
    ) -> None:
        self.on_directive = on_directive
        self.enabled = False
        self.directive = Directive.NONE

        self.active: Set[Hashable] = set()
        self._lookup: Dict[Hashable, Control] = {}
        self.set_bindings(bindings or {})

    def set_bindings(self, bindings: Dict[Control, Iterable[Hashable]]) -> None:
        lookup: Dict[Hashable, Control] = {}
        for control in Control:
            # Button ids are the control names themselves
            lookup[control.value] = control

        for control, identifiers in bindings.items():
            for identifier in identifiers:
                lookup[identifier] = control

        self._lookup = lookup
        self.active = {i for i in self.active if i in lookup}
        self._recompute()

    def set_enabled(self, enabled: bool) -> None:
        self.enabled = enabled
        if not enabled:
            self.clear()

    def is_bound(self, identifier: Hashable) -> bool:
        return identifier in self._lookup

    def control_for(self, identifier: Hashable) -> Optional[Control]:
        return self._lookup.get(identifier)

    def press(self, identifier: Hashable) -> Directive:
        if self.enabled and identifier in self._lookup:
            self.active.add(identifier)
            self._recompute()

        return self.directive

    def release(self, identifier: Hashable) -> Directive:
        if identifier in self.active:
            self.active.discard(identifier)
            self._recompute()

        return self.directive

    def pointer_leave(self, identifier: Hashable) -> Directive:
        """Pointer left a held button without a release event."""
        return self.release(identifier)

    def clear(self) -> Directive:
        if self.active:
            self.active.clear()
            self._recompute()

        return self.directive

    def active_controls(self) -> FrozenSet[Control]:
        return frozenset(self._lookup[i] for i in self.active)

    def _recompute(self) -> None:
        directive = resolve(set(self.active_controls()))
        if directive == self.directive:
            return

        logging.debug(f"Directive changed from '{self.directive.value}' to '{directive.value}'")
        self.directive = directive

        if self.on_directive:
            self.on_directive(directive)

    def __repr__(self) -> str:
        return (f"<DirectiveAggregator(directive={self.directive.value}, "
                f"active={sorted(map(str, self.active))}, enabled={self.enabled})>")
